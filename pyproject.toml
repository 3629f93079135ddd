[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matviz"
version = "0.1.0"
description = "Visualisation of linear-algebra operations such as matrix-vector multiplication, drawn as tiles with pygame"
requires-python = ">=3.10"
keywords = ["linear algebra", "visualisation", "matrix", "vector", "pygame", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Presentation",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
matviz = "matviz.app:main"
matviz-viz-demo = "matviz.viz_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["matviz"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
