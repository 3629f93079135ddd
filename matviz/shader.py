"""Shader programs: source checking, uniform declarations and uniform values."""

import itertools
import re
from pathlib import Path
from typing import ClassVar, Optional

import numpy as np

_program_ids = itertools.count(1)

_COMMENTS = re.compile(r"//[^\n]*|/\*.*?\*/", re.S)
_MAIN = re.compile(r"\bvoid\s+main\s*\(\s*(?:void)?\s*\)")
_UNIFORM = re.compile(r"\buniform\s+(?:(?:lowp|mediump|highp)\s+)?(\w+)\s+([^;]+);")
_PAIRS = {")": "(", "}": "{", "]": "["}


class ShaderError(Exception):
    """A shader stage failed to compile or the program failed to link."""

    def __init__(self, stage, log):
        self.stage = stage
        self.log = log
        kind = "Link" if stage == "PROGRAM" else "Compile"
        super().__init__(f"{kind}-time error: Type: {stage}\n{log}")


def _balanced(text: str) -> bool:
    stack = []
    for char in text:
        if char in "({[":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def _check_stage(source: Optional[str], stage: str) -> dict:
    """Check one stage's source and return its uniform declarations."""
    if source is None or not source.strip():
        raise ShaderError(stage, "empty shader source")
    text = _COMMENTS.sub("", source)
    if not _balanced(text):
        raise ShaderError(stage, "unbalanced brackets")
    if not _MAIN.search(text):
        raise ShaderError(stage, "no definition of main")
    uniforms = {}
    for match in _UNIFORM.finditer(text):
        type_name = match.group(1)
        for declarator in match.group(2).split(","):
            name = declarator.split("[", 1)[0].split("=", 1)[0].strip()
            if not name:
                continue
            if uniforms.get(name, type_name) != type_name:
                raise ShaderError(stage, f"uniform {name!r} redeclared with a different type")
            uniforms[name] = type_name
    return uniforms


def _is_integer_type(type_name: str) -> bool:
    return type_name in {"int", "uint", "bool"} or re.fullmatch(r"[iu]?sampler\w*", type_name) is not None


class Shader:
    """A linked shader program holding the values of its uniforms."""

    current: ClassVar[Optional["Shader"]] = None

    def __init__(self):
        self.id: Optional[int] = None
        self.uniform_types: dict = {}
        self._values: dict = {}

    @classmethod
    def from_files(cls, vertex_path, fragment_path, geometry_path=None) -> "Shader":
        """Read the stage sources from files and compile them."""
        try:
            vertex = Path(vertex_path).read_text()
            fragment = Path(fragment_path).read_text()
            geometry = Path(geometry_path).read_text() if geometry_path is not None else None
        except OSError as exc:
            raise ShaderError("FILE", f"Failed to read shader files: {exc}") from exc
        return cls().compile(vertex, fragment, geometry)

    def use(self) -> "Shader":
        """Make this the current program."""
        self._require_compiled()
        Shader.current = self
        return self

    def compile(self, vertex_source, fragment_source, geometry_source=None) -> "Shader":
        """Check every stage, link them and reset the uniform values."""
        stages = [("VERTEX", vertex_source), ("FRAGMENT", fragment_source)]
        if geometry_source is not None:
            stages.append(("GEOMETRY", geometry_source))
        merged: dict = {}
        for stage, source in stages:
            for name, type_name in _check_stage(source, stage).items():
                if merged.get(name, type_name) != type_name:
                    raise ShaderError(
                        "PROGRAM",
                        f"uniform {name!r} declared as {merged[name]} and {type_name}",
                    )
                merged[name] = type_name
        self.id = next(_program_ids)
        self.uniform_types = merged
        self._values = {}
        return self

    def uniform(self, name):
        """Return the value last set for a uniform."""
        try:
            value = self._values[name]
        except KeyError:
            raise KeyError(f"uniform {name!r} has not been set") from None
        return value.copy() if isinstance(value, np.ndarray) else value

    def set_float(self, name, value, use_shader=False):
        self._store(name, float(value), lambda t: t in {"float", "bool"}, use_shader)

    def set_integer(self, name, value, use_shader=False):
        self._store(name, int(value), _is_integer_type, use_shader)

    def set_bool(self, name, value, use_shader=False):
        self._store(name, bool(value), lambda t: t in {"bool", "int", "uint"}, use_shader)

    def set_vector2f(self, name, value, use_shader=False):
        self._store(name, self._vector(value, 2), lambda t: t == "vec2", use_shader)

    def set_vector3f(self, name, value, use_shader=False):
        self._store(name, self._vector(value, 3), lambda t: t == "vec3", use_shader)

    def set_vector4f(self, name, value, use_shader=False):
        self._store(name, self._vector(value, 4), lambda t: t == "vec4", use_shader)

    def set_matrix4(self, name, matrix, use_shader=False):
        array = np.array(matrix, dtype=np.float32)
        if array.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
        self._store(name, array, lambda t: t == "mat4", use_shader)

    @staticmethod
    def _vector(value, size: int) -> tuple:
        components = tuple(float(component) for component in value)
        if len(components) != size:
            raise ValueError(f"expected {size} components, got {len(components)}")
        return components

    def _require_compiled(self) -> None:
        if self.id is None:
            raise ShaderError("PROGRAM", "shader has not been compiled")

    def _store(self, name, value, accepts, use_shader) -> None:
        if use_shader:
            self.use()
        self._require_compiled()
        declared = self.uniform_types.get(name)
        if declared is not None and not accepts(declared):
            raise TypeError(f"uniform {name!r} is declared as {declared}")
        self._values[name] = value