# matviz

matviz draws linear-algebra operations as coloured tiles in a pygame
window. A matrix is a grid of tiles and a vector is a column of tiles. A
matrix-vector multiplication places the vector to the right of the
matrix and draws both.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Running

Open the matrix-vector multiplication window (800×600):

```
matviz
```

It loads a sprite shader and two textures when it starts. By default it
reads them from these paths, relative to the working directory:

- `--vertex-shader` (default `src/shaders/sprite.vs`)
- `--fragment-shader` (default `src/shaders/sprite.frag`)
- `--face-texture` (default `src/textures/orange.png`)
- `--block-texture` (default `src/textures/block.png`)

`--frames N` stops after N frames. Escape or closing the window quits.
If a file cannot be read, or a shader fails its checks, the program
prints the error and exits with status 1.

There is also a demo that draws a 10×6 matrix as rows of small
rectangles seen through a swinging perspective camera:

```
matviz-viz-demo
```

Its shaders default to `src/shadersProgram/shader.vs` and
`src/shadersProgram/shader.fs` and can be set with `--vertex-shader` and
`--fragment-shader`; `--frames N` stops after N frames. In the demo, T
transposes the matrix, Backspace prints the window's height and width,
and Escape quits.

## Using the library

The building blocks work without opening a window.

- `matviz.texture.Texture2D`: image pixels as a numpy array, with format, wrap and filter settings. `generate()` converts between RGB and RGBA.
- `matviz.shader.Shader`: a shader program. `compile()` checks each stage, `set_float`, `set_integer`, `set_bool`, `set_vector2f`/`3f`/`4f` and `set_matrix4` store uniform values, and `uniform()` reads them back. `ShaderError` is raised when a check fails.
- `matviz.resource_manager.ResourceManager`: loads shaders and image files and keeps them under names.
- `matviz.sprite_renderer`: 4×4 matrix helpers (`translate`, `rotate`, `scale`, `ortho`, `perspective`, `look_at`, `model_matrix`) and `SpriteRenderer`, which records every sprite drawn in `draws` and paints it on a pygame surface when given one.
- `matviz.game_object.GameObject`: one tile, with position, size, colour and rotation.
- `matviz.feature_object.FeatureObject`: a vector laid out as a column of tiles.
- `matviz.matrix_object.MatrixObject`: a matrix laid out as a grid of tiles.
- `matviz.transitions`: `IdentityTransition` and `FadeTransition`, which sets a tile's alpha from an angle in degrees and draws it.
- `matviz.operations.MatVecMul`: places a vector beside a matrix and draws both.
- `matviz.animation.Animation`: holds the objects and renders one frame at a time.
- `matviz.rectangle.RectangleGraphics`, `matviz.vector_viz.VectorViz` and `matviz.matrix_viz.MatrixViz`: the rectangles, vectors and transposable matrices of the demo.
- `matviz.camera.Camera`: a fly-through camera driven by keyboard, mouse movement and scroll.
- `matviz.entity` and `matviz.scene`: entities with input and graphics components, and a `Scene` that updates them in a frame loop.

For example, the projection and the model matrix that places a 50×20
tile at (100, 100):

```python
from matviz.sprite_renderer import model_matrix, ortho

projection = ortho(0.0, 800.0, 600.0, 0.0, -1.0, 1.0)
model = model_matrix((100.0, 100.0), (50.0, 20.0), 0.0)
```

And a shader compiled from source strings:

```python
from matviz.shader import Shader

vertex = "uniform mat4 model; void main() { }"
fragment = "uniform vec4 spriteColor; void main() { }"
shader = Shader().compile(vertex, fragment)
shader.set_vector4f("spriteColor", (1.0, 0.5, 0.0, 1.0))
print(shader.uniform("spriteColor"))
```

## What it does not do

- No GPU rendering. Shader sources are only checked (non-empty, balanced
  brackets, a `main` function, consistent uniform declarations) and
  uniform values are stored; the shaders are never run. Drawing is done
  by painting tinted, scaled images and polygons with pygame.
- No shader or texture files are included. Both commands need them at
  the paths above, or given with the options.
- The fade angle in `Animation` advances every frame, but the window
  does not show a fade.