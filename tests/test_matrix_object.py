import pytest

from matviz.matrix_object import MatrixObject
from matviz.resource_manager import ResourceManager
from matviz.shader import Shader
from matviz.sprite_renderer import SpriteRenderer
from matviz.texture import Texture2D

VERTEX = "uniform mat4 model;\nvoid main() { }\n"
FRAGMENT = "uniform vec4 spriteColor;\nvoid main() { }\n"


@pytest.fixture
def resources():
    manager = ResourceManager()
    manager.textures["block"] = Texture2D()
    return manager


def test_load_shape(resources):
    matrix = MatrixObject()
    matrix.load(5, 10, 800, 300, resources)
    assert len(matrix.bricks) == 5
    assert all(len(line) == 10 for line in matrix.bricks)


def test_rows_and_columns_are_spaced(resources):
    matrix = MatrixObject()
    matrix.load(3, 4, 600, 400, resources)
    width, height = matrix.bricks[0][0].size
    assert matrix.bricks[1][0].position[0] - matrix.bricks[0][0].position[0] == pytest.approx(width + 15)
    assert matrix.bricks[0][1].position[1] - matrix.bricks[0][0].position[1] == pytest.approx(height + 1)
    assert matrix.bricks[0][0].position == (0.0, 0.0)


def test_row_colours_shift_green(resources):
    matrix = MatrixObject()
    matrix.load(3, 2, 600, 400, resources)
    assert matrix.bricks[0][0].color == (0.2, 0.0, 1.0, 1.0)
    greens = [line[0].color[1] for line in matrix.bricks]
    assert greens == sorted(greens)
    assert all(line[0].color == line[1].color for line in matrix.bricks)


def test_height_uses_whole_division(resources):
    matrix = MatrixObject()
    matrix.load(1, 10, 10, 25, resources)
    assert matrix.bricks[0][0].size[1] == pytest.approx(0.6)


def test_load_twice_appends(resources):
    matrix = MatrixObject()
    matrix.load(2, 3, 100, 100, resources)
    matrix.load(2, 3, 100, 100, resources)
    assert len(matrix.bricks) == 4


def test_load_rejects_zero_dimensions(resources):
    with pytest.raises(ValueError):
        MatrixObject().load(2, 0, 100, 100, resources)


def test_draw_draws_every_brick(resources):
    renderer = SpriteRenderer(Shader().compile(VERTEX, FRAGMENT))
    matrix = MatrixObject()
    matrix.load(5, 10, 800, 300, resources)
    matrix.draw(renderer)
    assert len(renderer.draws) == 50