import math

import numpy as np
import pygame
import pytest

from matviz.shader import Shader, ShaderError
from matviz.sprite_renderer import (
    QUAD_VERTICES,
    SpriteRenderer,
    look_at,
    model_matrix,
    ortho,
    perspective,
    rotate,
    scale,
    translate,
)
from matviz.texture import Texture2D

VERTEX = "uniform mat4 model;\nuniform mat4 projection;\nvoid main() { }\n"
FRAGMENT = "uniform sampler2D image;\nuniform vec4 spriteColor;\nvoid main() { }\n"


@pytest.fixture
def shader():
    return Shader().compile(VERTEX, FRAGMENT)


def apply(matrix, point):
    return (matrix @ np.array([*point, 1.0]))[:3]


def test_translate_moves_origin():
    result = apply(translate(np.identity(4), (1.0, 2.0, 3.0)), (0.0, 0.0, 0.0))
    assert np.allclose(result, [1.0, 2.0, 3.0])


def test_translate_rejects_wrong_length():
    with pytest.raises(ValueError):
        translate(np.identity(4), (1.0, 2.0))


def test_rotate_quarter_turn_about_z():
    result = apply(rotate(np.identity(4), math.pi / 2, (0.0, 0.0, 1.0)), (1.0, 0.0, 0.0))
    assert np.allclose(result, [0.0, 1.0, 0.0])


def test_rotate_preserves_length():
    point = np.array([3.0, -4.0, 2.0])
    result = apply(rotate(np.identity(4), 1.234, (1.0, 2.0, 3.0)), point)
    assert np.linalg.norm(result) == pytest.approx(np.linalg.norm(point))


def test_rotate_zero_axis_raises():
    with pytest.raises(ValueError):
        rotate(np.identity(4), 1.0, (0.0, 0.0, 0.0))


def test_scale_multiplies_components():
    result = apply(scale(np.identity(4), (2.0, 3.0, 4.0)), (1.0, 1.0, 1.0))
    assert np.allclose(result, [2.0, 3.0, 4.0])


def test_ortho_maps_screen_corners_to_device_corners():
    projection = ortho(0.0, 800.0, 600.0, 0.0, -1.0, 1.0)
    assert np.allclose(apply(projection, (0.0, 0.0, 0.0))[:2], [-1.0, 1.0])
    assert np.allclose(apply(projection, (800.0, 600.0, 0.0))[:2], [1.0, -1.0])


def test_ortho_rejects_empty_volume():
    with pytest.raises(ValueError):
        ortho(0.0, 0.0, 1.0, 0.0, -1.0, 1.0)


def test_perspective_maps_near_and_far_planes():
    projection = perspective(math.radians(45.0), 800.0 / 600.0, 0.1, 100.0)
    near = projection @ np.array([0.0, 0.0, -0.1, 1.0])
    far = projection @ np.array([0.0, 0.0, -100.0, 1.0])
    assert near[2] / near[3] == pytest.approx(-1.0)
    assert far[2] / far[3] == pytest.approx(1.0)


def test_look_at_puts_eye_at_origin_and_centre_ahead():
    view = look_at((0.0, 0.0, 10.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(apply(view, (0.0, 0.0, 10.0)), [0.0, 0.0, 0.0])
    assert np.allclose(apply(view, (0.0, 0.0, 0.0)), [0.0, 0.0, -10.0])


def test_model_matrix_without_rotation_spans_position_to_size():
    model = model_matrix((10.0, 20.0), (30.0, 40.0), 0.0)
    assert np.allclose(apply(model, (0.0, 0.0, 0.0))[:2], [10.0, 20.0])
    assert np.allclose(apply(model, (1.0, 1.0, 0.0))[:2], [40.0, 60.0])


def test_model_matrix_half_turn_swaps_corners_about_centre():
    model = model_matrix((10.0, 20.0), (30.0, 40.0), 180.0)
    assert np.allclose(apply(model, (0.0, 0.0, 0.0))[:2], [40.0, 60.0])
    assert np.allclose(apply(model, (0.5, 0.5, 0.0))[:2], [25.0, 40.0])


def test_quad_vertices_cover_unit_square():
    assert QUAD_VERTICES.shape == (6, 4)
    assert QUAD_VERTICES[:, :2].min() == 0.0
    assert QUAD_VERTICES[:, :2].max() == 1.0


def test_draw_sprite_sets_uniforms_and_binds_texture(shader):
    renderer = SpriteRenderer(shader)
    texture = Texture2D()
    draw = renderer.draw_sprite(texture, (5.0, 6.0), (7.0, 8.0), 0.0, (0.1, 0.2, 0.3, 0.4))
    assert renderer.draws == [draw]
    assert shader.uniform("spriteColor") == (0.1, 0.2, 0.3, 0.4)
    assert np.allclose(shader.uniform("model"), model_matrix((5.0, 6.0), (7.0, 8.0), 0.0))
    assert Texture2D.active is texture
    assert Shader.current is shader


def test_draw_sprite_defaults(shader):
    renderer = SpriteRenderer(shader)
    draw = renderer.draw_sprite(Texture2D(), (0.0, 0.0))
    assert draw.size == (10.0, 10.0)
    assert draw.color == (1.0, 1.0, 1.0, 1.0)
    assert draw.rotate == 0.0


def test_draw_sprite_with_uncompiled_shader_raises():
    renderer = SpriteRenderer(Shader())
    with pytest.raises(ShaderError):
        renderer.draw_sprite(Texture2D(), (0.0, 0.0))


def test_draw_sprite_paints_surface(shader):
    surface = pygame.Surface((50, 50))
    renderer = SpriteRenderer(shader, surface=surface)
    renderer.draw_sprite(Texture2D(), (10.0, 10.0), (20.0, 20.0), 0.0, (1.0, 0.0, 0.0, 1.0))
    assert tuple(surface.get_at((20, 20)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)


def test_draw_sprite_paints_textured_sprite(shader):
    surface = pygame.Surface((20, 20))
    texture = Texture2D().generate(1, 1, bytes([0, 255, 0]))
    renderer = SpriteRenderer(shader, surface=surface)
    renderer.draw_sprite(texture, (0.0, 0.0), (20.0, 20.0), 0.0, (1.0, 1.0, 1.0, 1.0))
    assert tuple(surface.get_at((10, 10)))[:3] == (0, 255, 0)