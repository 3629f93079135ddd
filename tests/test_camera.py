import numpy as np
import pytest

from matviz.camera import (
    MAX_ZOOM,
    MIN_ZOOM,
    PITCH_LIMIT,
    SENSITIVITY,
    SPEED,
    YAW,
    ZOOM,
    Camera,
    CameraMovement,
)


def test_default_orientation_looks_down_negative_z():
    camera = Camera()
    assert np.allclose(camera.front, [0.0, 0.0, -1.0])
    assert np.allclose(camera.right, [1.0, 0.0, 0.0])
    assert np.allclose(camera.up, [0.0, 1.0, 0.0])
    assert camera.yaw == YAW
    assert camera.zoom == ZOOM


def test_basis_is_orthonormal_after_turning():
    camera = Camera()
    camera.process_mouse_movement(123.0, -217.0)
    for vector in (camera.front, camera.right, camera.up):
        assert np.linalg.norm(vector) == pytest.approx(1.0)
    assert np.dot(camera.front, camera.right) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(camera.front, camera.up) == pytest.approx(0.0, abs=1e-12)


def test_forward_then_backward_returns_to_start():
    camera = Camera(position=(1.0, 2.0, 3.0))
    camera.process_keyboard(CameraMovement.FORWARD, 0.4)
    assert not np.allclose(camera.position, [1.0, 2.0, 3.0])
    camera.process_keyboard(CameraMovement.BACKWARD, 0.4)
    assert np.allclose(camera.position, [1.0, 2.0, 3.0])


def test_forward_moves_along_front_by_speed():
    camera = Camera()
    camera.process_keyboard(CameraMovement.FORWARD, 1.0)
    assert np.allclose(camera.position, camera.front * SPEED)


def test_left_and_right_are_opposite():
    camera = Camera()
    camera.process_keyboard(CameraMovement.RIGHT, 2.0)
    assert np.allclose(camera.position, camera.right * SPEED * 2.0)
    camera.process_keyboard(CameraMovement.LEFT, 2.0)
    assert np.allclose(camera.position, np.zeros(3))


def test_mouse_movement_scales_by_sensitivity():
    camera = Camera()
    camera.process_mouse_movement(10.0, 5.0)
    assert camera.yaw == pytest.approx(YAW + 10.0 * SENSITIVITY)
    assert camera.pitch == pytest.approx(5.0 * SENSITIVITY)


@pytest.mark.parametrize("offset", [5000.0, -5000.0])
def test_pitch_is_constrained(offset):
    camera = Camera()
    camera.process_mouse_movement(0.0, offset)
    assert abs(camera.pitch) == PITCH_LIMIT


def test_pitch_unconstrained_when_disabled():
    camera = Camera()
    camera.process_mouse_movement(0.0, 5000.0, constrain_pitch=False)
    assert camera.pitch == pytest.approx(5000.0 * SENSITIVITY)


def test_scroll_zoom_and_clamping():
    camera = Camera()
    camera.process_mouse_scroll(10.0)
    assert camera.zoom == pytest.approx(ZOOM - 10.0)
    camera.process_mouse_scroll(1000.0)
    assert camera.zoom == MIN_ZOOM
    camera.process_mouse_scroll(-1000.0)
    assert camera.zoom == MAX_ZOOM


def test_view_matrix_maps_position_to_origin():
    camera = Camera(position=(3.0, -1.0, 7.0))
    camera.process_mouse_movement(40.0, 20.0)
    view = camera.view_matrix()
    eye = view @ np.append(camera.position, 1.0)
    assert np.allclose(eye[:3], 0.0)
    ahead = view @ np.append(camera.position + camera.front, 1.0)
    assert np.allclose(ahead[:3], [0.0, 0.0, -1.0])


def test_bad_position_rejected():
    with pytest.raises(ValueError):
        Camera(position=(1.0, 2.0))