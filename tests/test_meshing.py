"""Tests for wall, door and window meshing."""

import math

import pytest

from floor_plan_converter.exceptions import InvalidScaleError
from floor_plan_converter.meshing import door_to_mesh, wall_to_mesh, window_to_mesh
from floor_plan_converter.models import ConversionParams, Door, Wall, Window


def make_wall(x1, y1, x2, y2, **kwargs):
    return Wall(id="w1", start={"x": x1, "y": y1}, end={"x": x2, "y": y2}, **kwargs)


def test_wall_along_x():
    """Test a horizontal wall at unit scale."""
    mesh = wall_to_mesh(make_wall(0, 0, 5, 0, thickness=0.2, height=2.5), 1.0)

    assert mesh.id == "w1"
    assert mesh.position == pytest.approx((2.5, 1.25, 0.0))
    assert mesh.size == pytest.approx((5.0, 2.5, 0.2))
    assert mesh.rotation == pytest.approx((0.0, 0.0, 0.0))


def test_wall_along_planar_y():
    """Test that a wall going down the plan rotates to -pi/2."""
    mesh = wall_to_mesh(make_wall(0, 0, 0, 5), 1.0)

    assert mesh.rotation[1] == pytest.approx(math.atan2(-5, 0))
    assert mesh.rotation[1] == pytest.approx(-math.pi / 2)
    assert mesh.position == pytest.approx((0.0, 1.25, -2.5))
    assert mesh.size[0] == pytest.approx(5.0)


def test_wall_diagonal():
    """Test length and angle of a diagonal wall."""
    mesh = wall_to_mesh(make_wall(0, 0, 3, 4), 1.0)

    assert mesh.size[0] == pytest.approx(5.0)
    assert mesh.rotation[1] == pytest.approx(math.atan2(-4, 3))


def test_wall_thickness_not_scaled():
    """Test that length is scaled but thickness is kept in meters."""
    mesh = wall_to_mesh(make_wall(0, 0, 500, 0, thickness=0.2), 0.01)

    assert mesh.size[0] == pytest.approx(5.0)
    assert mesh.size[2] == pytest.approx(0.2)
    assert mesh.position == pytest.approx((2.5, 1.25, 0.0))


def test_wall_height_is_used():
    """Test that a custom wall height sets box height and elevation."""
    mesh = wall_to_mesh(make_wall(0, 0, 1, 0, height=3.0), 1.0)

    assert mesh.size[1] == pytest.approx(3.0)
    assert mesh.position[1] == pytest.approx(1.5)


def test_zero_length_wall_skipped():
    """Test that a zero-length wall produces no mesh."""
    assert wall_to_mesh(make_wall(2, 2, 2, 2), 1.0) is None


def test_wall_invalid_scale():
    """Test that wall meshing rejects a non-positive scale."""
    with pytest.raises(InvalidScaleError):
        wall_to_mesh(make_wall(0, 0, 1, 0), 0)


def test_horizontal_door():
    """Test a horizontal door mesh."""
    door = Door(id="d1", position={"x": 2.5, "y": 0}, width=0.9, direction="horizontal")
    mesh = door_to_mesh(door, 1.0)

    assert mesh.position == pytest.approx((2.5, 1.05, 0.0))
    assert mesh.size == pytest.approx((0.9, 2.1, 0.1))
    assert mesh.rotation == (0.0, 0.0, 0.0)


def test_vertical_door_rotated():
    """Test that a vertical door is turned a quarter turn."""
    door = Door(id="d1", position={"x": 0, "y": 0}, width=0.9, direction="vertical")
    mesh = door_to_mesh(door, 1.0)

    assert mesh.rotation == pytest.approx((0.0, math.pi / 2, 0.0))


def test_unknown_door_direction_identity_rotation():
    """Test that an unrecognized direction yields identity rotation."""
    door = Door(id="d1", position={"x": 0, "y": 0}, width=0.9, direction="sideways")
    mesh = door_to_mesh(door, 1.0)

    assert mesh.rotation == (0.0, 0.0, 0.0)


def test_door_width_scaled_height_not():
    """Test that door width is scaled and height is kept metric."""
    door = Door(id="d1", position={"x": 100, "y": 200}, width=90, height=2.0)
    mesh = door_to_mesh(door, 0.01)

    assert mesh.position == pytest.approx((1.0, 1.0, -2.0))
    assert mesh.size == pytest.approx((0.9, 2.0, 0.1))


def test_window_mesh():
    """Test window centered between sill and head."""
    window = Window(id="win1", position={"x": 5, "y": 2.5}, width=1.2, height=1.5, from_floor=1.0)
    mesh = window_to_mesh(window, 1.0)

    assert mesh.position == pytest.approx((5.0, 1.75, -2.5))
    assert mesh.size == pytest.approx((1.2, 1.5, 0.1))
    assert mesh.rotation == (0.0, 0.0, 0.0)


def test_window_custom_depth():
    """Test that the opening depth comes from the parameters."""
    window = Window(id="win1", position={"x": 0, "y": 0}, width=1.0)
    mesh = window_to_mesh(window, 1.0, ConversionParams(opening_depth=0.25))

    assert mesh.size[2] == pytest.approx(0.25)


def test_wall_overflowing_length_skipped():
    """Test that a wall whose length overflows produces no mesh."""
    assert wall_to_mesh(make_wall(-1e308, 0, 1e308, 0), 1.0) is None


def test_wall_overflowing_endpoint_skipped():
    """Test that a wall whose scaled endpoint overflows produces no mesh."""
    assert wall_to_mesh(make_wall(0, 0, 1e308, 0), 10.0) is None


def test_wall_collapsing_after_scaling_skipped():
    """Test that distinct endpoints that collapse after scaling are skipped."""
    assert wall_to_mesh(make_wall(0, 0, 1e-300, 0), 1e-300) is None


def test_door_overflowing_width_skipped():
    """Test that a door whose scaled width overflows produces no mesh."""
    door = Door(id="d1", position={"x": 0, "y": 0}, width=1e308)

    assert door_to_mesh(door, 10.0) is None


def test_window_overflowing_position_skipped():
    """Test that a window whose scaled position overflows produces no mesh."""
    window = Window(id="win1", position={"x": 0, "y": 1e308}, width=1.0)

    assert window_to_mesh(window, 10.0) is None
