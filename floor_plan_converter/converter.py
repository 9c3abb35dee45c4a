"""Conversion of a complete 2D floor plan into a 3D scene."""

import logging
from typing import Optional

from .coordinates import validate_scale
from .floor import floor_from_rooms
from .meshing import door_to_mesh, wall_to_mesh, window_to_mesh
from .models import (
    Camera,
    ConversionParams,
    DirectionalLight,
    FloorPlan,
    Lighting,
    SceneDescriptor,
)

logger = logging.getLogger(__name__)


def default_lighting(params: Optional[ConversionParams] = None) -> Lighting:
    """Static lighting: one ambient term and one oblique directional light."""
    params = params or ConversionParams()
    return Lighting(
        ambient=params.ambient_intensity,
        directional=DirectionalLight(
            intensity=params.directional_intensity,
            position=params.directional_position,
        ),
    )


def default_camera(params: Optional[ConversionParams] = None) -> Camera:
    """Static elevated camera looking at the origin."""
    params = params or ConversionParams()
    return Camera(position=params.camera_position, target=params.camera_target)


def convert_plan_to_scene(
    plan: FloorPlan,
    params: Optional[ConversionParams] = None,
) -> SceneDescriptor:
    """Convert a floor plan into a scene descriptor.

    Every wall, door and window is mapped in input order. Zero-length walls
    and elements that overflow world coordinates are skipped; the rest of
    the plan still converts. The plan is only read, and a fresh descriptor
    is built on each call.

    Args:
        plan: Floor plan in planar units
        params: Conversion parameters

    Returns:
        SceneDescriptor with meshes, floor, lighting and camera

    Raises:
        InvalidScaleError: If ``plan.scale`` is not a positive finite number
    """
    params = params or ConversionParams()
    scale = validate_scale(plan.scale)

    walls = [wall_to_mesh(wall, scale) for wall in plan.walls]
    doors = [door_to_mesh(door, scale, params) for door in plan.doors]
    windows = [window_to_mesh(window, scale, params) for window in plan.windows]

    skipped = walls.count(None) + doors.count(None) + windows.count(None)
    if skipped:
        logger.info("Skipped %d degenerate element(s)", skipped)

    scene = SceneDescriptor(
        walls=[mesh for mesh in walls if mesh is not None],
        doors=[mesh for mesh in doors if mesh is not None],
        windows=[mesh for mesh in windows if mesh is not None],
        floor=floor_from_rooms(plan.rooms, scale, params),
        lighting=default_lighting(params),
        camera=default_camera(params),
    )

    logger.debug(
        "Converted plan %r: %d walls, %d doors, %d windows",
        plan.id,
        len(scene.walls),
        len(scene.doors),
        len(scene.windows),
    )

    return scene
