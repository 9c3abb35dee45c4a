"""Data models for floor plan conversion."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# Element defaults, in meters
WALL_HEIGHT = 2.5
WALL_THICKNESS = 0.2
DOOR_HEIGHT = 2.1
WINDOW_HEIGHT = 1.5
WINDOW_FROM_FLOOR = 1.0

Vector3 = Tuple[float, float, float]


class DoorDirection(str, Enum):
    """Cardinal alignment of a door in the plan."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class DoorOpening(str, Enum):
    """Side a door swings open to."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class Point2D(BaseModel):
    """Point in planar units."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    x: float
    y: float


class Point3D(BaseModel):
    """Point in world space (meters, Y-up)."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    x: float
    y: float
    z: float


class Wall(BaseModel):
    """Straight wall segment between two planar points."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    start: Point2D
    end: Point2D
    thickness: float = Field(WALL_THICKNESS, gt=0)  # meters, not planar units
    height: float = Field(WALL_HEIGHT, gt=0)


class Door(BaseModel):
    """Door placed at a single planar point."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    position: Point2D
    width: float = Field(gt=0)
    direction: DoorDirection = DoorDirection.HORIZONTAL
    opens: DoorOpening = DoorOpening.LEFT
    height: float = Field(DOOR_HEIGHT, gt=0)

    @field_validator("direction", mode="before")
    @classmethod
    def _default_direction(cls, value):
        if isinstance(value, DoorDirection):
            return value
        try:
            return DoorDirection(value)
        except ValueError:
            logger.warning("Unknown door direction %r, using horizontal", value)
            return DoorDirection.HORIZONTAL

    @field_validator("opens", mode="before")
    @classmethod
    def _default_opens(cls, value):
        if isinstance(value, DoorOpening):
            return value
        try:
            return DoorOpening(value)
        except ValueError:
            logger.warning("Unknown door opening %r, using left", value)
            return DoorOpening.LEFT


class Window(BaseModel):
    """Window placed at a single planar point."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    id: str
    position: Point2D
    width: float = Field(gt=0)
    height: float = Field(WINDOW_HEIGHT, gt=0)
    from_floor: float = Field(WINDOW_FROM_FLOOR, ge=0, alias="fromFloor")


class Room(BaseModel):
    """Named room outlined by a polygon (implicitly closed)."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    name: str = ""
    boundary: List[Point2D] = Field(default_factory=list)
    area: float = Field(0.0, ge=0)  # m²


class FloorPlan(BaseModel):
    """Complete 2D floor plan as produced by analysis and the editor.

    ``scale`` converts planar units to meters (``meters = units * scale``).
    It is not range-checked here; the converter rejects non-positive values.
    """

    id: str = ""
    name: str = ""
    walls: List[Wall] = Field(default_factory=list)
    doors: List[Door] = Field(default_factory=list)
    windows: List[Window] = Field(default_factory=list)
    rooms: List[Room] = Field(default_factory=list)
    scale: float = 1.0


class PlanDimensions(BaseModel):
    """Image dimensions and scale reported by the analysis service."""

    width: float = 0.0
    height: float = 0.0
    scale: float = 1.0


class PlanAnalysis(BaseModel):
    """Structured reply of the floor plan analysis service."""

    walls: List[Wall] = Field(default_factory=list)
    doors: List[Door] = Field(default_factory=list)
    windows: List[Window] = Field(default_factory=list)
    rooms: List[Room] = Field(default_factory=list)
    dimensions: PlanDimensions = Field(default_factory=PlanDimensions)


class WallMesh3D(BaseModel):
    """Box standing on the floor along a wall."""

    model_config = ConfigDict(frozen=True)

    id: str
    position: Vector3
    size: Vector3  # length, height, thickness
    rotation: Vector3


class DoorMesh3D(BaseModel):
    """Thin slab filling a door opening."""

    model_config = ConfigDict(frozen=True)

    id: str
    position: Vector3
    size: Vector3  # width, height, depth
    rotation: Vector3


class WindowMesh3D(BaseModel):
    """Thin slab filling a window opening."""

    model_config = ConfigDict(frozen=True)

    id: str
    position: Vector3
    size: Vector3  # width, height, depth
    rotation: Vector3


class FloorMesh3D(BaseModel):
    """Flat slab under the rooms."""

    model_config = ConfigDict(frozen=True)

    position: Vector3
    size: Vector3  # width, depth, thickness


class DirectionalLight(BaseModel):
    model_config = ConfigDict(frozen=True)

    intensity: float
    position: Vector3


class Lighting(BaseModel):
    model_config = ConfigDict(frozen=True)

    ambient: float
    directional: DirectionalLight


class Camera(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: Vector3
    target: Vector3


class SceneDescriptor(BaseModel):
    """Complete 3D scene ready for rendering."""

    model_config = ConfigDict(frozen=True)

    walls: List[WallMesh3D] = Field(default_factory=list)
    doors: List[DoorMesh3D] = Field(default_factory=list)
    windows: List[WindowMesh3D] = Field(default_factory=list)
    floor: FloorMesh3D
    lighting: Lighting
    camera: Camera


@dataclass
class ConversionParams:
    """Parameters for scene conversion."""

    opening_depth: float = 0.1  # door/window slab depth
    floor_thickness: float = 0.01
    fallback_floor_size: float = 10.0  # used when no room outlines exist
    ambient_intensity: float = 0.5
    directional_intensity: float = 1.0
    directional_position: Vector3 = (5.0, 10.0, 5.0)
    camera_position: Vector3 = (5.0, 4.0, 5.0)
    camera_target: Vector3 = (0.0, 0.0, 0.0)
