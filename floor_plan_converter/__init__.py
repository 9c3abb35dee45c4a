"""Floor plan converter package for turning 2D floor plans into 3D scenes."""

from .converter import convert_plan_to_scene
from .exceptions import AnalysisParseError, ConversionError, InvalidScaleError
from .models import ConversionParams, FloorPlan, SceneDescriptor

__version__ = "0.1.0"
__all__ = [
    "convert_plan_to_scene",
    "ConversionParams",
    "FloorPlan",
    "SceneDescriptor",
    "ConversionError",
    "InvalidScaleError",
    "AnalysisParseError",
]
