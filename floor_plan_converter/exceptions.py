"""Exceptions raised by the floor plan converter."""


class ConversionError(Exception):
    """Base class for floor plan conversion errors."""


class InvalidScaleError(ConversionError, ValueError):
    """Raised when the planar-to-meter scale is not a positive finite number."""

    def __init__(self, scale: float):
        super().__init__(f"Scale must be a positive finite number, got {scale!r}")
        self.scale = scale


class AnalysisParseError(ConversionError):
    """Raised when an analysis reply contains no usable floor plan JSON."""


class GeometryOverflowError(ConversionError):
    """Raised when scaled coordinates leave the range of finite floats."""
