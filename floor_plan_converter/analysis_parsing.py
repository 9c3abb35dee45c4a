"""Ingestion of floor plan analysis replies."""

import json
import logging
import math
import re
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import AnalysisParseError
from .floor import polygon_area
from .models import Door, FloorPlan, PlanAnalysis, PlanDimensions, Room, Wall, Window

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_FENCED_JSON = re.compile(r"```(?:json)?\s*(\{.*\})\s*```", re.DOTALL)
_BARE_JSON = re.compile(r"(\{.*\})", re.DOTALL)


def extract_json_payload(text: str) -> Dict[str, Any]:
    """Extract the JSON object from a model's text reply.

    The reply may wrap the object in a markdown code fence or surround it
    with prose.

    Args:
        text: Raw text returned by the analysis model

    Returns:
        Decoded JSON object

    Raises:
        AnalysisParseError: If no JSON object can be decoded
    """
    if not text or not text.strip():
        raise AnalysisParseError("Analysis reply is empty")

    match = _FENCED_JSON.search(text) or _BARE_JSON.search(text)
    if not match:
        raise AnalysisParseError("No JSON object found in analysis reply")

    try:
        payload = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise AnalysisParseError(f"Invalid JSON in analysis reply: {e}") from e

    if not isinstance(payload, dict):
        raise AnalysisParseError("Analysis reply JSON is not an object")

    return payload


def _parse_elements(
    raw: Any,
    model: Type[ModelT],
    prefix: str,
) -> List[ModelT]:
    """Validate each element separately, skipping the ones that fail.

    Args:
        raw: List of element dictionaries (anything else yields no elements)
        model: Pydantic model to validate against
        prefix: Id prefix for elements without an id

    Returns:
        List of valid elements in input order
    """
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning("Expected a list of %ss, got %s", prefix, type(raw).__name__)
        return []

    elements = []
    for index, item in enumerate(raw, start=1):
        if not isinstance(item, dict):
            logger.warning("Skipping %s #%d: not an object", prefix, index)
            continue

        data = dict(item)
        if not data.get("id"):
            data["id"] = f"{prefix}-{index}"
        else:
            data["id"] = str(data["id"])

        try:
            elements.append(model.model_validate(data))
        except ValidationError as e:
            logger.warning(
                "Skipping %s %s: %d validation error(s)",
                prefix,
                data["id"],
                e.error_count(),
            )

    return elements


def _parse_dimensions(raw: Any) -> PlanDimensions:
    if not isinstance(raw, dict):
        return PlanDimensions()
    try:
        return PlanDimensions.model_validate(raw)
    except ValidationError:
        logger.warning("Invalid dimensions in analysis reply, using defaults")
        return PlanDimensions()


def parse_analysis(data: Dict[str, Any]) -> PlanAnalysis:
    """Build a PlanAnalysis from a decoded analysis reply.

    Elements that fail validation are dropped individually so one bad wall
    does not lose the rest of the plan.

    Args:
        data: Decoded JSON object with walls, doors, windows, rooms and
            dimensions keys (all optional)

    Returns:
        PlanAnalysis
    """
    if not isinstance(data, dict):
        raise AnalysisParseError("Analysis data must be a JSON object")

    return PlanAnalysis(
        walls=_parse_elements(data.get("walls"), Wall, "wall"),
        doors=_parse_elements(data.get("doors"), Door, "door"),
        windows=_parse_elements(data.get("windows"), Window, "window"),
        rooms=_parse_elements(data.get("rooms"), Room, "room"),
        dimensions=_parse_dimensions(data.get("dimensions")),
    )


def parse_analysis_text(text: str) -> PlanAnalysis:
    """Parse a raw model text reply into a PlanAnalysis."""
    return parse_analysis(extract_json_payload(text))


def plan_from_analysis(
    analysis: PlanAnalysis,
    plan_id: str = "",
    name: str = "New floor plan",
) -> FloorPlan:
    """Create an editable floor plan from an analysis result.

    Rooms reported without an area get one computed from their outline.

    Args:
        analysis: Parsed analysis result
        plan_id: Identifier for the new plan
        name: Display name for the new plan

    Returns:
        FloorPlan using the analysis scale
    """
    scale = analysis.dimensions.scale
    can_measure = math.isfinite(scale) and scale > 0

    rooms = []
    for room in analysis.rooms:
        if room.area <= 0 and can_measure:
            room = room.model_copy(update={"area": polygon_area(room.boundary, scale)})
        rooms.append(room)

    return FloorPlan(
        id=plan_id,
        name=name,
        walls=list(analysis.walls),
        doors=list(analysis.doors),
        windows=list(analysis.windows),
        rooms=rooms,
        scale=scale,
    )


def load_plan(data: Dict[str, Any], scale: Optional[float] = None) -> FloorPlan:
    """Load a floor plan JSON object, optionally overriding its scale.

    The editor keeps the scale under ``metadata.scale``; a top-level
    ``scale`` key takes precedence.

    Args:
        data: Decoded floor plan JSON (as written by the editor)
        scale: Scale to use instead of the stored one

    Returns:
        FloorPlan
    """
    data = dict(data)
    metadata = data.pop("metadata", None)
    if "scale" not in data and isinstance(metadata, dict) and "scale" in metadata:
        data["scale"] = metadata["scale"]

    plan = FloorPlan.model_validate(data)
    if scale is not None:
        plan = plan.model_copy(update={"scale": scale})
    return plan
