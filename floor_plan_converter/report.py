"""Statistics and text report for converted floor plans."""

from typing import Dict

import numpy as np

from .coordinates import validate_scale
from .models import FloorPlan, SceneDescriptor


def get_plan_statistics(plan: FloorPlan) -> Dict[str, float]:
    """Calculate summary statistics about a floor plan.

    Args:
        plan: Floor plan

    Returns:
        Dictionary with element counts, wall length in meters and room areas
    """
    scale = validate_scale(plan.scale)

    if plan.walls:
        starts = np.array([(w.start.x, w.start.y) for w in plan.walls], dtype=float)
        ends = np.array([(w.end.x, w.end.y) for w in plan.walls], dtype=float)
        lengths = np.linalg.norm(ends - starts, axis=1) * scale
    else:
        lengths = np.zeros(0)

    areas = np.array([r.area for r in plan.rooms], dtype=float)

    return {
        "num_walls": len(plan.walls),
        "num_degenerate_walls": int(np.count_nonzero(lengths == 0)),
        "total_wall_length_m": float(np.sum(lengths)),
        "num_doors": len(plan.doors),
        "num_windows": len(plan.windows),
        "num_rooms": len(plan.rooms),
        "total_room_area_m2": float(np.sum(areas)),
        "mean_room_area_m2": float(np.mean(areas)) if len(areas) else 0.0,
    }


def generate_scene_report(plan: FloorPlan, scene: SceneDescriptor) -> str:
    """Generate a formatted report of a conversion.

    Args:
        plan: Source floor plan
        scene: Scene converted from the plan

    Returns:
        Formatted report string
    """
    stats = get_plan_statistics(plan)

    report_lines = [
        "=" * 50,
        "FLOOR PLAN 3D CONVERSION",
        "=" * 50,
        "",
        f"{'Plan':12s}: {plan.name or plan.id or '-'}",
        f"{'Scale':12s}: {plan.scale:.4f} m/unit",
        "",
        "ELEMENTS:",
        "-" * 50,
        f"{'Walls':12s}: {len(scene.walls):4d} / {stats['num_walls']:d}",
        f"{'Doors':12s}: {len(scene.doors):4d} / {stats['num_doors']:d}",
        f"{'Windows':12s}: {len(scene.windows):4d} / {stats['num_windows']:d}",
        f"{'Wall length':12s}: {stats['total_wall_length_m']:7.2f} m",
    ]

    if stats["num_degenerate_walls"]:
        report_lines.append(f"{'Skipped':12s}: {stats['num_degenerate_walls']:4d} zero-length wall(s)")

    # Rooms (largest first)
    report_lines.extend(["", "ROOMS:", "-" * 50])
    sorted_rooms = sorted(plan.rooms, key=lambda r: r.area, reverse=True)
    total_area = stats["total_room_area_m2"]

    for room in sorted_rooms:
        percentage = (room.area / total_area * 100) if total_area > 0 else 0
        label = room.name or room.id
        report_lines.append(f"{label:12s}: {room.area:6.2f} m² ({percentage:5.1f}%)")

    width, depth, _ = scene.floor.size
    report_lines.extend(
        [
            "",
            "-" * 50,
            f"{'TOTAL':12s}: {total_area:6.2f} m²",
            f"{'Floor slab':12s}: {width:.2f} x {depth:.2f} m",
            "=" * 50,
        ]
    )

    return "\n".join(report_lines)
