#!/usr/bin/env python3
"""CLI script for converting 2D floor plans into 3D scene descriptors."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from floor_plan_converter import ConversionError, convert_plan_to_scene
from floor_plan_converter.analysis_parsing import load_plan, parse_analysis_text, plan_from_analysis
from floor_plan_converter.report import generate_scene_report


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Convert a 2D floor plan JSON file into a 3D scene descriptor"
    )
    parser.add_argument(
        "input",
        type=str,
        help="Path to floor plan JSON (or analysis reply with --analysis)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Path for the scene JSON (default: stdout)",
    )
    parser.add_argument(
        "--analysis",
        action="store_true",
        help="Input is an analysis service reply (JSON or model text)",
    )
    parser.add_argument(
        "--scale",
        type=float,
        help="Override the planar-unit to meter scale",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a conversion report",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show diagnostic logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"❌ Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        text = input_path.read_text(encoding="utf-8")

        if args.analysis:
            print(f"🔍 Parsing analysis reply: {args.input}", file=sys.stderr)
            plan = plan_from_analysis(parse_analysis_text(text), name=input_path.stem)
            if args.scale is not None:
                plan = plan.model_copy(update={"scale": args.scale})
        else:
            print(f"📄 Loading floor plan: {args.input}", file=sys.stderr)
            plan = load_plan(json.loads(text), scale=args.scale)

        print("🏗️  Converting to 3D...", file=sys.stderr)
        scene = convert_plan_to_scene(plan)
        print(
            f"   {len(scene.walls)} walls, {len(scene.doors)} doors, {len(scene.windows)} windows",
            file=sys.stderr,
        )

        scene_json = scene.model_dump_json(indent=2)
        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(exist_ok=True, parents=True)
            output_path.write_text(scene_json + "\n", encoding="utf-8")
            print(f"💾 Scene written: {output_path}", file=sys.stderr)
        else:
            print(scene_json)

        if args.report:
            print("\n" + generate_scene_report(plan, scene), file=sys.stderr)

        return 0

    except (ConversionError, ValueError, OSError) as e:
        # json.JSONDecodeError and pydantic.ValidationError are ValueErrors;
        # OSError covers unreadable input and unwritable output paths
        print(f"\n❌ Error during conversion: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
