#!/usr/bin/env python3

import logging
import os
import sys

from shapecam.errors import DuplicateShapeError, ShapeParseError
from shapecam.gcode_generator import generate_program
from shapecam.shape_parser import load_scene_file
from shapecam.utils.file_manager import build_program_filename, write_program_file

USAGE = "Usage: python main.py <scene.json> [output_dir]"


def main(argv=None):
    """Command-line entry point: scene JSON file in, program file out."""
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] in ('-h', '--help'):
        print(USAGE)
        return 0 if args else 1

    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'WARNING'))

    input_file = args[0]
    output_dir = args[1] if len(args) > 1 else "output"

    print("=== Shape-to-toolpath compiler ===")
    print(f"Reading scene: {input_file}")

    try:
        scene, settings = load_scene_file(input_file)
    except (ShapeParseError, DuplicateShapeError) as e:
        print("\nERROR: Problem with scene file:")
        print(f"{str(e)}")
        return 1

    print(f"\nFound {len(scene)} shapes")
    print(f"Feed: {settings.feed_rate:g} mm/min  Safe Z: {settings.safe_height:g} mm  "
          f"Depth: {settings.cut_depth:g} mm  Tool: {settings.tool_diameter:g} mm")

    result = generate_program(scene, settings)
    for warning in result.warnings:
        print(f"WARNING: {warning}")

    base_name = os.path.splitext(os.path.basename(input_file))[0]
    output_file = write_program_file(output_dir, result.program, build_program_filename(base_name))
    print(f"\nProgram written: {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
