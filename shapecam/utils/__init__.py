"""Shared utility modules for G-code generation."""

from .tool_compensation import get_compensation_offset, calculate_cut_radius, offset_rectangle
from .arc_utils import arc_direction_code, calculate_ij_offsets
from .gcode_format import (
    format_coordinate,
    format_feed,
    generate_header,
    generate_footer,
    generate_rapid_move,
    generate_linear_move,
    generate_arc_move,
    generate_comment,
    sanitize_program_name
)
from .validators import (
    validate_positive,
    validate_non_negative,
    validate_finite,
    validate_machine_settings,
    validate_position,
    validate_rectangle_geometry,
    validate_circle_geometry,
    validate_text_geometry
)
from .file_manager import (
    PROGRAM_EXTENSION,
    DEFAULT_PROGRAM_FILENAME,
    build_program_filename,
    program_bytes,
    write_program_file
)

__all__ = [
    # tool_compensation
    'get_compensation_offset',
    'calculate_cut_radius',
    'offset_rectangle',
    # arc_utils
    'arc_direction_code',
    'calculate_ij_offsets',
    # gcode_format
    'format_coordinate',
    'format_feed',
    'generate_header',
    'generate_footer',
    'generate_rapid_move',
    'generate_linear_move',
    'generate_arc_move',
    'generate_comment',
    'sanitize_program_name',
    # validators
    'validate_positive',
    'validate_non_negative',
    'validate_finite',
    'validate_machine_settings',
    'validate_position',
    'validate_rectangle_geometry',
    'validate_circle_geometry',
    'validate_text_geometry',
    # file_manager
    'PROGRAM_EXTENSION',
    'DEFAULT_PROGRAM_FILENAME',
    'build_program_filename',
    'program_bytes',
    'write_program_file',
]
