"""Geometry and machine parameter validation utilities."""
import math
from typing import List


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def validate_positive(name: str, value: float) -> List[str]:
    """
    Check that a value is a finite number greater than zero.

    Args:
        name: Field name used in the message
        value: Value to check

    Returns:
        List with one error message, or empty if valid
    """
    if not _is_number(value):
        return [f"{name} must be a finite number"]
    if value <= 0:
        return [f"{name} must be positive (got {value:g})"]
    return []


def validate_non_negative(name: str, value: float) -> List[str]:
    """Check that a value is a finite number greater than or equal to zero."""
    if not _is_number(value):
        return [f"{name} must be a finite number"]
    if value < 0:
        return [f"{name} must not be negative (got {value:g})"]
    return []


def validate_finite(name: str, value: float) -> List[str]:
    """Check that a value is a finite number."""
    if not _is_number(value):
        return [f"{name} must be a finite number"]
    return []


def validate_machine_settings(
    feed_rate: float,
    safe_height: float,
    cut_depth: float,
    tool_diameter: float
) -> List[str]:
    """
    Validate machine parameters.

    Args:
        feed_rate: Feed rate (mm/min), must be positive
        safe_height: Rapid travel Z height (mm), must not be negative
        cut_depth: Depth below the surface (mm), must be positive
        tool_diameter: Cutter diameter (mm), must be positive

    Returns:
        List of error messages (empty if valid)
    """
    errors = []
    errors.extend(validate_positive('feedRate', feed_rate))
    errors.extend(validate_non_negative('safeHeight', safe_height))
    errors.extend(validate_positive('cutDepth', cut_depth))
    errors.extend(validate_positive('toolDiameter', tool_diameter))
    return errors


def validate_position(x: float, y: float) -> List[str]:
    """Validate a shape anchor position."""
    return validate_finite('x', x) + validate_finite('y', y)


def validate_rectangle_geometry(width: float, height: float) -> List[str]:
    """Validate nominal rectangle dimensions."""
    return validate_positive('width', width) + validate_positive('height', height)


def validate_circle_geometry(radius: float) -> List[str]:
    """Validate nominal circle radius."""
    return validate_positive('radius', radius)


def validate_text_geometry(font_size: float) -> List[str]:
    """Validate text font size."""
    return validate_positive('fontSize', font_size)
