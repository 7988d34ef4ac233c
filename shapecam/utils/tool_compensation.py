"""Tool compensation utilities for offset calculations."""
from typing import Tuple


def get_compensation_offset(tool_diameter: float) -> float:
    """
    Get the radial offset for an outside-contour cut.

    The offset is added to a contour's nominal size to get the tool-center
    contour, so the cut edge lands on the nominal outline.

    Args:
        tool_diameter: Tool diameter (mm)

    Returns:
        Offset amount (+tool_radius)
    """
    return tool_diameter / 2


def calculate_cut_radius(feature_radius: float, offset: float) -> float:
    """
    Calculate the tool-center radius for a circular contour.

    Args:
        feature_radius: Nominal circle radius (mm)
        offset: Signed compensation offset

    Returns:
        Radius for the toolpath center (mm); may be <= 0 for a negative
        offset larger than the feature
    """
    return feature_radius + offset


def offset_rectangle(
    x: float,
    y: float,
    width: float,
    height: float,
    offset: float
) -> Tuple[float, float, float, float]:
    """
    Grow (or shrink) an axis-aligned rectangle by an offset on every side.

    Args:
        x: X of the anchor corner
        y: Y of the anchor corner
        width: Nominal width
        height: Nominal height
        offset: Signed compensation offset

    Returns:
        Tuple of (min_x, min_y, max_x, max_y) of the tool-center rectangle
    """
    return (x - offset, y - offset, x + width + offset, y + height + offset)
