"""Arc direction and offset calculation utilities."""
from typing import Tuple


def arc_direction_code(clockwise: bool) -> str:
    """
    Map an arc sense to its motion word.

    Args:
        clockwise: True for clockwise in the machine XY plane (Y up)

    Returns:
        "G02" for clockwise, "G03" for counter-clockwise
    """
    return "G02" if clockwise else "G03"


def calculate_ij_offsets(
    current: Tuple[float, float],
    center: Tuple[float, float]
) -> Tuple[float, float]:
    """
    Calculate I, J offsets for arc commands.

    I and J are the offsets from the current position to the arc center.

    Args:
        current: Current position (x, y)
        center: Arc center (x, y)

    Returns:
        Tuple of (I, J) offsets
    """
    cx, cy = current
    ax, ay = center

    i = ax - cx
    j = ay - cy

    return (i, j)
