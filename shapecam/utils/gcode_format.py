"""G-code formatting utilities.

Every numeric field is written with a fixed number of fractional digits so
identical input always yields byte-identical text.
"""
import re
from typing import List, Optional

COORDINATE_PRECISION = 3
FEED_PRECISION = 1


def format_coordinate(value: float, precision: int = COORDINATE_PRECISION) -> str:
    """
    Format a coordinate value with a fixed number of decimal places.

    Values that round to zero are written without a sign.

    Args:
        value: The coordinate value
        precision: Number of decimal places (default 3)

    Returns:
        Formatted string representation
    """
    text = f"{value:.{precision}f}"
    if text.startswith('-') and float(text) == 0:
        text = text[1:]
    return text


def format_feed(feed: float) -> str:
    """Format a feed rate (mm/min)."""
    return format_coordinate(feed, FEED_PRECISION)


def generate_header(safe_height: float) -> List[str]:
    """
    Generate program header lines.

    Millimeter units, absolute positioning, tool raised to safe height.

    Args:
        safe_height: Z height for safe positioning

    Returns:
        List of G-code header lines
    """
    return [
        "G21",
        "G90",
        f"G00 Z{format_coordinate(safe_height)}",
    ]


def generate_footer() -> List[str]:
    """
    Generate program footer lines.

    Returns:
        Spindle stop and program end
    """
    return [
        "M05",
        "M30",
    ]


def generate_rapid_move(
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None
) -> str:
    """
    Generate a G00 rapid move command.

    Args:
        x: X coordinate (optional)
        y: Y coordinate (optional)
        z: Z coordinate (optional)

    Returns:
        G00 command string
    """
    parts = ["G00"]
    if x is not None:
        parts.append(f"X{format_coordinate(x)}")
    if y is not None:
        parts.append(f"Y{format_coordinate(y)}")
    if z is not None:
        parts.append(f"Z{format_coordinate(z)}")
    return " ".join(parts)


def generate_linear_move(
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None,
    feed: Optional[float] = None
) -> str:
    """
    Generate a G01 linear move command.

    Args:
        x: X coordinate (optional)
        y: Y coordinate (optional)
        z: Z coordinate (optional)
        feed: Feed rate (optional)

    Returns:
        G01 command string
    """
    parts = ["G01"]
    if x is not None:
        parts.append(f"X{format_coordinate(x)}")
    if y is not None:
        parts.append(f"Y{format_coordinate(y)}")
    if z is not None:
        parts.append(f"Z{format_coordinate(z)}")
    if feed is not None:
        parts.append(f"F{format_feed(feed)}")
    return " ".join(parts)


def generate_arc_move(
    direction: str,
    x: float,
    y: float,
    i: float,
    j: float,
    feed: Optional[float] = None
) -> str:
    """
    Generate a G02/G03 arc move command.

    Args:
        direction: "G02" for CW, "G03" for CCW
        x: Destination X coordinate
        y: Destination Y coordinate
        i: I offset (X distance to arc center)
        j: J offset (Y distance to arc center)
        feed: Feed rate (optional)

    Returns:
        Arc command string
    """
    parts = [
        direction,
        f"X{format_coordinate(x)}",
        f"Y{format_coordinate(y)}",
        f"I{format_coordinate(i)}",
        f"J{format_coordinate(j)}",
    ]
    if feed is not None:
        parts.append(f"F{format_feed(feed)}")
    return " ".join(parts)


def generate_comment(text: str) -> str:
    """
    Generate a comment line.

    Line breaks inside the text are folded to spaces so the comment stays
    on one line.

    Args:
        text: Comment body

    Returns:
        Line starting with ';'
    """
    body = " ".join(str(text).split())
    return f"; {body}" if body else ";"


def sanitize_program_name(name: str) -> str:
    """
    Clean a program name for filesystem use.

    - Replace spaces with underscores
    - Remove special characters except underscores, hyphens and dots
    - Truncate to 50 characters max

    Args:
        name: Original name

    Returns:
        Sanitized name safe for filesystem (may be empty)
    """
    sanitized = name.replace(" ", "_")
    sanitized = re.sub(r'[^a-zA-Z0-9_.-]', '', sanitized)
    return sanitized[:50]
