"""Path planning: shapes to tool-center paths.

Every planner returns coordinates already in tool-center space, so the
emitter never applies any further offset. Coordinates are in the machine
frame (X right, Y up) and "clockwise" is the G02 sense in that frame.

- Rectangles and circles are outside-contour cuts, expanded by the tool
  radius.
- Text is centerline engraving: one open path per glyph stroke, no offset.
"""
import logging
from typing import Callable, Dict, Iterable, List

from .errors import InvalidGeometry
from .glyphs import GLYPH_ADVANCE, get_glyph
from .models import (
    ArcSegment,
    Circle,
    LineSegment,
    PlannedPath,
    PlannedShape,
    Point,
    Rectangle,
    Shape,
    ShapeType,
    Text,
)
from .utils.tool_compensation import calculate_cut_radius, offset_rectangle
from .utils.validators import (
    validate_circle_geometry,
    validate_finite,
    validate_position,
    validate_rectangle_geometry,
    validate_text_geometry,
)

logger = logging.getLogger(__name__)


def _reject_if_invalid(shape: Shape, errors: List[str]) -> None:
    if errors:
        raise InvalidGeometry(shape.id, "; ".join(errors))


def plan_rectangle(rect: Rectangle, tool_radius: float) -> List[PlannedPath]:
    """
    Plan an outside contour around a rectangle.

    The loop starts at the offset anchor corner (x - r, y - r) and runs
    clockwise: up the left edge, across the top, down the right edge and
    back along the bottom.

    Args:
        rect: Rectangle to cut around
        tool_radius: Tool radius offset (mm)

    Returns:
        Single closed path of four line segments

    Raises:
        InvalidGeometry: Non-positive size or an offset that collapses it
    """
    _reject_if_invalid(
        rect,
        validate_position(rect.x, rect.y)
        + validate_rectangle_geometry(rect.width, rect.height)
        + validate_finite('toolRadius', tool_radius)
    )

    min_x, min_y, max_x, max_y = offset_rectangle(
        rect.x, rect.y, rect.width, rect.height, tool_radius
    )
    if max_x <= min_x or max_y <= min_y:
        raise InvalidGeometry(rect.id, "tool offset leaves no contour")

    start = Point(min_x, min_y)
    corners = [
        Point(min_x, max_y),
        Point(max_x, max_y),
        Point(max_x, min_y),
        start,
    ]
    return [PlannedPath(
        source_id=rect.id,
        start=start,
        segments=[LineSegment(corner) for corner in corners],
        closed=True
    )]


def plan_circle(circle: Circle, tool_radius: float) -> List[PlannedPath]:
    """
    Plan an outside contour around a circle.

    One clockwise 360 degree arc that starts and ends at the rightmost point
    of the tool-center circle.

    Args:
        circle: Circle to cut around
        tool_radius: Tool radius offset (mm)

    Returns:
        Single closed path with one arc segment

    Raises:
        InvalidGeometry: Non-positive radius or effective radius
    """
    _reject_if_invalid(
        circle,
        validate_position(circle.x, circle.y)
        + validate_circle_geometry(circle.radius)
        + validate_finite('toolRadius', tool_radius)
    )

    cut_radius = calculate_cut_radius(circle.radius, tool_radius)
    if cut_radius <= 0:
        raise InvalidGeometry(
            circle.id, f"effective radius must be positive (got {cut_radius:g})"
        )

    center = Point(circle.x, circle.y)
    start = Point(circle.x + cut_radius, circle.y)
    return [PlannedPath(
        source_id=circle.id,
        start=start,
        segments=[ArcSegment(end=start, center=center, clockwise=True)],
        closed=True
    )]


def plan_text(text: Text, tool_radius: float) -> List[PlannedPath]:
    """
    Plan engraving strokes for a text shape.

    Glyphs are laid out left to right from the baseline origin; each stroke
    becomes one open path. The tool radius is ignored (centerline engraving).
    Characters without a stroke definition leave a blank advance.

    Args:
        text: Text shape
        tool_radius: Unused; accepted so every planner shares one signature

    Returns:
        Open paths in glyph order, strokes in table order within a glyph

    Raises:
        InvalidGeometry: Non-positive font size
    """
    _reject_if_invalid(
        text,
        validate_position(text.x, text.y) + validate_text_geometry(text.font_size)
    )

    size = text.font_size
    paths = []
    cursor_x = text.x
    for char in text.text:
        glyph = get_glyph(char)
        if glyph is None:
            logger.debug("No stroke glyph for %r in text %s, leaving blank", char, text.id)
        else:
            for stroke in glyph:
                points = [Point(cursor_x + gx * size, text.y + gy * size) for gx, gy in stroke]
                paths.append(PlannedPath(
                    source_id=text.id,
                    start=points[0],
                    segments=[LineSegment(p) for p in points[1:]],
                    closed=False
                ))
        cursor_x += GLYPH_ADVANCE * size

    return paths


_PLANNERS: Dict[ShapeType, Callable[..., List[PlannedPath]]] = {
    ShapeType.RECTANGLE: plan_rectangle,
    ShapeType.CIRCLE: plan_circle,
    ShapeType.TEXT: plan_text,
}


def plan_shape(shape: Shape, tool_radius: float) -> List[PlannedPath]:
    """
    Plan the tool-center paths for one shape.

    Args:
        shape: Any shape variant
        tool_radius: Tool radius offset (mm), tool_diameter / 2

    Returns:
        List of planned paths (one for contours, one per stroke for text)

    Raises:
        InvalidGeometry: If the shape cannot produce a path
        TypeError: If the object is not a known shape variant
    """
    planner = _PLANNERS.get(getattr(shape, 'kind', None))
    if planner is None:
        raise TypeError(f"Unsupported shape: {shape!r}")
    return planner(shape, tool_radius)


def plan_scene(shapes: Iterable[Shape], tool_radius: float) -> List[PlannedShape]:
    """
    Plan every shape in scene order.

    Invalid shapes are not fatal: they are returned with a skip reason and
    the rest of the scene is still planned.

    Args:
        shapes: Shapes in cut order
        tool_radius: Tool radius offset (mm)

    Returns:
        One PlannedShape per input shape, same order
    """
    planned = []
    for shape in shapes:
        try:
            paths = plan_shape(shape, tool_radius)
        except InvalidGeometry as e:
            logger.info("Skipping %s %s: %s", shape.kind.value.lower(), shape.id, e.reason)
            planned.append(PlannedShape(shape=shape, skip_reason=e.reason))
            continue
        planned.append(PlannedShape(shape=shape, paths=paths))
    return planned
