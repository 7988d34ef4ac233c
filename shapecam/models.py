"""Shared dataclasses for the shape-to-toolpath compiler."""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Union

from .errors import DuplicateShapeError
from .utils.validators import validate_machine_settings


class ShapeType(str, Enum):
    """Closed set of shape variants, valued by their editor wire tags."""
    RECTANGLE = 'RECTANGLE'
    CIRCLE = 'CIRCLE'
    TEXT = 'TEXT'


@dataclass(frozen=True)
class Point:
    """A 2D coordinate point (millimeters)."""
    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle anchored at its (x, y) corner."""
    id: str
    x: float
    y: float
    width: float
    height: float

    kind: ClassVar[ShapeType] = ShapeType.RECTANGLE


@dataclass(frozen=True)
class Circle:
    """Circle centered at (x, y)."""
    id: str
    x: float
    y: float
    radius: float

    kind: ClassVar[ShapeType] = ShapeType.CIRCLE


@dataclass(frozen=True)
class Text:
    """Single-line text with its baseline origin at (x, y)."""
    id: str
    x: float
    y: float
    text: str
    font_size: float

    kind: ClassVar[ShapeType] = ShapeType.TEXT


Shape = Union[Rectangle, Circle, Text]


class Scene:
    """
    Ordered collection of shapes.

    Order is the cut order and is never rearranged; identifiers are unique.
    """

    def __init__(self, shapes: Optional[List[Shape]] = None):
        self._shapes: List[Shape] = []
        for shape in shapes or []:
            self.add(shape)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scene):
            return NotImplemented
        return self._shapes == other._shapes

    def __repr__(self) -> str:
        return f"Scene({self._shapes!r})"

    @property
    def shapes(self) -> List[Shape]:
        """Snapshot of the shapes in insertion order."""
        return list(self._shapes)

    def ids(self) -> List[str]:
        return [shape.id for shape in self._shapes]

    def get(self, shape_id: str) -> Optional[Shape]:
        for shape in self._shapes:
            if shape.id == shape_id:
                return shape
        return None

    def add(self, shape: Shape) -> None:
        if self.get(shape.id) is not None:
            raise DuplicateShapeError(f"Shape id '{shape.id}' already exists in scene")
        self._shapes.append(shape)

    def update(self, shape: Shape) -> None:
        """Replace the shape with the same id, keeping its position."""
        for index, existing in enumerate(self._shapes):
            if existing.id == shape.id:
                self._shapes[index] = shape
                return
        raise KeyError(shape.id)

    def remove(self, shape_id: str) -> Shape:
        for index, existing in enumerate(self._shapes):
            if existing.id == shape_id:
                return self._shapes.pop(index)
        raise KeyError(shape_id)

    def copy(self) -> 'Scene':
        return Scene(self._shapes)


# Key names accepted by MachineSettings.from_dict (editor camelCase -> field)
_SETTINGS_KEYS = {
    'feedRate': 'feed_rate',
    'safeHeight': 'safe_height',
    'cutDepth': 'cut_depth',
    'toolDiameter': 'tool_diameter',
}


@dataclass(frozen=True)
class MachineSettings:
    """Machine parameters for one compile run (millimeters, mm/min)."""
    feed_rate: float = 800.0
    safe_height: float = 5.0
    cut_depth: float = 2.0
    tool_diameter: float = 3.175

    def __post_init__(self):
        errors = validate_machine_settings(
            self.feed_rate, self.safe_height, self.cut_depth, self.tool_diameter
        )
        if errors:
            raise ValueError("; ".join(errors))

    @property
    def tool_radius(self) -> float:
        return self.tool_diameter / 2

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        defaults: Optional['MachineSettings'] = None
    ) -> 'MachineSettings':
        """
        Build settings from editor data.

        Args:
            data: Dict with camelCase (feedRate) or snake_case (feed_rate) keys
            defaults: Settings supplying values for omitted keys

        Returns:
            New MachineSettings

        Raises:
            ValueError: If data is not a dict, or a value is not a number or
                violates a constraint
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("settings must be an object")

        values = {}
        for key, value in data.items():
            name = _SETTINGS_KEYS.get(key, key)
            if name not in _SETTINGS_KEYS.values():
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{key} must be a number")
            values[name] = float(value)
        return replace(defaults or cls(), **values)

    def to_dict(self) -> Dict[str, float]:
        return {
            'feedRate': self.feed_rate,
            'safeHeight': self.safe_height,
            'cutDepth': self.cut_depth,
            'toolDiameter': self.tool_diameter,
        }


@dataclass(frozen=True)
class LineSegment:
    """Straight feed move to an end point."""
    end: Point


@dataclass(frozen=True)
class ArcSegment:
    """Circular feed move to an end point around a center."""
    end: Point
    center: Point
    clockwise: bool = True


Segment = Union[LineSegment, ArcSegment]


@dataclass
class PlannedPath:
    """A tool-center path ready for emission."""
    source_id: str
    start: Point
    segments: List[Segment] = field(default_factory=list)
    closed: bool = True

    def points(self) -> List[Point]:
        """Start point followed by every segment end point."""
        return [self.start] + [segment.end for segment in self.segments]


@dataclass
class PlannedShape:
    """Planner outcome for one scene entry: its paths, or why it was skipped."""
    shape: Shape
    paths: List[PlannedPath] = field(default_factory=list)
    skip_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None
