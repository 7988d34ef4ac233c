"""G-code emission for planned toolpaths.

Serializes planned paths into the program text:
- Header (millimeters, absolute positioning, tool to safe height)
- Per shape a marker comment, then for each path: rapid to start at safe
  height, feed plunge to cut depth, feed-rate body, rapid retract
- Footer (spindle stop, program end)

Retraction after every path is unconditional, so the tool never travels
through material between operations.
"""
from dataclasses import dataclass, field
from typing import Iterable, List

from .models import ArcSegment, MachineSettings, PlannedPath, PlannedShape, Shape
from .path_planner import plan_scene
from .utils.arc_utils import arc_direction_code, calculate_ij_offsets
from .utils.tool_compensation import get_compensation_offset
from .utils.gcode_format import (
    generate_arc_move,
    generate_comment,
    generate_footer,
    generate_header,
    generate_linear_move,
    generate_rapid_move,
)


@dataclass
class GenerationResult:
    """Result of program generation."""
    program: str
    warnings: List[str] = field(default_factory=list)
    skipped_ids: List[str] = field(default_factory=list)


def shape_label(shape: Shape) -> str:
    """Human-readable '<kind> <id>' used in comments and warnings."""
    return f"{shape.kind.value.lower()} {shape.id}"


class ProgramGenerator:
    """Emits a complete program from planned shapes for one set of machine settings."""

    def __init__(self, settings: MachineSettings):
        self.settings = settings
        self.warnings: List[str] = []
        self.skipped_ids: List[str] = []

    def emit_path(self, path: PlannedPath) -> List[str]:
        """
        Generate G-code for one planned path.

        Args:
            path: Tool-center path

        Returns:
            List of G-code lines from the rapid approach through the retract
        """
        settings = self.settings
        feed = settings.feed_rate
        lines = [
            generate_rapid_move(x=path.start.x, y=path.start.y, z=settings.safe_height),
            generate_linear_move(z=-settings.cut_depth, feed=feed),
        ]

        current = (path.start.x, path.start.y)
        for segment in path.segments:
            end = (segment.end.x, segment.end.y)
            if isinstance(segment, ArcSegment):
                i, j = calculate_ij_offsets(current, (segment.center.x, segment.center.y))
                lines.append(generate_arc_move(
                    arc_direction_code(segment.clockwise), end[0], end[1], i, j, feed=feed
                ))
            else:
                lines.append(generate_linear_move(x=end[0], y=end[1], feed=feed))
            current = end

        lines.append(generate_rapid_move(z=settings.safe_height))
        return lines

    def emit_shape(self, planned: PlannedShape) -> List[str]:
        """
        Generate G-code for one scene entry.

        A skipped shape contributes only its skip comment.

        Args:
            planned: Planner outcome for the shape

        Returns:
            List of G-code lines, starting with the shape's comment
        """
        label = shape_label(planned.shape)
        if planned.skipped:
            self.warnings.append(f"Skipped {label}: {planned.skip_reason}")
            self.skipped_ids.append(planned.shape.id)
            return [generate_comment(f"skipped {label}: {planned.skip_reason}")]

        lines = [generate_comment(f"shape {label}")]
        for path in planned.paths:
            lines.extend(self.emit_path(path))
        return lines

    def emit(self, planned_shapes: Iterable[PlannedShape]) -> str:
        """
        Generate the complete program text.

        Args:
            planned_shapes: Planner output in scene order

        Returns:
            Program text, one instruction per line
        """
        self.warnings = []
        self.skipped_ids = []

        lines = generate_header(self.settings.safe_height)
        for planned in planned_shapes:
            lines.extend(self.emit_shape(planned))
        lines.extend(generate_footer())

        return '\n'.join(lines)

    def generate(self, shapes: Iterable[Shape]) -> GenerationResult:
        """
        Plan and emit a program for shapes in scene order.

        Args:
            shapes: Scene (or any iterable of shapes) in cut order

        Returns:
            GenerationResult with the program text and skip warnings
        """
        offset = get_compensation_offset(self.settings.tool_diameter)
        planned = plan_scene(shapes, offset)
        program = self.emit(planned)
        return GenerationResult(
            program=program,
            warnings=list(self.warnings),
            skipped_ids=list(self.skipped_ids)
        )


def generate_program(shapes: Iterable[Shape], settings: MachineSettings) -> GenerationResult:
    """Plan and emit a program; see ProgramGenerator.generate."""
    return ProgramGenerator(settings).generate(shapes)
