"""Shape-to-toolpath compiler: 2D shapes to a G-code program."""

from .errors import (
    ShapeCamError,
    InvalidGeometry,
    DuplicateShapeError,
    ShapeParseError,
    GenerationFailure,
    ExplainFailure
)
from .models import (
    ShapeType,
    Point,
    Rectangle,
    Circle,
    Text,
    Scene,
    MachineSettings,
    LineSegment,
    ArcSegment,
    PlannedPath,
    PlannedShape
)
from .path_planner import plan_shape, plan_scene
from .gcode_generator import ProgramGenerator, GenerationResult, generate_program
from .regeneration import EditSession, Mode
from .shape_parser import (
    shape_from_dict,
    shape_to_dict,
    scene_from_list,
    scene_to_list,
    load_scene_file
)
from .assistant import EXPLAIN_FALLBACK, EXPLAIN_MAX_CHARS, request_scene, explain_program, annotate_program

__all__ = [
    # Errors
    'ShapeCamError',
    'InvalidGeometry',
    'DuplicateShapeError',
    'ShapeParseError',
    'GenerationFailure',
    'ExplainFailure',
    # Shape model
    'ShapeType',
    'Point',
    'Rectangle',
    'Circle',
    'Text',
    'Scene',
    'MachineSettings',
    'LineSegment',
    'ArcSegment',
    'PlannedPath',
    'PlannedShape',
    # Planner and emitter
    'plan_shape',
    'plan_scene',
    'ProgramGenerator',
    'GenerationResult',
    'generate_program',
    # Regeneration
    'EditSession',
    'Mode',
    # Parsing
    'shape_from_dict',
    'shape_to_dict',
    'scene_from_list',
    'scene_to_list',
    'load_scene_file',
    # Collaborators
    'EXPLAIN_FALLBACK',
    'EXPLAIN_MAX_CHARS',
    'request_scene',
    'explain_program',
    'annotate_program',
]
