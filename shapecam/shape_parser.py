"""Conversion between editor JSON data and shape objects.

Only structure is checked here (type tag, required fields, numeric types).
Geometric validity is left to the planner so a bad shape is skipped rather
than rejecting the whole scene.
"""
import json
import uuid
from typing import Any, Dict, List, Optional, Tuple

from .errors import ShapeParseError
from .models import Circle, MachineSettings, Rectangle, Scene, Shape, ShapeType, Text


def _number(data: Dict[str, Any], *keys: str) -> float:
    for key in keys:
        if key in data and data[key] is not None:
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ShapeParseError(f"Field '{key}' must be a number, got {value!r}")
            return float(value)
    raise ShapeParseError(f"Missing required field '{keys[0]}'")


def shape_from_dict(data: Dict[str, Any]) -> Shape:
    """
    Build a shape from editor data.

    Args:
        data: Dict with 'type' (RECTANGLE, CIRCLE or TEXT, any case), 'x',
              'y' and the variant's fields. 'fontSize' and 'font_size' are
              both accepted. A missing 'id' gets a fresh UUID.

    Returns:
        Rectangle, Circle or Text

    Raises:
        ShapeParseError: If the data is not a dict, the type is unknown or
            a field is missing or not numeric
    """
    if not isinstance(data, dict):
        raise ShapeParseError(f"Shape must be an object, got {type(data).__name__}")

    type_tag = str(data.get('type', '')).upper()
    try:
        kind = ShapeType(type_tag)
    except ValueError:
        raise ShapeParseError(f"Unknown shape type: {data.get('type')!r}")

    shape_id = data.get('id')
    if shape_id is None or shape_id == '':
        shape_id = str(uuid.uuid4())
    shape_id = str(shape_id)

    x = _number(data, 'x')
    y = _number(data, 'y')

    if kind == ShapeType.RECTANGLE:
        return Rectangle(
            id=shape_id, x=x, y=y,
            width=_number(data, 'width'),
            height=_number(data, 'height')
        )
    elif kind == ShapeType.CIRCLE:
        return Circle(id=shape_id, x=x, y=y, radius=_number(data, 'radius'))

    text = data.get('text', '')
    if not isinstance(text, str):
        raise ShapeParseError(f"Field 'text' must be a string, got {text!r}")
    return Text(
        id=shape_id, x=x, y=y,
        text=text,
        font_size=_number(data, 'fontSize', 'font_size')
    )


def shape_to_dict(shape: Shape) -> Dict[str, Any]:
    """Serialize a shape using the editor's camelCase keys."""
    data = {'id': shape.id, 'type': shape.kind.value, 'x': shape.x, 'y': shape.y}
    if isinstance(shape, Rectangle):
        data.update(width=shape.width, height=shape.height)
    elif isinstance(shape, Circle):
        data['radius'] = shape.radius
    elif isinstance(shape, Text):
        data.update(text=shape.text, fontSize=shape.font_size)
    return data


def scene_from_list(items: List[Dict[str, Any]]) -> Scene:
    """
    Build a scene from a list of shape dicts, preserving order.

    Raises:
        ShapeParseError: If the input is not a list or any entry is malformed
        DuplicateShapeError: If two entries share an id
    """
    if not isinstance(items, list):
        raise ShapeParseError(f"Shapes must be a list, got {type(items).__name__}")

    shapes = []
    for index, item in enumerate(items):
        try:
            shapes.append(shape_from_dict(item))
        except ShapeParseError as e:
            raise ShapeParseError(f"Shape {index + 1}: {e}")
    return Scene(shapes)


def scene_to_list(scene: Scene) -> List[Dict[str, Any]]:
    return [shape_to_dict(shape) for shape in scene]


def parse_scene_document(
    document: Any,
    defaults: Optional[MachineSettings] = None
) -> Tuple[Scene, MachineSettings]:
    """
    Parse a scene document.

    Accepts either a bare list of shapes or an object with 'shapes' and an
    optional 'settings' object.

    Returns:
        Tuple of (scene, machine settings)

    Raises:
        ShapeParseError: If the document or its settings are malformed
    """
    if isinstance(document, list):
        return scene_from_list(document), defaults or MachineSettings()
    if not isinstance(document, dict):
        raise ShapeParseError("Scene document must be a list of shapes or an object")

    scene = scene_from_list(document.get('shapes', []))
    try:
        settings = MachineSettings.from_dict(document.get('settings') or {}, defaults)
    except ValueError as e:
        raise ShapeParseError(f"Invalid settings: {e}")
    return scene, settings


def load_scene_file(
    file_path: str,
    defaults: Optional[MachineSettings] = None
) -> Tuple[Scene, MachineSettings]:
    """Read and parse a scene JSON file."""
    try:
        with open(file_path, 'r') as f:
            content = f.read()
    except FileNotFoundError:
        raise ShapeParseError(f"Scene file not found: {file_path}")
    except OSError as e:
        raise ShapeParseError(f"Error reading file {file_path}: {e}")

    if not content.strip():
        raise ShapeParseError("Scene file is empty")

    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise ShapeParseError(f"Scene file is not valid JSON: {e}")

    return parse_scene_document(document, defaults)
