"""Contracts for the generative-AI collaborators.

The services themselves live outside the compiler. These helpers pin down
how their results (or failures) are turned into ordinary scene and
annotation events:

- generate(prompt, scene) -> shapes; any error becomes GenerationFailure
- explain(program) -> text; any error degrades to EXPLAIN_FALLBACK
"""
import logging
from typing import Any, Callable, List, Optional

from .errors import DuplicateShapeError, GenerationFailure, ShapeParseError
from .models import Scene
from .shape_parser import scene_from_list

logger = logging.getLogger(__name__)

EXPLAIN_FALLBACK = "Could not generate explanation."

# Explainers see at most this many leading characters of the program
EXPLAIN_MAX_CHARS = 5000

# Callables supplied by the host application
ShapeGenerator = Callable[[str, Scene], Any]
ProgramExplainer = Callable[[str], Optional[str]]


def _coerce_scene(result: Any) -> Scene:
    if isinstance(result, Scene):
        return result.copy()
    if isinstance(result, list) and all(hasattr(item, 'kind') for item in result):
        return Scene(result)
    return scene_from_list(result)


def request_scene(generator: ShapeGenerator, prompt: str, scene: Scene) -> Scene:
    """
    Ask the shape generator for a replacement scene.

    Args:
        generator: Collaborator callable taking (prompt, current scene) and
            returning a Scene, a list of shapes, or a list of shape dicts
        prompt: User request text
        scene: Current scene (a copy is passed, the original is not touched)

    Returns:
        New scene

    Raises:
        GenerationFailure: On any collaborator error or unusable result
    """
    try:
        result = generator(prompt, scene.copy())
    except GenerationFailure:
        raise
    except Exception as e:
        logger.warning("Shape generation failed: %s", e)
        raise GenerationFailure(str(e) or e.__class__.__name__) from e

    try:
        return _coerce_scene(result)
    except (ShapeParseError, DuplicateShapeError) as e:
        logger.warning("Shape generator returned an unusable scene: %s", e)
        raise GenerationFailure(f"Generator returned invalid shapes: {e}") from e


def explain_program(explainer: ProgramExplainer, program: str) -> str:
    """
    Ask the explainer to describe a program.

    Only the first EXPLAIN_MAX_CHARS characters are sent. Never raises:
    errors and empty answers degrade to EXPLAIN_FALLBACK.

    Args:
        explainer: Collaborator callable taking the program text
        program: Program text

    Returns:
        Explanation text
    """
    try:
        explanation = explainer(program[:EXPLAIN_MAX_CHARS])
    except Exception as e:
        logger.warning("Program explanation failed: %s", e)
        return EXPLAIN_FALLBACK
    if not isinstance(explanation, str) or not explanation.strip():
        return EXPLAIN_FALLBACK
    return explanation


def format_annotation(explanation: str) -> List[str]:
    """
    Turn explanation text into comment lines.

    Args:
        explanation: Free text, possibly multi-line

    Returns:
        One '; '-prefixed line per explanation line
    """
    return [f"; {line}".rstrip() for line in explanation.splitlines()] or [";"]


def annotate_program(program: str, explanation: str) -> str:
    """Prepend an explanation comment block and a blank line to a program."""
    return '\n'.join(format_annotation(explanation)) + '\n\n' + program
