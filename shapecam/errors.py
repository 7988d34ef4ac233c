"""Exceptions raised by the shape-to-toolpath compiler and its collaborators."""


class ShapeCamError(Exception):
    """Base class for all shapecam errors."""
    pass


class InvalidGeometry(ShapeCamError, ValueError):
    """A shape whose dimensions cannot produce a toolpath.

    The planner raises this for a single shape; the program generator
    recovers by skipping that shape and noting it in the output.
    """

    def __init__(self, shape_id: str, reason: str):
        super().__init__(f"{shape_id}: {reason}")
        self.shape_id = shape_id
        self.reason = reason


class DuplicateShapeError(ShapeCamError, ValueError):
    """A shape identifier already present in the scene."""
    pass


class ShapeParseError(ShapeCamError, ValueError):
    """Structurally malformed shape or settings data."""
    pass


class GenerationFailure(ShapeCamError):
    """The shape-generation collaborator could not produce a new scene."""
    pass


class ExplainFailure(ShapeCamError):
    """The explain collaborator could not produce an explanation.

    Explainer callables raise this (or any other exception) to signal
    failure; explain_program turns it into the fallback text.
    """
    pass
