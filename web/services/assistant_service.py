"""Bridges the configured generative-AI collaborators into editing sessions."""
import logging
from typing import Optional

from flask import current_app

from shapecam.assistant import EXPLAIN_FALLBACK
from shapecam.regeneration import EditSession

logger = logging.getLogger(__name__)


def _unconfigured_explainer(program: str) -> str:
    return EXPLAIN_FALLBACK


class CollaboratorNotConfigured(Exception):
    """No collaborator callable is configured for this app."""
    pass


class AssistantService:
    """Service for prompt-driven scene generation and program explanation."""

    @staticmethod
    def generate(session: EditSession, prompt: str) -> None:
        """
        Replace the session scene with the shape generator's answer.

        Raises:
            CollaboratorNotConfigured: If SHAPE_GENERATOR is not set
            GenerationFailure: On collaborator error; the scene is unchanged
        """
        generator = current_app.config.get('SHAPE_GENERATOR')
        if generator is None:
            raise CollaboratorNotConfigured('Shape generator is not configured')
        session.apply_generated_scene(generator, prompt)

    @staticmethod
    def explain(session: EditSession) -> Optional[str]:
        """
        Explain the session program and annotate it (switches to manual mode).

        An unconfigured explainer degrades to the fallback text like any
        other explainer failure. An empty program is not explained.

        Returns:
            The explanation text, or None for an empty program
        """
        explainer = current_app.config.get('PROGRAM_EXPLAINER')
        if explainer is None:
            logger.warning("Program explainer is not configured")
            explainer = _unconfigured_explainer
        return session.explain(explainer)
