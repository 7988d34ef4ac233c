"""Regeneration controller: when the program is derived vs. hand-edited.

Two modes:
- DERIVED: the program is always generate_program(scene, settings)
- MANUAL: the program is user text; scene edits leave it alone

Manual edits and annotations switch to MANUAL; an explicit regenerate
switches back to DERIVED and recomputes immediately.
"""
import logging
import threading
from enum import Enum
from typing import List, Optional

from .assistant import ProgramExplainer, ShapeGenerator, annotate_program, explain_program, request_scene
from .gcode_generator import GenerationResult, generate_program
from .models import MachineSettings, Scene, Shape

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    DERIVED = 'derived'
    MANUAL = 'manual'


class EditSession:
    """
    One editing session: scene, settings, program text and mode.

    Events and mutators hold the session lock, so request threads sharing a
    session see each transition as a whole. Collaborator calls run outside
    the lock on a snapshot.
    """

    def __init__(
        self,
        scene: Optional[Scene] = None,
        settings: Optional[MachineSettings] = None
    ):
        self.lock = threading.RLock()
        self.scene = scene.copy() if scene is not None else Scene()
        self.settings = settings or MachineSettings()
        self.mode = Mode.DERIVED
        self.program = ''
        self.warnings: List[str] = []
        self._recompute()

    @property
    def is_manual(self) -> bool:
        return self.mode == Mode.MANUAL

    def _recompute(self) -> GenerationResult:
        result = generate_program(self.scene, self.settings)
        # A manual edit made while generating wins over the derived text
        if self.mode == Mode.DERIVED:
            self.program = result.program
            self.warnings = result.warnings
        return result

    # Events

    def on_scene_changed(self) -> None:
        """Recompute the program if derived; no-op in manual mode."""
        with self.lock:
            if self.mode == Mode.DERIVED:
                self._recompute()
            else:
                logger.debug("Scene changed in manual mode, keeping edited program")

    def on_manual_edit(self, text: str) -> None:
        """Replace the program with user text and switch to manual mode."""
        with self.lock:
            self.program = text
            self.warnings = []
            self.mode = Mode.MANUAL

    def on_regenerate_requested(self) -> None:
        """Switch back to derived mode and recompute from the current scene."""
        with self.lock:
            self.mode = Mode.DERIVED
            self.on_scene_changed()

    def on_external_annotate(self, explanation: str) -> None:
        """Prepend an explanation comment block; the result is manual text."""
        with self.lock:
            self.on_manual_edit(annotate_program(self.program, explanation))

    # Scene mutations

    def add_shape(self, shape: Shape) -> None:
        with self.lock:
            self.scene.add(shape)
            self.on_scene_changed()

    def update_shape(self, shape: Shape) -> None:
        with self.lock:
            self.scene.update(shape)
            self.on_scene_changed()

    def remove_shape(self, shape_id: str) -> Shape:
        with self.lock:
            removed = self.scene.remove(shape_id)
            self.on_scene_changed()
            return removed

    def replace_scene(self, scene: Scene) -> None:
        with self.lock:
            self.scene = scene.copy()
            self.on_scene_changed()

    def update_settings(self, settings: MachineSettings) -> None:
        with self.lock:
            self.settings = settings
            self.on_scene_changed()

    # Collaborators

    def apply_generated_scene(self, generator: ShapeGenerator, prompt: str) -> None:
        """
        Replace the scene with the shape generator's answer.

        Raises:
            GenerationFailure: The scene is left unchanged
        """
        with self.lock:
            current = self.scene.copy()
        new_scene = request_scene(generator, prompt, current)
        self.replace_scene(new_scene)

    def explain(self, explainer: ProgramExplainer) -> Optional[str]:
        """
        Explain the current program and annotate it with the explanation.

        An empty program is left alone and the explainer is not called.

        Returns:
            The explanation text (the fallback string on collaborator error),
            or None when there was nothing to explain
        """
        with self.lock:
            program = self.program
        if not program.strip():
            logger.debug("Program is empty, nothing to explain")
            return None

        explanation = explain_program(explainer, program)
        self.on_external_annotate(explanation)
        return explanation
