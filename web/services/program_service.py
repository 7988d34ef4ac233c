"""Program generation and download service."""
from typing import Any, Dict, List, Optional, Tuple

from flask import current_app

from shapecam.gcode_generator import GenerationResult, generate_program, shape_label
from shapecam.models import MachineSettings
from shapecam.path_planner import plan_scene
from shapecam.regeneration import EditSession
from shapecam.shape_parser import scene_from_list
from shapecam.utils.file_manager import build_program_filename, program_bytes
from web.services.session_service import SessionService


class ProgramService:
    """Service for stateless compilation, validation and downloads."""

    @staticmethod
    def compile(data: Dict[str, Any]) -> GenerationResult:
        """
        Compile shapes and settings to a program without creating a session.

        Raises:
            ShapeParseError, DuplicateShapeError: Malformed shapes
            ValueError: Invalid settings
        """
        scene = scene_from_list(data.get('shapes') or [])
        settings = MachineSettings.from_dict(
            data.get('settings') or {}, SessionService.default_settings()
        )
        return generate_program(scene, settings)

    @staticmethod
    def validate(data: Dict[str, Any]) -> Tuple[List[str], List[str]]:
        """
        Validate shapes and settings before generating.

        Structural and settings problems are errors; geometrically invalid
        shapes are warnings because generation skips them.

        Returns:
            Tuple of (errors, warnings)
        """
        errors = []
        try:
            scene = scene_from_list(data.get('shapes') or [])
        except ValueError as e:
            errors.append(str(e))
            scene = None

        settings = None
        try:
            settings = MachineSettings.from_dict(
                data.get('settings') or {}, SessionService.default_settings()
            )
        except ValueError as e:
            errors.append(str(e))

        warnings = []
        if scene is not None and settings is not None:
            for planned in plan_scene(scene, settings.tool_radius):
                if planned.skipped:
                    warnings.append(
                        f"{shape_label(planned.shape)} will be skipped: {planned.skip_reason}"
                    )
        return errors, warnings

    @staticmethod
    def download(session: EditSession, name: Optional[str] = None) -> Tuple[bytes, str]:
        """
        Get the session's program text as a file.

        The text is exported exactly as held, manual edits included.

        Returns:
            Tuple of (file bytes, filename)
        """
        filename = build_program_filename(name or current_app.config.get('PROGRAM_FILENAME', ''))
        return program_bytes(session.program), filename
