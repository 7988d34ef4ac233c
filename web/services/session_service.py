"""Editing session management service."""
import logging
import threading
import uuid
from typing import Any, Dict, Optional, Tuple

from flask import current_app

from shapecam.models import MachineSettings
from shapecam.regeneration import EditSession
from shapecam.shape_parser import scene_from_list, scene_to_list, shape_from_dict, shape_to_dict

logger = logging.getLogger(__name__)


class SessionStore:
    """Thread-safe in-memory registry of editing sessions, keyed by UUID."""

    def __init__(self):
        self._sessions: Dict[str, EditSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def add(self, session: EditSession) -> str:
        session_id = str(uuid.uuid4())
        with self._lock:
            self._sessions[session_id] = session
        return session_id

    def get(self, session_id: str) -> Optional[EditSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None


class SessionService:
    """Service for creating and mutating editing sessions."""

    @staticmethod
    def store() -> SessionStore:
        return current_app.extensions['edit_sessions']

    @staticmethod
    def default_settings() -> MachineSettings:
        """Machine settings from app configuration."""
        config = current_app.config
        return MachineSettings(
            feed_rate=config.get('DEFAULT_FEED_RATE', 800.0),
            safe_height=config.get('DEFAULT_SAFE_HEIGHT', 5.0),
            cut_depth=config.get('DEFAULT_CUT_DEPTH', 2.0),
            tool_diameter=config.get('DEFAULT_TOOL_DIAMETER', 3.175)
        )

    @staticmethod
    def create(data: Optional[Dict[str, Any]] = None) -> Tuple[str, EditSession]:
        """
        Create a session from optional 'shapes' and 'settings'.

        Raises:
            ShapeParseError, DuplicateShapeError: Malformed shapes
            ValueError: Invalid settings
        """
        data = data or {}
        scene = scene_from_list(data.get('shapes') or [])
        settings = MachineSettings.from_dict(
            data.get('settings') or {}, SessionService.default_settings()
        )
        session = EditSession(scene, settings)
        session_id = SessionService.store().add(session)
        logger.info("Created session %s with %d shapes", session_id, len(scene))
        return session_id, session

    @staticmethod
    def get(session_id: str) -> Optional[EditSession]:
        return SessionService.store().get(session_id)

    @staticmethod
    def delete(session_id: str) -> bool:
        return SessionService.store().delete(session_id)

    @staticmethod
    def as_dict(session_id: str, session: EditSession) -> Dict[str, Any]:
        """Get a session as dict for JSON serialization."""
        with session.lock:
            return {
                'id': session_id,
                'mode': session.mode.value,
                'shapes': scene_to_list(session.scene),
                'settings': session.settings.to_dict(),
                'program': session.program,
                'warnings': list(session.warnings)
            }

    @staticmethod
    def add_shape(session: EditSession, data: Dict[str, Any]) -> None:
        session.add_shape(shape_from_dict(data))

    @staticmethod
    def update_shape(session: EditSession, shape_id: str, data: Dict[str, Any]) -> None:
        """
        Replace a shape's fields, keeping its id and position in the scene.

        Fields missing from data keep their current values.

        Raises:
            KeyError: If no shape has this id
        """
        with session.lock:
            existing = session.scene.get(shape_id)
            if existing is None:
                raise KeyError(shape_id)
            merged = shape_to_dict(existing)
            merged.update(data or {})
            if 'font_size' in (data or {}):
                merged['fontSize'] = data['font_size']
            merged['id'] = shape_id
            session.update_shape(shape_from_dict(merged))

    @staticmethod
    def remove_shape(session: EditSession, shape_id: str) -> None:
        session.remove_shape(shape_id)

    @staticmethod
    def replace_scene(session: EditSession, items: Any) -> None:
        session.replace_scene(scene_from_list(items))

    @staticmethod
    def update_settings(session: EditSession, data: Dict[str, Any]) -> None:
        session.update_settings(MachineSettings.from_dict(data, session.settings))

    @staticmethod
    def edit_program(session: EditSession, text: str) -> None:
        session.on_manual_edit(text)

    @staticmethod
    def regenerate(session: EditSession) -> None:
        session.on_regenerate_requested()
