"""Session routes - scene editing, program editing and AI collaborators."""
import io

from flask import Blueprint, request, send_file

from shapecam.errors import GenerationFailure
from web.auth import api_key_required
from web.services.assistant_service import AssistantService, CollaboratorNotConfigured
from web.services.program_service import ProgramService
from web.services.session_service import SessionService
from web.utils.responses import success_response, error_response

sessions_bp = Blueprint('sessions', __name__)


def _session_payload(session_id, session, status_code=200):
    return success_response(data=SessionService.as_dict(session_id, session), status_code=status_code)


@sessions_bp.route('', methods=['POST'])
@api_key_required
def create_session():
    """Create an editing session, optionally seeded with shapes and settings."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return error_response('Expected a JSON object')

    try:
        session_id, session = SessionService.create(data)
    except ValueError as e:
        return error_response(str(e))

    return _session_payload(session_id, session, 201)


@sessions_bp.route('/<session_id>', methods=['GET'])
@api_key_required
def get_session(session_id):
    """Get scene, settings, program and mode."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)
    return _session_payload(session_id, session)


@sessions_bp.route('/<session_id>', methods=['DELETE'])
@api_key_required
def delete_session(session_id):
    """End an editing session."""
    if not SessionService.delete(session_id):
        return error_response('Session not found', 404)
    return success_response(message='Session deleted')


@sessions_bp.route('/<session_id>/shapes', methods=['POST'])
@api_key_required
def add_shape(session_id):
    """Append a shape to the scene."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response('Expected a JSON object')

    try:
        SessionService.add_shape(session, data)
    except ValueError as e:
        return error_response(str(e))

    return _session_payload(session_id, session, 201)


@sessions_bp.route('/<session_id>/shapes/<shape_id>', methods=['PUT'])
@api_key_required
def update_shape(session_id, shape_id):
    """Update a shape in place."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response('Expected a JSON object')

    try:
        SessionService.update_shape(session, shape_id, data)
    except KeyError:
        return error_response('Shape not found', 404)
    except ValueError as e:
        return error_response(str(e))

    return _session_payload(session_id, session)


@sessions_bp.route('/<session_id>/shapes/<shape_id>', methods=['DELETE'])
@api_key_required
def delete_shape(session_id, shape_id):
    """Remove a shape from the scene."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)

    try:
        SessionService.remove_shape(session, shape_id)
    except KeyError:
        return error_response('Shape not found', 404)

    return _session_payload(session_id, session)


@sessions_bp.route('/<session_id>/scene', methods=['PUT'])
@api_key_required
def replace_scene(session_id):
    """Replace every shape in the scene."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'shapes' not in data:
        return error_response("Expected an object with 'shapes'")

    try:
        SessionService.replace_scene(session, data['shapes'])
    except ValueError as e:
        return error_response(str(e))

    return _session_payload(session_id, session)


@sessions_bp.route('/<session_id>/settings', methods=['PUT'])
@api_key_required
def update_settings(session_id):
    """Change machine settings."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response('Expected a JSON object')

    try:
        SessionService.update_settings(session, data)
    except ValueError as e:
        return error_response(str(e))

    return _session_payload(session_id, session)


@sessions_bp.route('/<session_id>/program', methods=['PUT'])
@api_key_required
def edit_program(session_id):
    """Replace the program with hand-edited text (switches to manual mode)."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('program'), str):
        return error_response("Expected an object with a 'program' string")

    SessionService.edit_program(session, data['program'])
    return _session_payload(session_id, session)


@sessions_bp.route('/<session_id>/regenerate', methods=['POST'])
@api_key_required
def regenerate(session_id):
    """Discard manual edits and derive the program from the scene again."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)

    SessionService.regenerate(session)
    return _session_payload(session_id, session)


@sessions_bp.route('/<session_id>/generate', methods=['POST'])
@api_key_required
def generate_shapes(session_id):
    """Replace the scene with shapes generated from a prompt."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)

    data = request.get_json(silent=True)
    prompt = data.get('prompt') if isinstance(data, dict) else None
    if not isinstance(prompt, str) or not prompt.strip():
        return error_response("Expected an object with a 'prompt' string")

    try:
        AssistantService.generate(session, prompt)
    except CollaboratorNotConfigured as e:
        return error_response(str(e), 503)
    except GenerationFailure as e:
        return error_response(f'Failed to generate shapes: {e}', 502)

    return _session_payload(session_id, session)


@sessions_bp.route('/<session_id>/explain', methods=['POST'])
@api_key_required
def explain(session_id):
    """Explain the program and prepend the explanation as comments."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)

    explanation = AssistantService.explain(session)
    payload = SessionService.as_dict(session_id, session)
    payload['explanation'] = explanation
    return success_response(data=payload)


@sessions_bp.route('/<session_id>/download')
@api_key_required
def download_program(session_id):
    """Download the program text as a file."""
    session = SessionService.get(session_id)
    if not session:
        return error_response('Session not found', 404)

    content, filename = ProgramService.download(session, request.args.get('name'))

    buffer = io.BytesIO(content)
    buffer.seek(0)

    return send_file(
        buffer,
        mimetype='text/plain',
        as_attachment=True,
        download_name=filename
    )
