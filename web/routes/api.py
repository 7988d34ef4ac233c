"""API routes - stateless compilation endpoints."""
from flask import Blueprint, request

from web.auth import api_key_required
from web.services.program_service import ProgramService
from web.utils.responses import success_response, error_response, validation_response

api_bp = Blueprint('api', __name__)


@api_bp.route('/compile', methods=['POST'])
@api_key_required
def compile_program():
    """Compile shapes and settings to a program without a session."""
    data = request.get_json(silent=True)
    if data is None:
        return error_response('No data provided')
    if not isinstance(data, dict):
        return error_response('Expected a JSON object')

    try:
        result = ProgramService.compile(data)
    except ValueError as e:
        return error_response(str(e))

    return success_response(data={
        'program': result.program,
        'warnings': result.warnings,
        'skipped': result.skipped_ids
    })


@api_bp.route('/validate', methods=['POST'])
@api_key_required
def validate():
    """Validate shapes and settings before generating."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response('Expected a JSON object')

    errors, warnings = ProgramService.validate(data)
    return validation_response(errors, warnings)
