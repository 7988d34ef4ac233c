"""Main routes - health check."""
from flask import Blueprint

from web.utils.responses import success_response

main_bp = Blueprint('main', __name__)


@main_bp.route('/health')
def health():
    """Liveness check."""
    return success_response(message='ok')
