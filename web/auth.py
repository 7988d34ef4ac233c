"""Simple API key authentication."""
from functools import wraps
import hmac

from flask import current_app, request

from web.utils.responses import error_response


def is_authenticated():
    """Check if the current request carries the configured API key."""
    api_key = current_app.config.get('API_KEY')
    if not api_key:
        return True  # No key configured, allow access

    supplied = request.headers.get('X-API-Key', '')
    return hmac.compare_digest(supplied, api_key)


def api_key_required(f):
    """Decorator to require the API key for a route."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_authenticated():
            return error_response('Invalid or missing API key', 401)
        return f(*args, **kwargs)
    return decorated_function
