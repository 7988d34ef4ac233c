"""API response helper functions."""
from flask import jsonify


def success_response(data=None, message=None, status_code=200):
    """Return a successful API response."""
    response = {"status": "ok"}
    if data is not None:
        response["data"] = data
    if message is not None:
        response["message"] = message
    return jsonify(response), status_code


def error_response(message, status_code=400):
    """Return an error API response."""
    return jsonify({"status": "error", "message": message}), status_code


def validation_response(errors, warnings=None):
    """Return a validation result response."""
    return jsonify({
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings or []
    }), 200
