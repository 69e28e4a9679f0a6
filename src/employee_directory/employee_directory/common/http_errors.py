from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthenticationError, TransportError, ValidationError

logger = logging.getLogger(__name__)


def error_response(error: str, message: str, status: int):
    return jsonify({"error": error, "message": message, "status": status}), status


def register(app: Flask) -> None:
    """Map exceptions to the uniform JSON error body {error, message, status}."""

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        logger.warning("Validation error: %s", e)
        return error_response("Invalid request", str(e), 422)

    @app.errorhandler(AuthenticationError)
    def handle_authentication(e: AuthenticationError):
        logger.warning("Authentication failed: %s", e)
        return error_response("Unauthorized", str(e), 401)

    @app.errorhandler(TransportError)
    def handle_transport(e: TransportError):
        return error_response("Internal Server Error", "Token validation failed", 500)

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        status = e.code or 500
        return error_response(e.name, e.description or e.name, status)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled exception")
        return error_response("Internal Server Error", "An unexpected error occurred", 500)
