"""
Error types raised by the Blog API and their HTTP translation.

Handlers raise these exceptions; ``register_error_handlers`` turns them
into ``{"error": message}`` JSON responses so no failure escapes the
HTTP boundary as an unhandled exception.
"""

import logging
from flask import Flask, jsonify, Response
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """A required field is missing or malformed."""

    status_code = 400


class NotFoundError(ApiError):
    """No post exists with the requested id."""

    status_code = 404


class ConflictError(ApiError):
    """The id in a request body does not match the id in the path."""

    status_code = 400


def register_error_handlers(app: Flask) -> None:
    """Install JSON error handlers on the application."""

    @app.errorhandler(ApiError)
    def handle_api_error(error: ApiError) -> tuple[Response, int]:
        logger.warning(f"{type(error).__name__}: {error.message}")
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException) -> tuple[Response, int]:
        """Render framework errors (unknown route, bad method, bad JSON) as JSON."""
        return jsonify({"error": error.description or error.name}), error.code or 500

    @app.errorhandler(500)
    def internal_error(error: Exception) -> tuple[Response, int]:
        """Handle 500 Internal Server errors."""
        logger.error(f"Internal server error: {error}")
        return jsonify({"error": "Internal server error"}), 500
