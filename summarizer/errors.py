"""Error types raised by the services and their mapping to JSON responses.

Services raise these instead of building responses themselves; the handlers
registered by :func:`register_error_handlers` are the only place an error
turns into an HTTP status code.
"""

from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from .extensions import db


class ApiError(Exception):
    status_code = 500

    def __init__(self, message, detail=None, status_code=None):
        super().__init__(message)
        self.message = message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        body = {"error": self.message}
        if self.detail:
            body["message"] = self.detail
        return body


class ValidationError(ApiError):
    status_code = 400


class NotFound(ApiError):
    status_code = 404


class PayloadTooLarge(ApiError):
    status_code = 413


class UnsupportedMediaType(ApiError):
    status_code = 415


class UpstreamFailure(ApiError):
    """The inference API or the mail transport failed."""
    status_code = 502


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def handle_api_error(err):
        if err.status_code >= 500:
            current_app.logger.error('%s %s failed: %s (%s)', request.method, request.path, err.message, err.detail)
        else:
            current_app.logger.info('%s %s rejected: %s', request.method, request.path, err.message)
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(err):
        limit = current_app.config.get('MAX_TRANSCRIPT_BYTES')
        return handle_api_error(PayloadTooLarge(f"File too large (limit {limit} bytes)"))

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return jsonify({"error": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        current_app.logger.exception('Unhandled error on %s %s', request.method, request.path)
        db.session.rollback()
        return jsonify({"error": "Something went wrong!", "message": str(err)}), 500
