"""
API Errors

Every failure leaves the API as ``{"message": ...}`` with the matching status.
"""

import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from blog_backend.extensions import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = 500
    default_message = 'Internal Server Error'

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'message': self.message}


class BadRequest(ApiError):
    status_code = 400
    default_message = 'Bad Request'


class Unauthorized(ApiError):
    status_code = 401
    default_message = 'Unauthorized'


class NotFound(ApiError):
    status_code = 404
    default_message = 'Not Found'


class Conflict(ApiError):
    status_code = 409
    default_message = 'Conflict'


class PayloadTooLarge(ApiError):
    status_code = 413
    default_message = 'File too large'


class InternalError(ApiError):
    status_code = 500
    default_message = 'Internal Server Error'


def register_error_handlers(app):
    """Attach JSON error handlers to the application."""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error('%s %s failed: %s', request.method, request.path, error.message,
                         exc_info=error)
            db.session.rollback()
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(error):
        limit = app.config.get('UPLOAD_MAX_BYTES')
        return jsonify({'message': f'File exceeds the {limit} byte limit'}), 413

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'message': error.description or error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.exception('Unhandled error on %s %s', request.method, request.path)
        db.session.rollback()
        return jsonify({'message': InternalError.default_message}), 500
