"""
JSON error handling for the API.

Every failure leaving a route is rendered as ``{"error": "<message>"}`` with
the matching HTTP status:

* ``ValidationError`` -> 400 (missing/invalid fields, duplicate numbers)
* ``NotFound``        -> 404 (record or referenced record absent)
* ``SQLAlchemyError`` -> 500 (the session is rolled back first)
"""
from flask import jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .extensions import db


class ApiError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None, **extra):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_dict(self):
        body = {"error": self.message}
        body.update(self.extra)
        return body


class ValidationError(ApiError):
    status_code = 400


class NotFound(ApiError):
    status_code = 404


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def _api_error(err):
        if err.status_code >= 500:
            app.logger.error("%s %s failed: %s", request.method, request.path, err.message)
        else:
            app.logger.warning("%s %s -> %s: %s", request.method, request.path,
                               err.status_code, err.message)
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(SQLAlchemyError)
    def _db_error(err):
        db.session.rollback()
        app.logger.exception("Database error on %s %s", request.method, request.path)
        detail = getattr(err, "orig", None) or err
        return jsonify(error=f"Database error: {detail}"), 500

    @app.errorhandler(HTTPException)
    def _http_error(err):
        # keep Flask's HTML pages outside the API
        if not request.path.startswith("/api"):
            return err
        return jsonify(error=err.description), err.code
