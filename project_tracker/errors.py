import logging

from flask import jsonify
from marshmallow import ValidationError


logger = logging.getLogger(__name__)


class TrackerError(Exception):
    status_code = 500

    def __init__(self, message=None):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class InvalidRequest(TrackerError):
    status_code = 400


class DuplicateEmail(InvalidRequest):
    def __init__(self, message="Email already exists"):
        super().__init__(message)


class DuplicateSubmission(InvalidRequest):
    def __init__(self, message="A submission already exists for this project"):
        super().__init__(message)


class SubmissionLocked(InvalidRequest):
    def __init__(self, status):
        super().__init__(f"Cannot delete a submission with status '{status}'")
        self.status = status


class InvalidCredentials(TrackerError):
    status_code = 401

    def __init__(self, message="Invalid email or password"):
        super().__init__(message)


class PermissionDenied(TrackerError):
    status_code = 403

    def __init__(self, message="Permission denied"):
        super().__init__(message)


def format_validation_error(error):
    """Flatten marshmallow's nested message dict into one readable line."""
    messages = error.messages
    if isinstance(messages, dict):
        parts = []
        for field, problems in sorted(messages.items()):
            if isinstance(problems, (list, tuple)):
                problems = "; ".join(str(p) for p in problems)
            parts.append(f"{field}: {problems}")
        return ", ".join(parts)
    if isinstance(messages, (list, tuple)):
        return "; ".join(str(m) for m in messages)
    return str(messages)


def error_response(message, status_code):
    return jsonify({"success": False, "error": message}), status_code


def register_error_handlers(app):
    from . import db

    @app.errorhandler(TrackerError)
    def handle_tracker_error(error):
        logger.warning("Request rejected: %s", error.message)
        return error_response(error.message, error.status_code)

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        message = format_validation_error(error)
        logger.warning("Validation failed: %s", message)
        return error_response(message, 400)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        # Routing errors keep their own status code
        from werkzeug.exceptions import HTTPException
        if isinstance(error, HTTPException):
            return error_response(error.description, error.code)
        db.session.rollback()
        logger.exception("Unhandled error: %s", error)
        return error_response(str(error), 500)
