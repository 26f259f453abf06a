# app/core/exceptions.py
from app.utils.error_codes import ERROR_CODES


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    code = ERROR_CODES["SERVER_ERROR"]

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(AppError):
    """A referenced cafe or employee does not exist."""

    status_code = 404
    code = ERROR_CODES["NOT_FOUND"]


class InvalidArgumentError(AppError):
    """Malformed input, or an attempt to change an immutable field."""

    status_code = 400
    code = ERROR_CODES["VALIDATION_ERROR"]


class ConflictError(AppError):
    """A unique identifier is already taken."""

    status_code = 400
    code = ERROR_CODES["CONFLICT"]
