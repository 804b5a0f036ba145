"""
Typed application errors.

Each error carries the HTTP status it maps to. The data-access layer raises
these; the exception handlers registered in main.py render them as
{"error": {"message": ..., "status": ...}}.
"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """Base error with a message and an HTTP status code."""

    status_code: int = 500

    def __init__(self, message: Any = "Internal Server Error", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_payload(self) -> Dict[str, Any]:
        return {"error": {"message": self.message, "status": self.status_code}}


class BadRequestError(AppError):
    """400 BAD REQUEST: invalid payload, empty update or constraint violation."""
    status_code = 400

    def __init__(self, message: Any = "Bad Request"):
        super().__init__(message)


class UnauthorizedError(AppError):
    """401 UNAUTHORIZED: missing, invalid or insufficiently privileged token."""
    status_code = 401

    def __init__(self, message: Any = "Unauthorized"):
        super().__init__(message)


class NotFoundError(AppError):
    """404 NOT FOUND: the target row does not exist."""
    status_code = 404

    def __init__(self, message: Any = "Not Found"):
        super().__init__(message)
