"""
Error taxonomy for student record operations.

Every failed core operation raises exactly one of these; callers map them to
transport-level status codes.
"""

from typing import Any, Dict, Optional


class RecordError(Exception):
    """Base exception for all record-layer errors."""

    status_code = 500

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ValidationError(RecordError):
    """Raised when required input is missing or malformed. Nothing has been written."""

    status_code = 400


class NotFound(RecordError):
    """Raised when the referenced student does not exist."""

    status_code = 404


class Conflict(RecordError):
    """Raised when creating a student whose roll number is already in use."""

    status_code = 409


class StorageFailure(RecordError):
    """Raised for underlying store errors not otherwise classified."""

    status_code = 500
