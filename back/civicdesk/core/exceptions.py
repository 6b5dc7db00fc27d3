"""
Domain exceptions.

Raised by the service layer and translated into HTTP responses by the
handlers in ``civicdesk.api.internal.utils.exceptions``.
"""

# Standard library imports
from typing import Any


class CivicDeskError(Exception):
    """Base class for all CivicDesk domain errors."""

    status_code: int = 400
    error_code: str = "error"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(CivicDeskError):
    status_code = 404
    error_code = "not_found"


class InvalidStatusTransitionError(CivicDeskError):
    status_code = 409
    error_code = "invalid_status_transition"


class ImageValidationError(CivicDeskError):
    status_code = 400
    error_code = "invalid_file"


class StorageError(CivicDeskError):
    status_code = 502
    error_code = "storage_error"
