"""Typed failures raised by the services.

Each error carries the HTTP status and the public message the API returns;
handlers in ``main.py`` turn them into JSON responses.
"""
from typing import Optional

from fastapi import status


class WarrantyTrackerError(Exception):
    """Base class for every failure a service may raise."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(WarrantyTrackerError):
    """Client-correctable input problem, one message per offending field."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    message = "Validation failed"

    def __init__(self, fields: dict[str, str], message: Optional[str] = None):
        super().__init__(message)
        self.fields = dict(fields)


class DuplicateEmail(WarrantyTrackerError):
    status_code = status.HTTP_409_CONFLICT
    message = "Email already registered"


class InvalidCredentials(WarrantyTrackerError):
    """Unknown email and wrong password are deliberately the same error."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid email or password"


class Unauthenticated(WarrantyTrackerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class StorageError(WarrantyTrackerError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Something went wrong. Please try again."
