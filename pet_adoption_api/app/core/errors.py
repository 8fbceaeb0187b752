"""
Domain errors raised by the service layer.

Each error maps to one variant of the API's error body, e.g.
``{"NotFound": "Pet not found"}``.  The handler registered in
``main.create_app`` performs the conversion, so services simply raise.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors reported back to the caller."""

    kind = "Error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {self.kind: self.message}


class NotFound(ServiceError):
    """A referenced id is absent from its table."""

    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND


class EmptyField(ServiceError):
    """A required field of a create payload is missing or empty."""

    kind = "EmptyField"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidPayload(ServiceError):
    """The payload is well formed but not acceptable in the current state."""

    kind = "InvalidPayload"
    status_code = status.HTTP_409_CONFLICT
