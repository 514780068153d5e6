from __future__ import annotations

from fastapi import HTTPException


class ResourceError(HTTPException):
    """Client-side failure of a resource operation, rendered as ``{"detail": ...}``."""

    status = 400

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=self.status, detail=detail)


class InvalidRangeError(ResourceError):
    """Bad or missing pagination window, sort field or sort direction."""


class ValidationError(ResourceError):
    """A filter, id or patch value could not be coerced to its field type."""


class NotFoundError(ResourceError):
    status = 404


def bad_field_value(field_name: str, kind: str) -> ValidationError:
    return ValidationError(f'Invalid value for field "{field_name}" ({kind})')
