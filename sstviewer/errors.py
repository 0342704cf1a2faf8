"""
Viewer Errors

Explicit error codes for the viewer boundary.

ERROR BOUNDARY:
===============
- Transport and payload errors are raised at the dispatch boundary
- The dispatcher turns them into a fallback document
- The composition engine never raises for schema-shaped input
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Optional


class ErrorCode(Enum):
    """
    Explicit error codes for deterministic error handling.
    Every failure reaching the dispatcher maps to one of these.
    """
    # Transport errors
    SERVICE_UNREACHABLE = auto()
    SERVICE_ERROR_STATUS = auto()

    # Payload errors
    MALFORMED_RESPONSE = auto()
    INVARIANT_VIOLATION = auto()


class ViewerError(Exception):
    """Base class for all viewer failures. Carries an ErrorCode."""

    code: ErrorCode = ErrorCode.MALFORMED_RESPONSE

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        if code is not None:
            self.code = code

    @property
    def message(self) -> str:
        return self.args[0] if self.args else ""


class ServiceUnavailable(ViewerError):
    """The graph service could not be reached or answered with an error status."""

    code = ErrorCode.SERVICE_UNREACHABLE

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message,
            ErrorCode.SERVICE_ERROR_STATUS if status_code is not None
            else ErrorCode.SERVICE_UNREACHABLE,
        )
        self.status_code = status_code


class MalformedResponse(ViewerError):
    """The service payload does not match the expected wire shape."""

    code = ErrorCode.MALFORMED_RESPONSE


class InvariantViolation(ViewerError, ValueError):
    """Constructed data violates a DTO invariant (e.g. category index out of range)."""

    code = ErrorCode.INVARIANT_VIOLATION
