"""Error taxonomy for workflow storage actions."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Stable, machine-readable failure kinds. The value is the wire code."""

    INVALID_REQUEST = "invalid_request"
    MISSING_IDENTIFIER = "missing_identifier"
    UNSUPPORTED_VERB = "unsupported_action"
    NO_DATA = "no_data"
    NOT_IMPLEMENTED = "not_implemented"
    INVALID_LOCATION = "invalid_location"
    NOT_FOUND = "not_found"
    STORAGE_WRITE_ERROR = "storage_write_error"
    STORAGE_READ_ERROR = "storage_read_error"
    LOCAL_WRITE_ERROR = "local_write_error"

    @property
    def status(self) -> int:
        return _STATUS_FOR_KIND[self]

    @property
    def is_client_error(self) -> bool:
        return self.status < 500


_STATUS_FOR_KIND = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.MISSING_IDENTIFIER: 400,
    ErrorKind.UNSUPPORTED_VERB: 400,
    ErrorKind.NO_DATA: 400,
    ErrorKind.NOT_IMPLEMENTED: 501,
    ErrorKind.INVALID_LOCATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE_WRITE_ERROR: 502,
    ErrorKind.STORAGE_READ_ERROR: 502,
    ErrorKind.LOCAL_WRITE_ERROR: 500,
}


class WorkflowStorageError(Exception):
    """Base exception for all request-level failures of the storage service.

    ``message`` is safe to return to callers. ``cause`` keeps the underlying
    exception for logging and must never be rendered into a response.
    """

    def __init__(self, kind: ErrorKind, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def status(self) -> int:
        return self.kind.status


class DecodeError(WorkflowStorageError):
    """Raised when an inbound envelope cannot be turned into an Action."""
    pass


class ActionFailure(WorkflowStorageError):
    """Raised by the orchestrator when a decoded action cannot be carried out."""
    pass


class ConfigurationError(Exception):
    """Raised at startup when the service configuration is unusable."""
    pass


__all__ = [
    "ErrorKind",
    "WorkflowStorageError",
    "DecodeError",
    "ActionFailure",
    "ConfigurationError",
]
