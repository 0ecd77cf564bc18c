"""
Catalog Errors
Exception types raised by the catalog service, each mapped to an HTTP status.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Catalog error codes."""
    INVALID_INPUT = "INVALID_INPUT"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    CATALOG_UNAVAILABLE = "CATALOG_UNAVAILABLE"
    WRITE_FAILED = "WRITE_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CatalogError(Exception):
    """Base class for errors surfaced to catalog callers."""
    code = ErrorCode.INTERNAL_ERROR
    status_code = 500
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(CatalogError):
    """A required request field is missing, empty or malformed."""
    code = ErrorCode.INVALID_INPUT
    status_code = 400


class NotFoundError(CatalogError):
    """No catalog entry matches the requested path."""
    code = ErrorCode.RESOURCE_NOT_FOUND
    status_code = 404


class CatalogUnavailableError(CatalogError):
    """The catalog artifact is missing or unreadable."""
    code = ErrorCode.CATALOG_UNAVAILABLE
    status_code = 500


class WriteFailureError(CatalogError):
    """Writing a source file failed.
    
    ``reason`` is for server-side logs only; callers get the generic message.
    """
    code = ErrorCode.WRITE_FAILED
    status_code = 500
    
    def __init__(self, message: str, reason: str = "os_error"):
        super().__init__(message)
        self.reason = reason


@dataclass(frozen=True)
class SourceUnavailable:
    """A content source (or single file) skipped during a build."""
    source: str
    reason: str
