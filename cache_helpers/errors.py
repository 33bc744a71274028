"""
Error types raised by the cache helpers.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class CacheHelpersException(Exception):
    """Base exception for the cache helpers."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class ValidationError(CacheHelpersException):
    """Invalid arguments or configuration."""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class SerializationError(CacheHelpersException):
    """A value could not be converted to JSON."""

    def __init__(self, message: str = "Serialization failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("SERIALIZATION_ERROR", message, details)


class DecodeError(CacheHelpersException):
    """Stored bytes are not UTF-8 JSON of the requested type."""

    def __init__(self, message: str = "Decode failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("DECODE_ERROR", message, details)


class StoreError(CacheHelpersException):
    """The backing store failed."""

    def __init__(self, store: str, message: str = "Store operation failed", details: Optional[Dict[str, Any]] = None):
        self.store = store
        super().__init__("STORE_ERROR", f"{store}: {message}", details)
