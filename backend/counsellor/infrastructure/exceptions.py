"""
Custom Exceptions for the Study-Abroad Counsellor

Hierarchical exception classes for error handling across layers.
The scoring engine itself never raises; these cover the catalog, the
language-model client and configuration.
"""

from typing import Optional, Dict, Any


class CounsellorError(Exception):
    """Base exception for all counsellor errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class NotFoundError(CounsellorError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        message: str,
        resource: Optional[str] = None,
        resource_id: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if resource:
            details["resource"] = resource
        if resource_id:
            details["id"] = resource_id
        super().__init__(message, details, original_error)


class AIServiceError(CounsellorError):
    """Raised when the language-model call fails."""

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        details = dict(details or {})
        if model:
            details["model"] = model
        if operation:
            details["operation"] = operation
        super().__init__(message, details, original_error)


class RateLimitError(AIServiceError):
    """Raised when API rate limits are exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if retry_after:
            details["retry_after_seconds"] = retry_after
        super().__init__(message, details=details, original_error=original_error)


class ConfigurationError(CounsellorError):
    """Raised when configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        missing_keys: Optional[list] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if missing_keys:
            details["missing_keys"] = missing_keys
        super().__init__(message, details, original_error)
