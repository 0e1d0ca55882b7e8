"""
Custom Exceptions for the Admission Chance Engine

Hierarchical exception classes for proper error handling across layers.
Missing profile signals are NOT errors; they surface as factors.
"""

from typing import Optional, Dict, Any, List


class AdmissionEngineError(Exception):
    """Base exception for all admission engine errors."""

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


class ValidationError(AdmissionEngineError):
    """Raised when a profile or record fails validation before scoring."""

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if errors:
            details["errors"] = errors
        super().__init__(message, details, original_error)


class DataSourceError(AdmissionEngineError):
    """Raised when a catalog or program source fails."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        identifier: Optional[Any] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if source:
            details["source"] = source
        if identifier is not None:
            details["identifier"] = identifier
        super().__init__(message, details, original_error)


class NotFoundError(DataSourceError):
    """Raised when a requested program has no backing record."""
    pass


class ConfigurationError(AdmissionEngineError):
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
