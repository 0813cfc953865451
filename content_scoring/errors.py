"""Error definitions for the content scoring service layers.

The scoring engine itself never raises these: drafts are scored best-effort.
They are raised at the boundaries where callers hand data in (API request
bodies, CLI input files, configuration).
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Categories of errors that can occur in the system."""

    VALIDATION_ERROR = "validation_error"
    CONFIGURATION_ERROR = "configuration_error"
    INPUT_ERROR = "input_error"
    SYSTEM_ERROR = "system_error"


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class BaseError(Exception):
    """Base error class for all content scoring errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        severity: ErrorSeverity,
        error_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize base error.

        Args:
            message: Error message
            category: Error category
            severity: Error severity
            error_id: Optional unique error ID
            details: Optional error details
        """
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.error_id = error_id
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for API responses and structured logs."""
        return {
            "error": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "error_id": self.error_id,
            "details": self.details,
            "timestamp": self.timestamp,
        }


class ValidationError(BaseError):
    """Error raised when a request payload is missing required data."""

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.LOW,
        error_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize validation error."""
        super().__init__(
            message,
            ErrorCategory.VALIDATION_ERROR,
            severity,
            error_id,
            details,
        )


class ConfigurationError(BaseError):
    """Error raised when service configuration is invalid."""

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        error_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize configuration error."""
        super().__init__(
            message,
            ErrorCategory.CONFIGURATION_ERROR,
            severity,
            error_id,
            details,
        )


class ContentInputError(BaseError):
    """Error raised when article content cannot be read or decoded."""

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        error_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize content input error."""
        super().__init__(
            message,
            ErrorCategory.INPUT_ERROR,
            severity,
            error_id,
            details,
        )
