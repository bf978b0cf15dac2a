"""
Custom exceptions for the Training Zones package.

This module defines a hierarchy of exceptions raised by the calculators and
the input-gathering layer. Each exception includes:
- A descriptive message
- An error code for callers that need a stable identifier
- Optional details for debugging
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error reporting."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Input errors
    INVALID_INPUT = "INVALID_INPUT"
    MISSING_INPUT = "MISSING_INPUT"

    # Data source errors
    DATA_SOURCE_ERROR = "DATA_SOURCE_ERROR"
    DATA_SOURCE_TIMEOUT = "DATA_SOURCE_TIMEOUT"


class TrainingZonesError(Exception):
    """
    Base exception for all Training Zones errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured output."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Input Errors
# ============================================================================

class InvalidInputError(TrainingZonesError):
    """Raised when an input lies outside the domain of a formula."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        if value is not None:
            error_details["value"] = value
        self.field = field
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_INPUT,
            details=error_details,
        )


class MissingInputError(TrainingZonesError):
    """Raised when a calculation needs an input that was not supplied."""

    def __init__(
        self,
        message: str,
        fields: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if fields:
            error_details["fields"] = list(fields)
        self.fields = list(fields or [])
        super().__init__(
            message=message,
            code=ErrorCode.MISSING_INPUT,
            details=error_details,
        )


# ============================================================================
# Data Source Errors
# ============================================================================

class DataSourceError(TrainingZonesError):
    """Raised when physiological data could not be read from a source."""

    def __init__(
        self,
        message: str,
        source: str = "",
        code: ErrorCode = ErrorCode.DATA_SOURCE_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if source:
            error_details["source"] = source
        self.source = source
        super().__init__(message=message, code=code, details=error_details)


class DataSourceTimeoutError(DataSourceError):
    """Raised when gathering inputs from a source exceeds its timeout."""

    def __init__(
        self,
        source: str,
        timeout_sec: float,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        error_details["timeout_sec"] = timeout_sec
        super().__init__(
            message=f"Reading inputs from '{source}' timed out after {timeout_sec}s",
            source=source,
            code=ErrorCode.DATA_SOURCE_TIMEOUT,
            details=error_details,
        )
