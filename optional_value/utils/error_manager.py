"""
Error management for the optional-value package.

This module provides the standardized error classes raised by the
container and the configuration layer, each carrying an error code,
a severity and optional context.
"""

import logging
from enum import Enum
from typing import Dict, Any, Optional

# Configure module logger
logger = logging.getLogger("optional_value.errors")


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    CRITICAL = "CRITICAL"  # Application cannot continue
    ERROR = "ERROR"  # Operation failed, but application can continue
    WARNING = "WARNING"  # Potentially problematic situation
    INFO = "INFO"  # Informational message about an error
    DEBUG = "DEBUG"  # Expected control flow, usually handled by the caller


class ErrorCode(Enum):
    """
    Standard error codes for the optional-value package.

    Format: CATEGORY_DESCRIPTION
    Example: CONFIG_INVALID
    """

    # Container errors
    NULL_REFERENCE = "NULL_REFERENCE"
    NO_SUCH_ELEMENT = "NO_SUCH_ELEMENT"

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_MISSING = "CONFIG_MISSING"

    # Unknown errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


_SEVERITY_LEVELS = {
    ErrorSeverity.CRITICAL: logging.CRITICAL,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.DEBUG: logging.DEBUG,
}


class OptionalValueError(Exception):
    """
    Base exception class for the optional-value package.

    This class provides standardized error handling with an error code,
    a severity and consistent formatting.
    """

    # Subclasses raised on ordinary control flow turn this off
    log_on_raise = True

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        cause: Optional[BaseException] = None,
        **kwargs,
    ):
        """
        Initialize an OptionalValueError.

        Args:
            message: Error message
            code: Error code
            severity: Error severity level
            cause: Original exception that caused this error
            **kwargs: Additional context information to add to error
        """
        self.message = message
        self.code = code
        self.severity = severity
        self.cause = cause
        self.additional_info: Dict[str, Any] = dict(kwargs)

        # Create the final error message
        full_message = f"{code.value}: {message}"
        if cause:
            full_message += f" (Caused by: {type(cause).__name__}: {str(cause)})"

        super().__init__(full_message)

        if self.log_on_raise:
            self._log_error()

    def _log_error(self):
        """Log the error based on its severity."""
        level = _SEVERITY_LEVELS.get(self.severity, logging.INFO)
        if logger.isEnabledFor(level):
            logger.log(level, self._format_for_logging())

    def _format_for_logging(self) -> str:
        """Format the error for logging."""
        parts = [f"ERROR [{self.code.value}] ({self.severity.value}): {self.message}"]

        if self.additional_info:
            parts.append("Additional Info:")
            for key, value in self.additional_info.items():
                parts.append(f"  {key}: {value}")

        if self.cause:
            parts.append(f"Caused by: {type(self.cause).__name__}: {str(self.cause)}")

        return "\n".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary for serialization."""
        result = {
            "code": self.code.value,
            "message": self.message,
            "severity": self.severity.value,
        }

        if self.additional_info:
            result["additional_info"] = self.additional_info

        if self.cause:
            result["cause"] = {
                "type": type(self.cause).__name__,
                "message": str(self.cause),
            }

        return result


# Specific error classes


class NullReferenceError(OptionalValueError, TypeError):
    """None given where a value is required."""

    log_on_raise = False

    def __init__(
        self, message: str, code: ErrorCode = ErrorCode.NULL_REFERENCE, **kwargs
    ):
        super().__init__(message, code=code, severity=ErrorSeverity.DEBUG, **kwargs)


class NoSuchElementError(OptionalValueError, LookupError):
    """Value requested from an empty optional."""

    log_on_raise = False

    def __init__(
        self, message: str, code: ErrorCode = ErrorCode.NO_SUCH_ELEMENT, **kwargs
    ):
        super().__init__(message, code=code, severity=ErrorSeverity.DEBUG, **kwargs)


class ConfigurationError(OptionalValueError, ValueError):
    """Error related to configuration."""

    def __init__(
        self, message: str, code: ErrorCode = ErrorCode.CONFIG_INVALID, **kwargs
    ):
        super().__init__(message, code=code, severity=ErrorSeverity.ERROR, **kwargs)
