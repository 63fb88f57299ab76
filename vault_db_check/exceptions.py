"""
Exception hierarchy with error codes and context.

Every error records an id, a timestamp and the causing exception, and logs
itself when constructed. Secrets must never be passed as context.
"""

import traceback
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Standardized error codes."""

    # System errors (1xxx)
    INTERNAL_ERROR = "1000"
    DATABASE_ERROR = "1001"
    CONNECTION_ERROR = "1002"
    CONFIGURATION_ERROR = "1003"

    # Validation errors (2xxx)
    VALIDATION_FAILED = "2000"
    INVALID_FORMAT = "2001"
    MISSING_REQUIRED = "2002"

    # Auth errors (4xxx)
    AUTHENTICATION_FAILED = "4001"
    PRECONDITION_FAILED = "4004"

    # External service errors (5xxx)
    EXTERNAL_API_ERROR = "5002"


class BaseError(Exception):
    """Base exception with context, error codes, logging, and error chaining."""

    log_level = "error"

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        cause: Optional[Exception] = None,
        **context: Any,
    ):
        """
        Initialize base error with context.

        Args:
            message: Human-readable error message
            error_code: Standardized error code from ErrorCode enum
            cause: Original exception that caused this error
            **context: Additional context information
        """
        self.message = message
        self.error_code = error_code
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()
        self.error_id = str(uuid.uuid4())
        self.context = context
        self.context["error_id"] = self.error_id

        if cause:
            self.context["cause"] = {
                "type": type(cause).__name__,
                "message": str(cause),
                "traceback": traceback.format_exception(type(cause), cause, cause.__traceback__),
            }

        self._log_error()

        super().__init__(message)

    def _log_error(self) -> None:
        """Log the error at the level declared by the class."""
        # Lazy import; the logger module depends on config
        from .utils.logger import get_logger

        logger = get_logger()

        log_data = {
            "error_id": self.error_id,
            "error_code": self.error_code.value,
            "timestamp": self.timestamp,
        }
        log_data.update({k: v for k, v in self.context.items() if k not in ("cause", "error_id")})
        if "cause" in self.context:
            log_data["cause"] = self.context["cause"]["type"]

        log_method = getattr(logger, self.log_level)
        log_method(f"Error {self.error_code.value}: {self.message}", extra=log_data)


class ConfigurationError(BaseError):
    """Database config file could not be read, parsed or validated."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIGURATION_ERROR,
        path: Optional[str] = None,
        cause: Optional[Exception] = None,
        **context,
    ):
        if path:
            context["path"] = path
        super().__init__(message, error_code, cause, **context)


class ExternalServiceError(BaseError):
    """External service integration errors."""

    log_level = "warning"

    def __init__(
        self,
        message: str,
        service_name: str,
        error_code: ErrorCode = ErrorCode.EXTERNAL_API_ERROR,
        cause: Optional[Exception] = None,
        **context,
    ):
        context["service_name"] = service_name
        super().__init__(message, error_code, cause, **context)


class VaultError(ExternalServiceError):
    """Vault request failed or returned an unusable response."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.EXTERNAL_API_ERROR,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
        **context,
    ):
        if status_code is not None:
            context["status_code"] = status_code
        super().__init__(message, "vault", error_code, cause, **context)


class DatabaseConnectionError(BaseError):
    """The database driver refused or failed the connection."""

    log_level = "warning"

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONNECTION_ERROR,
        cause: Optional[Exception] = None,
        **context,
    ):
        super().__init__(message, error_code, cause, **context)


class MissingAppRoleCredentialsError(BaseError):
    """Neither AppRole identifier is present in the environment."""

    def __init__(self, message: str, **context):
        super().__init__(message, ErrorCode.PRECONDITION_FAILED, None, **context)
