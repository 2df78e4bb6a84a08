"""Exceptions raised by the plan engine and its data layer.

Each carries the HTTP status it maps to, so the API handlers can render any
of them without knowing the concrete type.
"""

from typing import Any, Dict, List, Optional


class AppException(Exception):
    """Base class: a message, an HTTP status and structured details."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Body of the `{"error": ...}` envelope."""
        body: Dict[str, Any] = {"message": self.message, "status_code": self.status_code}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(AppException):
    """Raised when a request lacks required fields or carries bad values.

    All missing fields are reported together so the caller can fix the
    request in a single round trip.
    """

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None, missing_fields: Optional[List[str]] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional single field name that failed validation.
            missing_fields: Optional list of every required field that is absent.
        """
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if missing_fields:
            details["missing_fields"] = list(missing_fields)
        super().__init__(message, details=details)

    @classmethod
    def missing(cls, fields: List[str]) -> "ValidationError":
        return cls(f"Missing required fields: {', '.join(fields)}", missing_fields=fields)


class DatabaseError(AppException):
    """A catalog could not be read."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, details={"operation": operation} if operation else None)


class ConfigurationError(AppException):
    """An environment setting is malformed or out of range."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, details={"config_key": config_key} if config_key else None)
