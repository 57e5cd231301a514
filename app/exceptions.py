from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for typed errors raised by the service and repository layers.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, offending ids)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Service error"
    default_code = "SERVICE_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input is malformed or a precondition is not met (400).

    Raised before any storage access, e.g. for ``page < 1`` or a blank name.
    """

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class NotFoundError(ServiceError):
    """Raised when a referenced id does not resolve to a live row (404)."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictError(ServiceError):
    """Raised when a uniqueness or state invariant would be violated (409).

    Covers duplicate active attribute names and a second soft delete.
    """

    http_status = 409
    default_message = "Conflict"
    default_code = "CONFLICT"
