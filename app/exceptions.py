from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(ServiceValidationError):
    """Raised when a requested resource was not found. http_status is 404."""

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class ConflictError(ServiceValidationError):
    """Raised when a resource conflict occurs (e.g., a restaurant already
    registered for the same head chef). http_status is 409."""

    http_status = 409

    def __init__(self, message: str = "Conflict", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class UnauthorizedError(ServiceValidationError):
    """Raised when authentication or authorization fails. http_status is 401."""

    http_status = 401

    def __init__(self, message: str = "Unauthorized", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class DatabaseUnavailableError(Exception):
    """Raised when the database connection is not ready in time or failed.

    Attributes:
        message: human-readable message
        error: short classification ("Connection attempt timed out", ...)
        details: underlying driver error text, if any
        retry_after: seconds a client should wait before retrying
        http_status: 503
    """

    http_status = 503

    def __init__(
        self,
        message: str = "Database service unavailable",
        error: str = "Database connection failed",
        details: Optional[str] = None,
        retry_after: int = 10,
    ):
        super().__init__(message)
        self.message = message
        self.error = error
        self.details = details
        self.retry_after = retry_after

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message, "error": self.error}
        if self.details:
            payload["details"] = self.details
        payload["retryAfter"] = self.retry_after
        return payload

    def __str__(self) -> str:
        return self.message
