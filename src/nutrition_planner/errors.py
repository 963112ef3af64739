"""Application error types.

Services raise these errors; the API layer renders any ``AppError`` as a
JSON body of the form ``{"error": message, "details": {...}}``.
"""


class AppError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, object] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnauthorizedError(AppError):
    """Raised when the caller identity is missing."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input fields are missing or malformed."""

    status_code = 422

    def __init__(self, message: str, fields: list[dict[str, str]] | None = None):
        super().__init__(message, details={"fields": fields or []})
        self.fields = fields or []

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        """Build an error describing a single invalid field."""
        return cls(message, fields=[{"field": field, "message": message}])


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    status_code = 404

    def __init__(self, resource: str, identifier: object):
        super().__init__(
            f"{resource} '{identifier}' not found",
            details={"resource": resource, "id": str(identifier)},
        )


class ConflictError(AppError):
    """Raised when a record with the same external identifier exists."""

    status_code = 409

    def __init__(self, message: str, existing: object | None = None):
        super().__init__(message)
        self.existing = existing


class UpstreamError(AppError):
    """Raised when the FoodData Central API fails or rejects a call."""

    status_code = 502

    def __init__(
        self,
        message: str,
        upstream_status: int | None = None,
        upstream_detail: object | None = None,
    ):
        super().__init__(
            message,
            details={
                "upstream_status": upstream_status,
                "upstream_detail": upstream_detail,
            },
        )
        self.upstream_status = upstream_status
        self.upstream_detail = upstream_detail


class InsufficientDataError(AppError):
    """Raised when stored data cannot support the requested operation."""

    status_code = 400


class InternalError(AppError):
    """Raised when the persistent store fails."""

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message, details={"operation": operation})
        self.operation = operation


class DuplicateKeyError(Exception):
    """Storage-level signal that a uniqueness constraint rejected a write."""

    def __init__(self, table: str, detail: str | None = None):
        super().__init__(f"Duplicate key in {table}: {detail or 'n/a'}")
        self.table = table
        self.detail = detail
