"""Domain exceptions for the intranet portal.

Defines domain-level exceptions that represent rejected queries or broken
seed data. These exceptions are independent of the web framework; the
presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PortalException(Exception):
    """Base exception for all portal application errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, value).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the error envelope: {success: false, error: {message, code[, details]}}."""
        error: dict[str, Any] = {"message": self.message, "code": self.error_code}
        if self.details:
            error["details"] = self.details
        return {"success": False, "error": error}


class ValidationException(PortalException):
    """Raised when query input fails validation (e.g. out-of-range value)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        """Initialize with message, optional field name and a specific code.

        Args:
            message: Description of the validation failure.
            field: Optional query field that failed validation.
            error_code: Machine-readable code; subclasses narrow it.
        """
        details = {"field": field} if field else {}
        super().__init__(message, error_code, details)


class InvalidPageException(ValidationException):
    """Raised when the requested page is below 1 or not an integer."""

    def __init__(self) -> None:
        super().__init__(
            "Page number must be greater than 0",
            field="page",
            error_code="INVALID_PAGE",
        )


class InvalidLimitException(ValidationException):
    """Raised when the page size is outside [1, max_limit] or not an integer."""

    def __init__(self, max_limit: int = 100) -> None:
        super().__init__(
            f"Limit must be between 1 and {max_limit}",
            field="limit",
            error_code="INVALID_LIMIT",
        )


class SeedDataException(PortalException):
    """Raised when the entity store cannot be built from its seed document."""

    def __init__(self, message: str, source: str | None = None) -> None:
        """Initialize with message and optional seed source.

        Args:
            message: What is wrong with the seed data.
            source: Path or name of the seed document.
        """
        details = {"source": source} if source else {}
        super().__init__(message, "SEED_DATA_ERROR", details)
