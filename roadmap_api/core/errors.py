"""Error Hierarchy — typed, categorized exceptions for all Roadmap API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) carry a descriptive message; server errors (500-level)
      always answer with GENERIC_ERROR_MESSAGE
    - to_response() produces the REST envelope: {"error": <str>, ...}
    - No internal details (SQL, driver messages) leaked in user-facing bodies

Design Decisions:
    - Single hierarchy with RoadmapError base: FastAPI global handler catches all
    - Internal detail kept on the exception (for logs), public message chosen by status
"""

from enum import Enum
from typing import Any

GENERIC_ERROR_MESSAGE = "Something went wrong!"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


class RoadmapError(Exception):
    """Base exception for all Roadmap API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    @property
    def public_message(self) -> str:
        if self.http_status >= 500:
            return GENERIC_ERROR_MESSAGE
        return self.message

    def to_response(self) -> dict[str, Any]:
        """Convert to standardized REST error response."""
        return {"error": self.public_message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ReferenceValidationError(RoadmapError):
    """Body references an entity that does not exist under the same template."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field

    def to_response(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "details": [{"field": self.field, "message": self.message}],
        }


class ResourceNotFoundError(RoadmapError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(RoadmapError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
