"""Error Hierarchy — typed, categorized exceptions for every nurse registry failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400/404) are recoverable; StoreError (500) is critical
    - to_response() produces the REST envelope the client reads error.message from
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with NurseRegistryError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    nurse_id: int | None = None
    license_number: str | None = None
    debug_info: dict[str, Any] | None = None


class NurseRegistryError(Exception):
    """Base exception for all nurse registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "nurse_id": self.context.nurse_id,
                    "license_number": self.context.license_number,
                },
            }
        }


# ─── Domain Errors (400/404) ────────────────────────────────────

class RecordValidationError(NurseRegistryError):
    """A required field is missing, empty, or malformed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class DuplicateLicenseError(NurseRegistryError):
    """Another record already holds this license number."""
    def __init__(self, license_number: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.license_number = license_number
        super().__init__(
            "License number already exists",
            "DUPLICATE_LICENSE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.license_number = license_number


class NurseNotFoundError(NurseRegistryError):
    """No record with the requested id."""
    def __init__(self, nurse_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.nurse_id = nurse_id
        super().__init__(
            "Nurse not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.nurse_id = nurse_id


# ─── Infrastructure Errors (500) ────────────────────────────────

class StoreError(NurseRegistryError):
    """Unexpected persistence failure."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Failed to {operation}: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
