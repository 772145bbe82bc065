"""Error Hierarchy: typed, categorized exceptions for every write-path failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the REST envelope outer layers hand back to clients
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EventBookError base: one except clause catches all
    - ErrorContext as dataclass: observability fields travel with the error
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    event_id: str | None = None
    booking_id: str | None = None
    field: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class EventBookError(Exception):
    """Base exception for all eventbook errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "event_id": self.context.event_id,
                    "booking_id": self.context.booking_id,
                    "field": self.context.field,
                },
            }
        }


# --- Validation Errors (400-level) --------------------------------

class MissingFieldError(EventBookError):
    """A required field is absent, blank, or an empty list."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            f'Field "{field}" is required and cannot be empty',
            "MISSING_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field


class InvalidDateError(EventBookError):
    """Event date text could not be parsed into a calendar date."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = "date"
        super().__init__(
            f"Invalid event date: {value!r}",
            "INVALID_DATE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.value = value


class InvalidTimeError(EventBookError):
    """Event time is not 24-hour HH:MM."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = "time"
        super().__init__(
            f"Invalid event time {value!r}; expected HH:MM (24h) format",
            "INVALID_TIME", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.value = value


class InvalidEmailError(EventBookError):
    """Booking email does not match the accepted address pattern."""
    def __init__(self, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = "email"
        super().__init__(
            "Invalid email address",
            "INVALID_EMAIL", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


# --- Reference / Conflict Errors ----------------------------------

class DanglingReferenceError(EventBookError):
    """A foreign key points at a record that does not exist."""
    def __init__(
        self, kind: str, ref_id: str | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Referenced {kind} does not exist",
            "DANGLING_REFERENCE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 422,
        )
        self.kind = kind
        self.ref_id = ref_id


class DuplicateSlugError(EventBookError):
    """Another event already owns this slug (unique index violation)."""
    def __init__(self, slug: str, context: ErrorContext | None = None):
        super().__init__(
            f"An event with slug '{slug}' already exists",
            "DUPLICATE_SLUG", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.slug = slug


class ResourceNotFoundError(EventBookError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# --- Store Errors (500-level) -------------------------------------

class StoreUnavailableError(EventBookError):
    """The record store could not be reached or the operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
