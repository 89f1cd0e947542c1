"""Error Hierarchy — typed, categorized exceptions for every core failure mode.

Invariants:
    - Every error has a code (ErrorKind value), category, severity and http_status
    - All core errors are 400-level and recoverable at the adapter boundary
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with StudentRecordsError base: one FastAPI handler catches all
    - MissingFieldError subclasses RecordValidationError: both are "bad request",
      callers that only care about validation catch the parent
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from student_records.core.domain_types import ErrorKind


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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for the response envelope and logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_id: int | None = None
    field: str | None = None


class StudentRecordsError(Exception):
    """Base exception for all student record errors."""

    def __init__(
        self,
        message: str,
        code: ErrorKind,
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

    @property
    def kind(self) -> ErrorKind:
        return self.code

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "record_id": self.context.record_id,
                    "field": self.context.field,
                },
            }
        }


# ─── Validation Errors (400) ────────────────────────────────────

class RecordValidationError(StudentRecordsError):
    """A field value is present but semantically invalid."""
    def __init__(
        self,
        message: str,
        field: str,
        context: ErrorContext | None = None,
        code: ErrorKind = ErrorKind.VALIDATION_ERROR,
    ):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field


class MissingFieldError(RecordValidationError):
    """One or more required create fields are absent or empty."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing required fields: {', '.join(missing)}",
            missing[0] if missing else "",
            context,
            code=ErrorKind.MISSING_FIELD,
        )
        self.missing = missing


class InvalidArgumentError(StudentRecordsError):
    """A record identifier parameter is not an integer."""
    def __init__(self, raw_value: object, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid ID parameter: {raw_value!r}",
            ErrorKind.INVALID_ARGUMENT, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.raw_value = raw_value


# ─── Resource Errors (404 / 409) ────────────────────────────────

class RecordNotFoundError(StudentRecordsError):
    """No record exists for the given identifier."""
    def __init__(self, record_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.record_id = record_id
        super().__init__(
            f"Student {record_id} not found",
            ErrorKind.NOT_FOUND, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.record_id = record_id


class ConflictError(StudentRecordsError):
    """A uniqueness constraint would be violated."""
    def __init__(
        self, field: str, value: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            f"Another student already uses {field} {value!r}",
            ErrorKind.CONFLICT, ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.field = field
        self.value = value
