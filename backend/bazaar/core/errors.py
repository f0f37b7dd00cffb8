"""Error Hierarchy — typed, categorized exceptions for service failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Moderation rejections are NOT errors: they are Verdicts returned as data
    - to_response() produces the REST envelope shared by every error handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BazaarError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    RATE_LIMIT = "rate_limit"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    subject: str | None = None
    client_key: str | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_seconds: int | None = None


class BazaarError(Exception):
    """Base exception for all moderation service errors."""

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
                    "subject": self.context.subject,
                    "retry_after_seconds": self.context.retry_after_seconds,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class RateLimitExceededError(BazaarError):
    """Too many submissions from one client inside the window."""
    def __init__(
        self, scope: str, limit: int, window_seconds: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.subject = ctx.subject or scope
        ctx.retry_after_seconds = window_seconds
        super().__init__(
            f"Too many requests: at most {limit} {scope} checks per {window_seconds}s",
            "RATE_LIMITED", ErrorCategory.RATE_LIMIT,
            ErrorSeverity.WARNING, ctx, 429,
        )
        self.scope = scope
        self.limit = limit
        self.window_seconds = window_seconds


class ResourceNotFoundError(BazaarError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BazaarError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
