"""Error Hierarchy — typed, categorized exceptions for all Folio failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are caller-recoverable and raised before any state mutation
    - Infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with FolioError base: FastAPI global handler catches all (ADR: uniform error shape)
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
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    caller: str | None = None
    token_id: int | None = None
    edition: int | None = None
    item: int | None = None
    debug_info: dict[str, Any] | None = None


class FolioError(Exception):
    """Base exception for all Folio errors."""

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
                    "caller": self.context.caller,
                    # token ids can exceed 2**53, JSON clients get the decimal string
                    "token_id": (
                        str(self.context.token_id)
                        if self.context.token_id is not None else None
                    ),
                    "edition": self.context.edition,
                    "item": self.context.item,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidItemError(FolioError):
    """Item number outside [0, ITEM_MULTIPLIER)."""
    def __init__(self, item: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.item = item
        reason = "item number too large" if item >= 0 else "item number negative"
        super().__init__(
            f"Invalid item {item}: {reason}",
            "INVALID_ITEM", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.item = item


class InvalidEditionError(FolioError):
    """Edition number is negative."""
    def __init__(self, edition: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.edition = edition
        super().__init__(
            f"Invalid edition {edition}: edition number negative",
            "INVALID_EDITION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.edition = edition


class InvalidIdentifierError(FolioError):
    """Token identifier outside [0, MAX_TOKEN_ID]."""
    def __init__(self, token_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.token_id = token_id
        super().__init__(
            f"Invalid token id {token_id}: outside the 256-bit token id range",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.token_id = token_id


class IdentifierOverflowError(FolioError):
    """edition * ITEM_MULTIPLIER + item exceeds the ledger's token id width."""
    def __init__(self, edition: int, item: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.edition = edition
        ctx.item = item
        super().__init__(
            f"Edition {edition} item {item} overflows the 256-bit token id range",
            "IDENTIFIER_OVERFLOW", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class LengthMismatchError(FolioError):
    """Batch operation received arrays of differing length."""
    def __init__(self, left: int, right: int, context: ErrorContext | None = None):
        super().__init__(
            f"Batch arrays differ in length: {left} != {right}",
            "LENGTH_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.left = left
        self.right = right


class UnauthorizedError(FolioError):
    """Caller is not the current administrator."""
    def __init__(self, caller: str | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.caller = caller
        super().__init__(
            f"Caller '{caller}' is not the administrator",
            "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, ctx, 403,
        )
        self.caller = caller


class InvalidAdministratorError(FolioError):
    """Administrator transfer target is empty."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "New administrator must be a non-empty address (use renounce to give up administration)",
            "INVALID_ADMINISTRATOR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(FolioError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
