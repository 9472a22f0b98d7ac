"""Error Hierarchy - typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are caller mistakes; configuration/infrastructure errors (5xx) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all
    - Plan errors carry the offending plan name / fields so callers can inspect them
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Extra context surfaced in the error envelope and logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    plan_name: str | None = None
    user_email: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog errors."""

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
                    "plan_name": self.context.plan_name,
                },
            }
        }


# ─── Plan Errors (4xx) ──────────────────────────────────────────

class PlanValidationError(CatalogError):
    """Plan has missing or invalid fields."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Invalid plan field(s): {', '.join(fields)}",
            "PLAN_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.fields = list(fields)

    def to_response(self) -> dict:
        body = super().to_response()
        body["error"]["fields"] = self.fields
        return body


class PlanAlreadyExistsError(CatalogError):
    """A plan with the same name is already stored."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.plan_name = name
        super().__init__(
            f"Plan '{name}' already exists",
            "PLAN_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.name = name


class PlanDefaultConflictError(CatalogError):
    """Another stored plan is already flagged as the default."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.plan_name = name
        super().__init__(
            f"Cannot mark plan '{name}' as default: a default plan already exists",
            "PLAN_DEFAULT_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.name = name


class PlanNotFoundError(CatalogError):
    """Requested plan does not exist."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.plan_name = name
        super().__init__(
            f"Plan '{name}' not found",
            "PLAN_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.name = name


# ─── Access Errors (401/403) ────────────────────────────────────

class AuthenticationError(CatalogError):
    """No valid bearer token was presented."""
    def __init__(self, message: str = "Authentication required", context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(CatalogError):
    """Caller lacks the permission scope required by the endpoint."""
    def __init__(self, scope: str, context: ErrorContext | None = None):
        super().__init__(
            f"Missing required permission: {scope}",
            "PERMISSION_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.scope = scope


# ─── Configuration / Infrastructure Errors (5xx) ────────────────

class ConfigurationError(CatalogError):
    """Platform configuration is missing or inconsistent. Never retried."""
    def __init__(self, key: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Configuration error at '{key}': {message}",
            "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.key = key


class DatabaseError(CatalogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
