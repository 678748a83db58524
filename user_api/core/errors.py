"""Error Hierarchy: typed, categorized exceptions for every user API failure mode.

Invariants:
    - Every HTTP-facing error has a code (str), category, severity and http_status
    - to_response() produces the failure envelope {success: false, error, message}
    - Gateway signals (GatewayError, UniqueViolationError) never reach the client as-is;
      the handler maps them to EmailExistsError or StorageError

Design Decisions:
    - Single hierarchy with UserApiError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Gateway signals kept separate from HTTP errors: storage implementations stay
      unaware of status codes
"""

from enum import Enum


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


class UserApiError(Exception):
    """Base exception for all user API errors."""

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
    def is_client_error(self) -> bool:
        return self.http_status < 500

    def to_response(self) -> dict:
        """Convert to the failure envelope."""
        return {
            "success": False,
            "error": self.code,
            "message": self.message,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidIdError(UserApiError):
    """Path identifier is not a base-10 integer."""
    def __init__(self, raw: str):
        super().__init__(
            "Invalid user ID", "InvalidId", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.raw = raw


class InvalidFieldError(UserApiError):
    """Request body field failed shape/type validation."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "InvalidField", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class NotFoundError(UserApiError):
    """Referenced user does not exist."""
    def __init__(self, user_id: int):
        super().__init__(
            "User not found", "NotFound", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.user_id = user_id


class EmailExistsError(UserApiError):
    """Another user already holds the supplied email."""
    def __init__(self):
        super().__init__(
            "Email already exists", "EmailExists", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(UserApiError):
    """Persistence operation failed for a reason other than a uniqueness conflict."""
    def __init__(self, detail: str, operation: str):
        super().__init__(
            f"Failed to {operation}: {detail}",
            "StorageError", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.detail = detail
        self.operation = operation


# ─── Gateway Signals ────────────────────────────────────────────

class GatewayError(Exception):
    """Raised by UserRepository implementations for any storage fault."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UniqueViolationError(GatewayError):
    """A write collided with a unique constraint on `field`."""
    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"Unique constraint violated on {field}")
        self.field = field
