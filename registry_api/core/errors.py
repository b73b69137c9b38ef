"""Error Hierarchy — typed, categorized exceptions for all registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the flat REST envelope {"error": <message>}
    - "Item already claimed" is NOT an error — see core/claim_state.ClaimOutcome

Design Decisions:
    - Single hierarchy with RegistryError base: one global handler catches all (ADR: uniform error shape)
    - code/category kept off the wire but attached to log records for observability
"""

from enum import Enum


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
    INTERNAL = "internal"


class RegistryError(Exception):
    """Base exception for all registry errors."""

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

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Input Errors (400-level) ───────────────────────────────────

class InvalidActionError(RegistryError):
    """Write request carried an action other than 'claim'."""
    def __init__(self, action: str | None = None):
        super().__init__(
            "Invalid action", "INVALID_ACTION", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.action = action


class InvalidRowIndexError(RegistryError):
    """Row index points at the header or past the last occupied row."""
    def __init__(self, row_index: int | None, last_row: int):
        super().__init__(
            "Invalid row index", "INVALID_ROW_INDEX", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.row_index = row_index
        self.last_row = last_row


# ─── Store Errors (500-level) ───────────────────────────────────

class SheetNotFoundError(RegistryError):
    """Configured backing sheet does not exist."""
    def __init__(self, sheet_name: str):
        super().__init__(
            f'Sheet "{sheet_name}" not found',
            "SHEET_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.CRITICAL, 500,
        )
        self.sheet_name = sheet_name


class DatabaseError(RegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
