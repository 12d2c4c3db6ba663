"""Error Hierarchy — typed, categorized exceptions for messaging failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - message is internal (logged); public_message is the only text returned to clients
    - to_response() produces the flat REST envelope {"error": <public message>}

Design Decisions:
    - Single hierarchy with MessagingError base: FastAPI global handler catches all
    - One infrastructure error (DatabaseError): every store failure looks the same to clients
"""

from enum import Enum

INTERNAL_SERVER_ERROR = "Internal server error"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DATABASE = "database"


class MessagingError(Exception):
    """Base exception for all messaging API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        public_message: str = INTERNAL_SERVER_ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.public_message = public_message

    def to_response(self) -> dict:
        """Convert to REST error response. Never includes self.message."""
        return {"error": self.public_message}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(MessagingError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
