"""
Application Exception Handling

Single AppException class for application-level errors.

Catalog operations never raise: they report rejected inserts and
missing deletes through their boolean result. AppException covers the
host layer (configuration and startup checks).
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified application exception.

    Usage:
        raise AppException("Self-check failed", "SELF_CHECK_FAILED", {"check": "..."})

    Error Codes:
        - INVALID_SEARCH_LIMIT
        - SELF_CHECK_FAILED
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "SELF_CHECK_FAILED")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_search_limit(limit: int) -> AppException:
    """Create invalid search limit exception."""
    return AppException(
        f"Search limit must be at least 1, got {limit}",
        "INVALID_SEARCH_LIMIT",
        {"search_limit": limit}
    )


def self_check_failed(check: str, expected: Any, actual: Any) -> AppException:
    """Create self-check failure exception."""
    return AppException(
        f"Catalog self-check failed: {check}",
        "SELF_CHECK_FAILED",
        {"check": check, "expected": repr(expected), "actual": repr(actual)}
    )
