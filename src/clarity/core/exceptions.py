"""Custom exception classes for the finance API.

Each exception carries an error_code that maps to the catalog in errors.py;
the API layer turns them into JSON responses.
"""

from typing import Any


class ClarityError(Exception):
    """Base exception for all domain errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "TXN_001")
        details: Additional context about the error (for logging)
        http_status: HTTP status code to return (default: 400)
    """

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int = 400,
    ):
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status
        super().__init__(error_code)


class InvalidCategoryError(ClarityError):
    """Raised when a category is not part of the closed taxonomy (TXN_002)."""

    def __init__(self, category: str):
        super().__init__("TXN_002", details={"category": category}, http_status=400)


class InvalidPeriodError(ClarityError):
    """Raised when a budget period is not one of now/week/month (BUD_001)."""

    def __init__(self, period: str):
        super().__init__("BUD_001", details={"period": period}, http_status=400)


class NotFoundError(ClarityError):
    """Raised when a user-scoped record does not exist."""

    def __init__(self, error_code: str, details: dict[str, Any] | None = None):
        super().__init__(error_code, details=details, http_status=404)


class ValidationError(ClarityError):
    """Raised when a payload breaks a business rule.

    This includes:
    - Non-positive amounts
    - Merged partial updates that end up incomplete
    - Unparseable dates
    """

    pass
