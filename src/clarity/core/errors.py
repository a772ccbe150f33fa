"""Error codes and user-friendly messages.

This module defines the error catalog for the finance API.
Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    "TXN_001": {
        "code": "TXN_001",
        "message": "Transaction not found",
        "user_message": "We couldn't find this transaction.",
        "suggestion": "Please refresh and try again.",
        "retry_allowed": False,
    },
    "TXN_002": {
        "code": "TXN_002",
        "message": "Invalid category",
        "user_message": "That category isn't supported.",
        "suggestion": "Please choose a category from the allowed list.",
        "retry_allowed": False,
    },
    "BUD_001": {
        "code": "BUD_001",
        "message": "Invalid budget period",
        "user_message": "period must be one of: now, week, month",
        "suggestion": "Choose now, week or month as the budget period.",
        "retry_allowed": False,
    },
    "PRE_001": {
        "code": "PRE_001",
        "message": "Preset not found",
        "user_message": "We couldn't find this preset.",
        "suggestion": "Please refresh your presets and try again.",
        "retry_allowed": False,
    },
    "PRE_002": {
        "code": "PRE_002",
        "message": "Active preset not found",
        "user_message": "This preset is inactive or no longer exists.",
        "suggestion": "Activate the preset before applying it.",
        "retry_allowed": False,
    },
    "PRE_003": {
        "code": "PRE_003",
        "message": "Preset payload failed validation",
        "user_message": "name, type, amount and category are required",
        "suggestion": "Fill in every required preset field with a positive amount.",
        "retry_allowed": False,
    },
    "INS_001": {
        "code": "INS_001",
        "message": "Invalid advice date",
        "user_message": "Invalid date. Expected YYYY-MM-DD.",
        "suggestion": "Send the date as YYYY-MM-DD.",
        "retry_allowed": False,
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request data failed validation",
        "user_message": "Invalid input data",
        "suggestion": "Please check your input and try again",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details. Unknown codes map to a generic entry.
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str) -> str:
    """Get user-friendly message for an error code."""
    return get_error(error_code)["user_message"]


def get_suggestion(error_code: str) -> str:
    """Get actionable suggestion for an error code."""
    return get_error(error_code)["suggestion"]


def is_retryable(error_code: str) -> bool:
    """Check if an error is retryable."""
    return get_error(error_code)["retry_allowed"]
