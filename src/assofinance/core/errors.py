"""Error codes and user-friendly messages.

Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    "API_001": {
        "code": "API_001",
        "message": "Account not found",
        "user_message": "We couldn't find this account.",
        "suggestion": "Please refresh the account list and try again.",
        "retry_allowed": False,
    },
    "API_002": {
        "code": "API_002",
        "message": "Category not found",
        "user_message": "We couldn't find this category.",
        "suggestion": "Please refresh the category list and try again.",
        "retry_allowed": False,
    },
    "API_003": {
        "code": "API_003",
        "message": "Transaction not found",
        "user_message": "We couldn't find this transaction.",
        "suggestion": "Please refresh and try again.",
        "retry_allowed": False,
    },
    "API_004": {
        "code": "API_004",
        "message": "Categorization rule not found",
        "user_message": "We couldn't find this rule.",
        "suggestion": "It may already have been deleted. Please refresh the rule list.",
        "retry_allowed": False,
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request data failed validation",
        "user_message": "Invalid input data",
        "suggestion": "Please check your input and try again",
        "retry_allowed": True,
    },
    "VAL_002": {
        "code": "VAL_002",
        "message": "Categorization rule has no keywords",
        "user_message": "A rule needs at least one keyword.",
        "suggestion": "Enter one or more keywords separated by commas.",
        "retry_allowed": True,
    },
    "VAL_003": {
        "code": "VAL_003",
        "message": "Category type does not match transaction type",
        "user_message": "This category can't be used for this kind of transaction.",
        "suggestion": "Choose an income category for income and an expense category for expenses.",
        "retry_allowed": True,
    },
    "VAL_004": {
        "code": "VAL_004",
        "message": "Name is empty",
        "user_message": "A name is required.",
        "suggestion": "Please enter a name and try again.",
        "retry_allowed": True,
    },
    "CAT_001": {
        "code": "CAT_001",
        "message": "Failed to load categorization rules",
        "user_message": "Automatic categorization is unavailable right now.",
        "suggestion": "Please try again in a few moments.",
        "retry_allowed": True,
    },
    "CAT_002": {
        "code": "CAT_002",
        "message": "Failed to load transactions to categorize",
        "user_message": "Automatic categorization is unavailable right now.",
        "suggestion": "Please try again in a few moments.",
        "retry_allowed": True,
    },
    "IMP_001": {
        "code": "IMP_001",
        "message": "Statement import contains no usable rows",
        "user_message": "No transactions were found in this statement.",
        "suggestion": "Each row needs a date, a description and a non-zero amount.",
        "retry_allowed": False,
    },
    "DB_001": {
        "code": "DB_001",
        "message": "Database operation failed",
        "user_message": "A database error occurred",
        "suggestion": "Please try again later",
        "retry_allowed": True,
    },
    "DB_002": {
        "code": "DB_002",
        "message": "Resource already exists or is still referenced",
        "user_message": "This change conflicts with existing data",
        "suggestion": "Please refresh and check the related records",
        "retry_allowed": False,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "An unexpected error occurred",
        "suggestion": "Please try again later or contact support",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Unknown codes resolve to a generic definition rather than raising.
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


def is_retryable(error_code: str) -> bool:
    """Check if an error is retryable."""
    return get_error(error_code)["retry_allowed"]
