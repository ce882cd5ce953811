"""Custom exception classes for the finance services.

Each exception carries an error_code that maps to the catalog in errors.py and
the HTTP status the API layer should answer with.
"""

from typing import Any


class FinanceError(Exception):
    """Base exception for all domain errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "API_001")
        details: Additional context about the error (for logging)
        http_status: HTTP status code to return (default: 500)
    """

    default_status = 500

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int | None = None,
    ):
        """Initialize the exception.

        Args:
            error_code: Error code from errors.py
            details: Additional error context (not shown to users)
            http_status: HTTP status code (defaults per subclass)
        """
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status or self.default_status
        super().__init__(error_code)


class NotFoundError(FinanceError):
    """Raised when a referenced account, category, rule or transaction is missing."""

    default_status = 404


class ValidationError(FinanceError):
    """Raised when input fails a business rule.

    This includes:
    - Empty account/category names
    - Empty keyword lists
    - Category type not matching the transaction or rule type
    """

    default_status = 400


class CategorizationError(FinanceError):
    """Raised when a bulk categorization run cannot start.

    Rule or candidate fetch failures abort the whole batch; per-transaction
    write failures never raise this.
    """

    default_status = 503


class StatementImportError(FinanceError):
    """Raised when a bank statement import is rejected before any row is written."""

    default_status = 400
