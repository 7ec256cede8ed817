"""
Domain-Specific Exceptions for dynamodb-utils

Failures raised by the helpers themselves. Errors coming from the underlying
DynamoDB client (botocore ``ClientError`` and friends) are never wrapped in
these classes; they reach the caller unchanged.

Organized by category:
1. Argument Validation Errors
2. Retry Errors
3. Pagination Errors
"""

from typing import Any, Dict, Optional

from .base import DynamoDBUtilsError


# =============================================================================
# Argument Validation Errors
# =============================================================================

class ValidationError(DynamoDBUtilsError):
    """Raised when arguments passed to a helper are invalid.

    Used for:
    - Unknown read operations (anything other than query/scan)
    - Configuration values outside the DynamoDB batch limits, reported by
      the UtilsConfig factory methods (from_env, for_bulk_loading)
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


# =============================================================================
# Retry Errors
# =============================================================================

class RetryableError(DynamoDBUtilsError):
    """Raised when an operation gave up on a condition that may clear on retry."""

    def __init__(
        self,
        message: str,
        retry_after_seconds: Optional[float] = None,
        original_error: Optional[Exception] = None,
        summary: Any = None
    ):
        """Initialize retryable error.

        Args:
            message: Human-readable error message
            retry_after_seconds: Suggested retry delay in seconds
            original_error: The original exception that caused this error
            summary: Running totals of the interrupted invocation
        """
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context, summary)


class UnprocessedItemsError(RetryableError):
    """Raised when a batch chunk still has unprocessed requests after the retry bound.

    Only raised when ``max_unprocessed_retries`` is configured; by default
    unprocessed remainders are resubmitted until the store accepts them.

    Attributes:
        unprocessed: The remainder exactly as the store returned it
        retry_after_seconds: The delay the next resubmission would have waited
    """

    def __init__(self, message: str, unprocessed: Dict[str, Any], summary: Any = None, retry_after_seconds: Optional[float] = None):
        self.unprocessed = unprocessed
        super().__init__(message, retry_after_seconds, summary=summary)
        self.context['unprocessed_tables'] = sorted(unprocessed)


# =============================================================================
# Pagination Errors
# =============================================================================

class PaginationLimitError(DynamoDBUtilsError):
    """Raised when a paginated read still has pages left after ``max_pages`` calls.

    A store that keeps returning a LastEvaluatedKey would otherwise loop forever.

    Attributes:
        items: Items collected before the guard tripped
        last_evaluated_key: The continuation token that was not followed
    """

    def __init__(self, max_pages: int, items: list, last_evaluated_key: Any, summary: Any = None):
        self.max_pages = max_pages
        self.items = items
        self.last_evaluated_key = last_evaluated_key
        message = f"Pagination stopped after {max_pages} pages with more results pending"
        context = {
            'max_pages': max_pages,
            'item_count': len(items),
        }
        super().__init__(message, None, context, summary)
