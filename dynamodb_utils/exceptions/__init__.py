# Base exception class
from .base import DynamoDBUtilsError

from .domain_exceptions import (
    PaginationLimitError,
    RetryableError,
    UnprocessedItemsError,
    ValidationError,
)

__all__ = [
    # Base exception
    "DynamoDBUtilsError",

    # Domain exceptions (alphabetically ordered)
    "PaginationLimitError",
    "RetryableError",
    "UnprocessedItemsError",
    "ValidationError",
]
