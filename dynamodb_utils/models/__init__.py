"""
Models for dynamodb-utils.

- ReadOperation: query/scan selector for paginated reads
- Summary: per-invocation totals (capacity, item counts, API calls)
"""

from .summary import ReadOperation, Summary

__all__ = [
    "ReadOperation",
    "Summary",
]
