"""
Core pagination and batching components.

This module contains the control flow shared by all public helpers:
- PaginatedReader: follows LastEvaluatedKey across Query/Scan pages
- ChunkedBatchWriter / ChunkedBatchReader: chunked BatchWriteItem / BatchGetItem
  with resubmission of unprocessed remainders
- chunk: ordered list splitting
- Retry delay policies for resubmissions
"""

from .batch import ChunkedBatchReader, ChunkedBatchWriter
from .chunking import chunk
from .pagination import PaginatedReader
from .retry import ExponentialBackoff, no_delay
from .store import DocumentStore

__all__ = [
    "ChunkedBatchReader",
    "ChunkedBatchWriter",
    "DocumentStore",
    "ExponentialBackoff",
    "PaginatedReader",
    "chunk",
    "no_delay",
]
