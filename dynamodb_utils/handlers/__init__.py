"""
Handler layer for dynamodb-utils.

Public helpers split by intent:
- queries.py: query, scan, batch_get, get
- commands.py: batch_put, batch_delete, put, update, delete
- raw.py: single-call escape hatches (``raw.query(client, params)``)

Architecture:
handlers/ (this layer) -> core/ (pagination, chunking) -> DynamoDB client
"""

from . import raw
from .commands import batch_delete, batch_put, delete, put, update
from .queries import batch_get, get, query, scan

__all__ = [
    "batch_delete",
    "batch_get",
    "batch_put",
    "delete",
    "get",
    "put",
    "query",
    "raw",
    "scan",
    "update",
]
