"""
dynamodb-utils

Helpers around a DynamoDB client that take care of the tedious parts of
Query/Scan pagination and BatchWriteItem/BatchGetItem chunking:

    import boto3
    import dynamodb_utils as ddbutil

    client = boto3.client('dynamodb')
    items = ddbutil.scan(client, {'TableName': 'orders'})
    summary = ddbutil.batch_put(client, {}, 'orders', items)
"""

from .config import UtilsConfig, configure_logging
from .core import (
    ChunkedBatchReader,
    ChunkedBatchWriter,
    DocumentStore,
    ExponentialBackoff,
    PaginatedReader,
    chunk,
    no_delay,
)
from .exceptions import (
    DynamoDBUtilsError,
    PaginationLimitError,
    RetryableError,
    UnprocessedItemsError,
    ValidationError,
)
from .handlers import (
    batch_delete,
    batch_get,
    batch_put,
    delete,
    get,
    put,
    query,
    raw,
    scan,
    update,
)
from .models import ReadOperation, Summary
from .utils import build_delete_params, build_get_params, build_put_params

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "UtilsConfig",
    "configure_logging",

    # Exceptions
    "DynamoDBUtilsError",
    "PaginationLimitError",
    "RetryableError",
    "UnprocessedItemsError",
    "ValidationError",

    # Models
    "ReadOperation",
    "Summary",

    # Core components
    "ChunkedBatchReader",
    "ChunkedBatchWriter",
    "DocumentStore",
    "ExponentialBackoff",
    "PaginatedReader",
    "chunk",
    "no_delay",

    # Read helpers
    "query",
    "scan",
    "batch_get",
    "get",

    # Write helpers
    "batch_put",
    "batch_delete",
    "put",
    "update",
    "delete",

    # Request builders
    "build_put_params",
    "build_delete_params",
    "build_get_params",

    # Escape hatches
    "raw",
]
