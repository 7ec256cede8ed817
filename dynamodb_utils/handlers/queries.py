"""
Read helpers.

- query / scan: every page of a Query or Scan in one call
- batch_get: any number of keys through chunked BatchGetItem
- get: single GetItem pass-through
"""

from typing import Any, Dict, List, Optional

from ..config import UtilsConfig
from ..core import ChunkedBatchReader, PaginatedReader
from ..core.batch import ProgressCallback
from ..core.retry import RetryDelay
from ..models import ReadOperation
from ..utils import build_get_params


def query(
    store,
    params: Dict[str, Any],
    progress_callback: Optional[ProgressCallback] = None,
    config: Optional[UtilsConfig] = None
) -> List[Dict[str, Any]]:
    """
    Use Query to fetch all matching items in one go.

    Args:
        store: DynamoDB client
        params: boto3 query parameters (TableName, KeyConditionExpression, ...)
        progress_callback: Called with (raw_response, summary) after every Query call
        config: Pagination limits

    Returns:
        All items, in page order

    Example:
        items = query(client, {
            'TableName': 'orders',
            'KeyConditionExpression': 'customer_id = :c',
            'ExpressionAttributeValues': {':c': {'S': 'C-1'}},
        })
    """
    return PaginatedReader(config).run(store, params, ReadOperation.QUERY, progress_callback)


def scan(
    store,
    params: Dict[str, Any],
    progress_callback: Optional[ProgressCallback] = None,
    config: Optional[UtilsConfig] = None
) -> List[Dict[str, Any]]:
    """
    Use Scan to fetch all items in one go.

    Args:
        store: DynamoDB client
        params: boto3 scan parameters
        progress_callback: Called with (raw_response, summary) after every Scan call
        config: Pagination limits

    Returns:
        All items, in page order
    """
    return PaginatedReader(config).run(store, params, ReadOperation.SCAN, progress_callback)


def batch_get(
    store,
    params: Dict[str, Any],
    table_name: str,
    keys: List[Dict[str, Any]],
    progress_callback: Optional[ProgressCallback] = None,
    config: Optional[UtilsConfig] = None,
    retry_delay: Optional[RetryDelay] = None
) -> List[Dict[str, Any]]:
    """
    Use BatchGetItem to fetch items by key in one go.

    Args:
        store: DynamoDB client
        params: Optional BatchGetItem parameters (ReturnConsumedCapacity)
        table_name: Source table
        keys: Primary keys to fetch
        progress_callback: Called with (raw_response, summary) after every call
        config: Chunk size and retry bounds
        retry_delay: Delay policy between resubmissions of unprocessed keys

    Returns:
        Items found
    """
    reader = ChunkedBatchReader(config, retry_delay)
    return reader.run(store, params, table_name, keys, build_get_params, progress_callback)


def get(store, params: Dict[str, Any]) -> Dict[str, Any]:
    """GetItem pass-through."""
    return store.get_item(**params)
