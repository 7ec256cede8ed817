"""
Write helpers.

- batch_put / batch_delete: any number of items through chunked BatchWriteItem
- put / update / delete: single-item pass-throughs
"""

from typing import Any, Dict, List, Optional

from ..config import UtilsConfig
from ..core import ChunkedBatchWriter
from ..core.batch import ProgressCallback
from ..core.retry import RetryDelay
from ..models import Summary
from ..utils import build_delete_params, build_put_params


def batch_put(
    store,
    params: Dict[str, Any],
    table_name: str,
    items: List[Dict[str, Any]],
    progress_callback: Optional[ProgressCallback] = None,
    config: Optional[UtilsConfig] = None,
    retry_delay: Optional[RetryDelay] = None
) -> Summary:
    """
    Use BatchWriteItem to PUT items into a table in one go.

    Args:
        store: DynamoDB client
        params: Optional keys: ReturnConsumedCapacity, ReturnItemCollectionMetrics
        table_name: Target table
        items: Items to put
        progress_callback: Called with (raw_response, summary) after every call
        config: Chunk size and retry bounds
        retry_delay: Delay policy between resubmissions of unprocessed items

    Returns:
        Summary of the write (in_item_count, consumed_capacity, api_call_count)
    """
    writer = ChunkedBatchWriter(config, retry_delay)
    return writer.run(store, params, table_name, items, build_put_params, progress_callback)


def batch_delete(
    store,
    params: Dict[str, Any],
    table_name: str,
    keys: List[Dict[str, Any]],
    progress_callback: Optional[ProgressCallback] = None,
    config: Optional[UtilsConfig] = None,
    retry_delay: Optional[RetryDelay] = None
) -> Summary:
    """
    Use BatchWriteItem to DELETE items from a table in one go.

    Args:
        store: DynamoDB client
        params: Optional keys: ReturnConsumedCapacity, ReturnItemCollectionMetrics
        table_name: Target table
        keys: Primary keys of the items to delete
        progress_callback: Called with (raw_response, summary) after every call
        config: Chunk size and retry bounds
        retry_delay: Delay policy between resubmissions of unprocessed items

    Returns:
        Summary of the write
    """
    writer = ChunkedBatchWriter(config, retry_delay)
    return writer.run(store, params, table_name, keys, build_delete_params, progress_callback)


def put(store, params: Dict[str, Any]) -> Dict[str, Any]:
    """PutItem pass-through."""
    return store.put_item(**params)


def update(store, params: Dict[str, Any]) -> Dict[str, Any]:
    """UpdateItem pass-through."""
    return store.update_item(**params)


def delete(store, params: Dict[str, Any]) -> Dict[str, Any]:
    """DeleteItem pass-through."""
    return store.delete_item(**params)
