"""
Request building helpers for DynamoDB batch and paginated calls.

The ``build_*_params`` functions turn a table name and a list of items or keys
into the ``RequestItems`` mapping expected by BatchWriteItem / BatchGetItem.
They are the request builders handed to the chunked batch helpers.
"""

from typing import Any, Dict, List, Optional


def build_put_params(table_name: str, items: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Build PutRequest entries for BatchWriteItem.

    Args:
        table_name: Target table
        items: Full items to put

    Returns:
        RequestItems mapping, e.g. {"users": [{"PutRequest": {"Item": {...}}}]}
    """
    return {table_name: [{'PutRequest': {'Item': item}} for item in items]}


def build_delete_params(table_name: str, keys: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Build DeleteRequest entries for BatchWriteItem.

    Args:
        table_name: Target table
        keys: Primary keys of the items to delete

    Returns:
        RequestItems mapping, e.g. {"users": [{"DeleteRequest": {"Key": {...}}}]}
    """
    return {table_name: [{'DeleteRequest': {'Key': key}} for key in keys]}


def build_get_params(table_name: str, keys: List[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Build the per-table KeysAndAttributes entry for BatchGetItem.

    Args:
        table_name: Target table
        keys: Primary keys of the items to fetch

    Returns:
        RequestItems mapping, e.g. {"users": {"Keys": [{...}]}}
    """
    return {table_name: {'Keys': list(keys)}}


def with_start_key(params: Dict[str, Any], start_key: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Copy query/scan params with the given ExclusiveStartKey.

    boto3 rejects ``ExclusiveStartKey=None``, so the key is dropped when there
    is no continuation token. ``params`` itself is never modified.
    """
    merged = {k: v for k, v in params.items() if k != 'ExclusiveStartKey'}
    if start_key:
        merged['ExclusiveStartKey'] = start_key
    return merged


def with_request_items(params: Dict[str, Any], request_items: Dict[str, Any]) -> Dict[str, Any]:
    """Copy batch params (ReturnConsumedCapacity etc.) with the given RequestItems."""
    return {**params, 'RequestItems': request_items}


def count_pending_requests(remainder: Optional[Dict[str, Any]]) -> int:
    """Count the requests left in an UnprocessedItems/UnprocessedKeys mapping.

    DynamoDB returns an empty mapping when everything was processed. Write
    remainders map tables to request lists; get remainders map tables to a
    KeysAndAttributes entry whose Keys list holds the pending keys.
    """
    if not remainder:
        return 0
    pending = 0
    for requests in remainder.values():
        if isinstance(requests, dict):
            pending += len(requests.get('Keys') or [])
        else:
            pending += len(requests or [])
    return pending
