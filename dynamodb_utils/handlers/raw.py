"""
Raw escape hatches.

Single-call pass-throughs with no pagination, chunking or retries. Use these
when you need one page or one batch exactly as DynamoDB returns it.
"""

from typing import Any, Dict


def query(store, params: Dict[str, Any]) -> Dict[str, Any]:
    return store.query(**params)


def scan(store, params: Dict[str, Any]) -> Dict[str, Any]:
    return store.scan(**params)


def batch_get(store, params: Dict[str, Any]) -> Dict[str, Any]:
    return store.batch_get_item(**params)


def batch_write(store, params: Dict[str, Any]) -> Dict[str, Any]:
    return store.batch_write_item(**params)
