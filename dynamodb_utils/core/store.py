"""
DocumentStore protocol.

The helpers only ever call these four methods. A boto3 low-level client
(``boto3.client("dynamodb")``) satisfies the protocol, as does any stub that
accepts the same keyword arguments and returns response dictionaries.
"""

import logging
from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


@runtime_checkable
class DocumentStore(Protocol):
    """Minimal DynamoDB call surface used by the pagination and batch helpers."""

    def query(self, **kwargs: Any) -> Dict[str, Any]:
        ...

    def scan(self, **kwargs: Any) -> Dict[str, Any]:
        ...

    def batch_write_item(self, **kwargs: Any) -> Dict[str, Any]:
        ...

    def batch_get_item(self, **kwargs: Any) -> Dict[str, Any]:
        ...


def invoke_store(call: Callable[..., Dict[str, Any]], operation: str, table_name: Optional[str], params: Dict[str, Any]) -> Dict[str, Any]:
    """Issue one DynamoDB call, logging client failures before re-raising them unchanged.

    Args:
        call: Bound store method (e.g. ``store.query``)
        operation: DynamoDB operation name used in log messages
        table_name: Table name used in log messages
        params: Request parameters, passed as keyword arguments

    Returns:
        Raw DynamoDB response
    """
    logger.debug(f"{operation} on {table_name}: {sorted(params)}")
    try:
        return call(**params)
    except ClientError as e:
        error = e.response.get('Error', {})
        logger.error(f"{operation} on {table_name} failed: {error.get('Code')} - {error.get('Message')}")
        raise
