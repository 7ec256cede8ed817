"""
Paginated Query/Scan

PaginatedReader follows LastEvaluatedKey until DynamoDB reports no more pages,
concatenating every page's Items in the order they were returned.

Termination policy:
- By default the reader stops only when a response carries no LastEvaluatedKey
- ``max_items`` stops early once at least that many items were collected
  (the page that crosses the threshold is kept whole)
- ``max_pages`` caps the number of calls; hitting it with pages still pending
  raises PaginationLimitError instead of silently truncating
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from ..config import UtilsConfig
from ..exceptions import PaginationLimitError, ValidationError
from ..models import ReadOperation, Summary
from ..utils import with_start_key
from .store import DocumentStore, invoke_store

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[Dict[str, Any], Summary], None]


def resolve_read_operation(operation: Union[ReadOperation, str]) -> ReadOperation:
    """Convert 'query'/'scan' (or the enum itself) to a ReadOperation."""
    try:
        return ReadOperation(operation)
    except ValueError as e:
        valid = [op.value for op in ReadOperation]
        raise ValidationError(
            f"Unsupported read operation '{operation}' - must be one of: {valid}",
            {'operation': str(operation)},
            original_error=e
        ) from e


class PaginatedReader:
    """
    Fetch every page of a Query or Scan in one go.

    Pages are requested one at a time. Each request is a fresh copy of the
    caller's params with the current ExclusiveStartKey merged in, so the
    caller's dict is never modified.
    """

    def __init__(self, config: Optional[UtilsConfig] = None):
        """Initialize reader.

        Args:
            config: Pagination limits (environment defaults if None)
        """
        self.config = config or UtilsConfig.from_env()

    def run(
        self,
        store: DocumentStore,
        params: Dict[str, Any],
        operation: Union[ReadOperation, str],
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[Dict[str, Any]]:
        """
        Run a Query or Scan to completion.

        Args:
            store: DynamoDB client (anything exposing query/scan)
            params: boto3 query/scan parameters; an ExclusiveStartKey here is
                    used as the starting point
            operation: ReadOperation.QUERY / ReadOperation.SCAN or 'query' / 'scan'
            progress_callback: Called with (raw_response, summary) after every call

        Returns:
            All items, in page order

        Raises:
            ValidationError: Unknown operation
            PaginationLimitError: More than ``max_pages`` pages
        """
        read_op = resolve_read_operation(operation)
        call = getattr(store, read_op.value)
        operation_name = read_op.value.capitalize()

        summary = Summary(table_name=params.get('TableName'))
        items: List[Dict[str, Any]] = []
        start_key = params.get('ExclusiveStartKey')

        while True:
            if summary.api_call_count >= self.config.max_pages:
                logger.error(
                    f"{operation_name} on {summary.table_name} exceeded {self.config.max_pages} pages "
                    f"({len(items)} items collected)"
                )
                raise PaginationLimitError(self.config.max_pages, items, start_key, summary)

            result = invoke_store(call, operation_name, summary.table_name, with_start_key(params, start_key))

            page = result.get('Items', [])
            items.extend(page)
            summary.out_item_count += len(page)
            summary.record_call(result)

            if progress_callback is not None:
                progress_callback(result, summary.snapshot())

            start_key = result.get('LastEvaluatedKey')
            if not start_key:
                break

            if self.config.max_items is not None and len(items) >= self.config.max_items:
                logger.info(
                    f"{operation_name} on {summary.table_name} stopped at {len(items)} items "
                    f"(max_items={self.config.max_items}) with more pages available"
                )
                break

        logger.info(
            f"{operation_name} on {summary.table_name} returned {summary.out_item_count} items "
            f"in {summary.api_call_count} calls ({summary.consumed_capacity} capacity units)"
        )
        return items
