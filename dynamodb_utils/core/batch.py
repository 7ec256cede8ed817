"""
Chunked Batch Operations

BatchWriteItem accepts at most 25 requests per call and BatchGetItem at most
100 keys. Both may apply only part of a request under throttling and hand the
rest back (UnprocessedItems / UnprocessedKeys).

The helpers here:
- Split the caller's items into chunks that fit a single call
- Send the chunks strictly one after another
- Resubmit each chunk's unprocessed remainder verbatim until it is empty,
  before moving on to the next chunk

A failing call aborts the whole invocation. Chunks already written stay
written; progress so far is only visible through the progress callback.
"""

import logging
import time
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..config import UtilsConfig
from ..exceptions import UnprocessedItemsError
from ..models import Summary
from ..utils import count_pending_requests, with_request_items
from .chunking import chunk
from .retry import RetryDelay
from .store import DocumentStore, invoke_store

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[Dict[str, Any], Summary], None]
RequestBuilder = Callable[[str, List[Dict[str, Any]]], Dict[str, Any]]


class _ChunkedBatchOperation:
    """Shared chunk dispatch and remainder resubmission loop."""

    operation_name = ""
    method_name = ""
    remainder_key = ""

    def __init__(self, config: Optional[UtilsConfig] = None, retry_delay: Optional[RetryDelay] = None):
        """Initialize batch operation.

        Args:
            config: Chunk sizes and retry bounds (environment defaults if None)
            retry_delay: Seconds to wait before each resubmission, given the
                         1-based attempt number (derived from config if None)
        """
        self.config = config or UtilsConfig.from_env()
        self.retry_delay = retry_delay or self.config.retry_delay_policy()

    def _submit(
        self,
        store: DocumentStore,
        params: Dict[str, Any],
        request_items: Dict[str, Any],
        summary: Summary
    ) -> Iterator[Dict[str, Any]]:
        """Send one chunk, then its remainders, yielding every raw response.

        The remainder check runs only after the caller resumes the generator,
        so anything the caller does with a response (collecting items, calling
        the progress callback) happens before the next resubmission.
        """
        call = getattr(store, self.method_name)
        attempt = 0

        while True:
            result = invoke_store(
                call, self.operation_name, summary.table_name,
                with_request_items(params, request_items)
            )
            summary.record_call(result)
            yield result

            remainder = result.get(self.remainder_key)
            pending = count_pending_requests(remainder)
            if not pending:
                return

            attempt += 1
            delay = self.retry_delay(attempt)
            max_retries = self.config.max_unprocessed_retries
            if max_retries is not None and attempt > max_retries:
                logger.error(
                    f"{self.operation_name} on {summary.table_name}: {pending} requests still "
                    f"unprocessed after {max_retries} retries"
                )
                raise UnprocessedItemsError(
                    f"{self.operation_name} left {pending} requests unprocessed after {max_retries} retries",
                    remainder,
                    summary,
                    retry_after_seconds=delay
                )

            logger.warning(
                f"Resubmitting {pending} unprocessed requests to {summary.table_name} "
                f"after {delay:.2f}s (attempt {attempt})"
            )
            if delay > 0:
                time.sleep(delay)
            request_items = remainder


class ChunkedBatchWriter(_ChunkedBatchOperation):
    """
    Write any number of put or delete requests with BatchWriteItem.

    The request builder decides whether the chunk becomes PutRequest or
    DeleteRequest entries (see ``build_put_params`` / ``build_delete_params``).
    """

    operation_name = "BatchWriteItem"
    method_name = "batch_write_item"
    remainder_key = "UnprocessedItems"

    def run(
        self,
        store: DocumentStore,
        params: Dict[str, Any],
        table_name: str,
        items: List[Dict[str, Any]],
        request_builder: RequestBuilder,
        progress_callback: Optional[ProgressCallback] = None
    ) -> Summary:
        """
        Write all items, chunk by chunk.

        Args:
            store: DynamoDB client (anything exposing batch_write_item)
            params: Extra BatchWriteItem parameters (ReturnConsumedCapacity,
                    ReturnItemCollectionMetrics)
            table_name: Target table
            items: Items to put or keys to delete
            request_builder: Maps (table_name, chunk) to a RequestItems mapping
            progress_callback: Called with (raw_response, summary) after every call

        Returns:
            Summary with in_item_count == len(items)

        Raises:
            UnprocessedItemsError: Only when max_unprocessed_retries is configured
        """
        items = list(items or [])
        summary = Summary(table_name=table_name, in_item_count=len(items))

        for request_chunk in chunk(items, self.config.write_chunk_size):
            for result in self._submit(store, params, request_builder(table_name, request_chunk), summary):
                if progress_callback is not None:
                    progress_callback(result, summary.snapshot())

        logger.info(
            f"Batch wrote {summary.in_item_count} items to {table_name} "
            f"in {summary.api_call_count} calls ({summary.consumed_capacity} capacity units)"
        )
        return summary


class ChunkedBatchReader(_ChunkedBatchOperation):
    """
    Fetch any number of items by key with BatchGetItem.

    Items come back in the order DynamoDB returns them, which is not
    necessarily the order of the keys.
    """

    operation_name = "BatchGetItem"
    method_name = "batch_get_item"
    remainder_key = "UnprocessedKeys"

    def run(
        self,
        store: DocumentStore,
        params: Dict[str, Any],
        table_name: str,
        keys: List[Dict[str, Any]],
        request_builder: RequestBuilder,
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[Dict[str, Any]]:
        """
        Fetch all keys, chunk by chunk.

        Args:
            store: DynamoDB client (anything exposing batch_get_item)
            params: Extra BatchGetItem parameters (ReturnConsumedCapacity)
            table_name: Source table
            keys: Primary keys to fetch
            request_builder: Maps (table_name, chunk) to a RequestItems mapping
            progress_callback: Called with (raw_response, summary) after every call

        Returns:
            Items found for ``table_name``; missing keys are simply absent
        """
        keys = list(keys or [])
        summary = Summary(table_name=table_name, in_item_count=len(keys))
        items: List[Dict[str, Any]] = []

        for key_chunk in chunk(keys, self.config.get_chunk_size):
            for result in self._submit(store, params, request_builder(table_name, key_chunk), summary):
                found = result.get('Responses', {}).get(table_name, [])
                items.extend(found)
                summary.out_item_count += len(found)
                if progress_callback is not None:
                    progress_callback(result, summary.snapshot())

        logger.info(
            f"Batch read {summary.out_item_count} of {summary.in_item_count} keys from {table_name} "
            f"in {summary.api_call_count} calls"
        )
        return items
