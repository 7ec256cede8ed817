"""
Invocation Models

Models shared by the pagination and batch helpers:
- ReadOperation: which paginated read a store call performs
- Summary: the running totals reported to progress callbacks
"""

from enum import Enum
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field


class ReadOperation(str, Enum):
    """Paginated DynamoDB read operations."""
    QUERY = "query"
    SCAN = "scan"


class Summary(BaseModel):
    """
    Running totals for a single helper invocation.

    One instance is created per call to a paginated read or batch operation and
    updated after every underlying DynamoDB call. Batch writes return it; reads
    expose it through the progress callback only.

    Field aliases keep the key spelling used in DynamoDB responses, so
    ``to_dict()`` yields ``{"TableName": ..., "ConsumedCapacity": ...}``.
    """

    table_name: Optional[str] = Field(default=None, alias="TableName", description="Table the invocation targets")
    consumed_capacity: float = Field(default=0.0, alias="ConsumedCapacity", description="Sum of reported capacity units")
    in_item_count: int = Field(default=0, alias="InItemCount", description="Items or keys submitted by the caller")
    out_item_count: int = Field(default=0, alias="OutItemCount", description="Items returned by the store")
    api_call_count: int = Field(default=0, alias="ApiCallCount", description="Underlying DynamoDB calls issued")

    model_config = ConfigDict(populate_by_name=True)

    def add_capacity(self, consumed: Any) -> None:
        """Add the capacity units from a response's ConsumedCapacity value.

        Query and Scan report a single mapping; batch operations report a list
        with one entry per table. Missing values count as zero.
        """
        if not consumed:
            return
        entries: Iterable[Dict[str, Any]] = [consumed] if isinstance(consumed, dict) else consumed
        for entry in entries:
            self.consumed_capacity += float(entry.get("CapacityUnits") or 0)

    def record_call(self, result: Dict[str, Any]) -> None:
        """Count one underlying call and its consumed capacity."""
        self.api_call_count += 1
        self.add_capacity(result.get("ConsumedCapacity"))

    def snapshot(self) -> "Summary":
        """Copy handed to progress callbacks."""
        return self.model_copy()

    def to_dict(self) -> Dict[str, Any]:
        """Summary keyed the way DynamoDB responses are."""
        return self.model_dump(by_alias=True)
