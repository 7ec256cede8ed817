from typing import Any, Dict, Optional


class DynamoDBUtilsError(Exception):
    """Base exception for failures raised by the helpers themselves.

    Errors that stop a paginated read or a batch mid-way carry the Summary
    accumulated up to that point, so callers can tell which table was being
    processed and how many DynamoDB calls had already gone out.

    Attributes:
        message: Human-readable error message
        original_error: The exception that caused this error (if any)
        context: Extra details rendered after the message
        summary: Running totals of the interrupted invocation (if any)
    """

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        summary: Any = None
    ):
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        self.summary = summary
        super().__init__(message)

    def progress(self) -> Dict[str, Any]:
        """Table name and call count taken from the summary."""
        if self.summary is None:
            return {}
        details = {}
        if self.summary.table_name:
            details['table'] = self.summary.table_name
        details['api_calls'] = self.summary.api_call_count
        return details

    def __str__(self) -> str:
        details = {**self.progress(), **self.context}
        if not details:
            return self.message
        rendered = ", ".join(f"{k}={v}" for k, v in details.items())
        return f"{self.message} ({rendered})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.message!r}, "
            f"original_error={self.original_error!r}, summary={self.summary!r})"
        )
