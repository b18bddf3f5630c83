"""Infrastructure errors – document store failures."""

from __future__ import annotations

from typing import Any

from docrepo.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class StoreQueryFailedError(InfrastructureError):
    """The document store rejected or failed a find/aggregate/count/update."""

    default_code = "store_query_failed"

    def __init__(
        self,
        collection: str,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"'{operation}' on collection '{collection}' failed",
            detail={"collection": collection, "operation": operation},
            **kwargs,
        )
        self.collection = collection
        self.operation = operation


class CursorConsumedError(InfrastructureError):
    """A cursor was modified or re-read after it had been materialised."""

    default_code = "cursor_consumed"


__all__ = [
    "CursorConsumedError",
    "InfrastructureError",
    "StoreQueryFailedError",
]
