"""Application pagination – PaginationResult."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass
class PaginationResult(Generic[T]):
    """One page of records plus the size of the whole filtered result set.

    ``total`` ignores skip/limit, so it does not change while paging
    through the same filter.
    """

    data: list[T]
    total: int

    def map(self, fn: Callable[[T], Any]) -> "PaginationResult[Any]":
        """Return a new result with each item transformed by *fn*."""
        return PaginationResult(data=[fn(item) for item in self.data], total=self.total)

    def to_dict(self) -> dict[str, Any]:
        return {"data": list(self.data), "total": self.total}


__all__ = ["PaginationResult"]
