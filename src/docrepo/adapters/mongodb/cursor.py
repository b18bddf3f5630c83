"""MongoDB adapter – cursor composition and the chainable AggregationCursor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pymongo import ASCENDING

from docrepo.application.pagination.parameters import QueryParameters
from docrepo.application.pagination.sort import merge_sort_specs, sort_key_or_list_to_specs
from docrepo.kernel.errors import CursorConsumedError

TDocument = TypeVar("TDocument")


class AggregationCursor(Generic[TDocument]):
    """Lazy aggregation pipeline over a motor collection.

    Stage helpers append to the pipeline and return ``self`` so that the
    cursor can be composed the same way as a ``find`` cursor::

        cursor = AggregationCursor(col, [{"$unwind": "$tags"}])
        rows = await cursor.match({"tags": "python"}).sort([("name", 1)]).limit(5).to_list()

    The pipeline is sent to the server by :meth:`to_list`; after that the
    cursor is consumed and any further stage or read raises
    :class:`~docrepo.kernel.errors.CursorConsumedError`.
    """

    def __init__(self, collection: Any, pipeline: list[dict[str, Any]] | None = None, **options: Any) -> None:
        self._collection = collection
        self._stages: list[dict[str, Any]] = list(pipeline or [])
        self._options = options
        self._consumed = False

    @property
    def pipeline(self) -> list[dict[str, Any]]:
        return list(self._stages)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _check_open(self) -> None:
        if self._consumed:
            raise CursorConsumedError("aggregation cursor has already been consumed")

    def add_stage(self, stage: dict[str, Any]) -> "AggregationCursor[TDocument]":
        self._check_open()
        self._stages.append(stage)
        return self

    def match(self, filter: Mapping[str, Any]) -> "AggregationCursor[TDocument]":
        return self.add_stage({"$match": dict(filter)})

    def sort(self, key_or_list: Any, direction: int | None = None) -> "AggregationCursor[TDocument]":
        """Accepts the same arguments as ``pymongo.cursor.Cursor.sort``."""
        if isinstance(key_or_list, str):
            pairs = [(key_or_list, direction if direction is not None else ASCENDING)]
        elif isinstance(key_or_list, Mapping):
            pairs = list(key_or_list.items())
        else:
            pairs = list(key_or_list)
        return self.add_stage({"$sort": dict(pairs)})

    def skip(self, skip: int) -> "AggregationCursor[TDocument]":
        return self.add_stage({"$skip": skip})

    def limit(self, limit: int) -> "AggregationCursor[TDocument]":
        return self.add_stage({"$limit": limit})

    def group(self, spec: Mapping[str, Any]) -> "AggregationCursor[TDocument]":
        return self.add_stage({"$group": dict(spec)})

    def project(self, spec: Mapping[str, Any]) -> "AggregationCursor[TDocument]":
        return self.add_stage({"$project": dict(spec)})

    async def to_list(self, length: int | None = None) -> list[TDocument]:
        self._check_open()
        self._consumed = True
        command_cursor = self._collection.aggregate(self._stages, **self._options)
        return await command_cursor.to_list(length=length)


def compose_cursor(cursor: Any, parameters: QueryParameters | None) -> Any:
    """Apply sort, skip and limit to *cursor*, always in that order.

    Sort keys are merged into one compound sort (first key most significant)
    because a second ``sort`` call on a MongoDB cursor replaces the first.
    Zero/absent skip and limit are not applied.
    """
    if parameters is None:
        return cursor

    if parameters.sort_key_or_list:
        sort = merge_sort_specs(sort_key_or_list_to_specs(parameters.sort_key_or_list))
        if sort:
            cursor = cursor.sort(sort)

    if parameters.skip:
        cursor = cursor.skip(parameters.skip)

    if parameters.limit:
        cursor = cursor.limit(parameters.limit)

    return cursor


__all__ = ["AggregationCursor", "compose_cursor"]
