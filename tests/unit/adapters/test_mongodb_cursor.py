"""Unit tests for cursor composition and AggregationCursor; no running MongoDB required."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock, call

import pytest

from docrepo.adapters.mongodb import AggregationCursor, compose_cursor
from docrepo.application.pagination import QueryParameters
from docrepo.kernel.errors import CursorConsumedError


def _chain_cursor() -> MagicMock:
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    return cursor


def _collection(result: list[dict[str, Any]] | None = None) -> MagicMock:
    command_cursor = MagicMock()
    command_cursor.to_list = AsyncMock(return_value=result or [])
    collection = MagicMock()
    collection.aggregate = MagicMock(return_value=command_cursor)
    return collection


class TestComposeCursor:
    def test_no_parameters_passes_through(self) -> None:
        cursor = _chain_cursor()
        assert compose_cursor(cursor, None) is cursor
        cursor.sort.assert_not_called()

    def test_order_is_sort_skip_limit(self) -> None:
        cursor = _chain_cursor()
        compose_cursor(cursor, QueryParameters(skip=10, limit=5, sort_key_or_list="-name"))
        assert cursor.mock_calls == [call.sort([("name", -1)]), call.skip(10), call.limit(5)]

    def test_sort_list_becomes_one_compound_sort(self) -> None:
        cursor = _chain_cursor()
        compose_cursor(cursor, QueryParameters(sort_key_or_list=["-date", "name"]))
        cursor.sort.assert_called_once_with([("date", -1), ("name", 1)])

    def test_zero_skip_and_limit_not_applied(self) -> None:
        cursor = _chain_cursor()
        compose_cursor(cursor, QueryParameters(skip=0, limit=0))
        cursor.skip.assert_not_called()
        cursor.limit.assert_not_called()

    def test_returns_chained_cursor(self) -> None:
        cursor = MagicMock()
        limited = MagicMock()
        cursor.limit.return_value = limited
        assert compose_cursor(cursor, QueryParameters(limit=3)) is limited


class TestAggregationCursor:
    def test_stages_appended_in_order(self) -> None:
        cursor = AggregationCursor(_collection(), [{"$unwind": "$tags"}])
        cursor.match({"tags": "py"}).sort([("name", -1)]).skip(2).limit(3)
        assert cursor.pipeline == [
            {"$unwind": "$tags"},
            {"$match": {"tags": "py"}},
            {"$sort": {"name": -1}},
            {"$skip": 2},
            {"$limit": 3},
        ]

    def test_sort_accepts_key_and_direction(self) -> None:
        cursor = AggregationCursor(_collection()).sort("name", -1)
        assert cursor.pipeline == [{"$sort": {"name": -1}}]

    def test_sort_accepts_mapping(self) -> None:
        cursor = AggregationCursor(_collection()).sort({"a": 1, "b": -1})
        assert cursor.pipeline == [{"$sort": {"a": 1, "b": -1}}]

    def test_caller_pipeline_not_mutated(self) -> None:
        base = [{"$match": {}}]
        AggregationCursor(_collection(), base).limit(1)
        assert base == [{"$match": {}}]

    def test_to_list_runs_pipeline(self) -> None:
        async def run() -> None:
            col = _collection([{"_id": None, "count": 4}])
            cursor = AggregationCursor(col, [{"$match": {}}], allowDiskUse=True).group(
                {"_id": None, "count": {"$sum": 1}}
            )
            assert await cursor.to_list() == [{"_id": None, "count": 4}]
            col.aggregate.assert_called_once_with(
                [{"$match": {}}, {"$group": {"_id": None, "count": {"$sum": 1}}}],
                allowDiskUse=True,
            )
        asyncio.run(run())

    def test_modifying_consumed_cursor_raises(self) -> None:
        async def run() -> None:
            cursor = AggregationCursor(_collection())
            await cursor.to_list()
            assert cursor.consumed
            with pytest.raises(CursorConsumedError):
                cursor.limit(1)
            with pytest.raises(CursorConsumedError):
                await cursor.to_list()
        asyncio.run(run())

    def test_composable_with_parameters(self) -> None:
        cursor = AggregationCursor(_collection())
        compose_cursor(cursor, QueryParameters(skip=5, limit=5, sort_key_or_list="name"))
        assert cursor.pipeline == [{"$sort": {"name": 1}}, {"$skip": 5}, {"$limit": 5}]
