"""Unit tests for observability logging."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from pymongo.errors import OperationFailure
from structlog.testing import capture_logs

from docrepo.adapters.mongodb import ConstructorEntityFactory, MongoCollectionRepository
from docrepo.kernel.errors import StoreQueryFailedError
from docrepo.observability.logging import JsonLoggerFactory, get_logger
from docrepo.testing.fakes import InMemoryCollection


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def _repo(col: InMemoryCollection) -> MongoCollectionRepository[dict]:
    return MongoCollectionRepository(lambda name: col, "things", ConstructorEntityFactory(dict))


class TestJsonLoggerFactory:
    def test_renders_json_lines(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        get_logger("docrepo.test", collection="users").info("repository.paginate", total=3)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "repository.paginate"
        assert payload["collection"] == "users"
        assert payload["total"] == 3
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_sets_root_level(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("x", request_id="r-1").info("hello")
        (entry,) = logs
        assert entry["event"] == "hello"
        assert entry["request_id"] == "r-1"
        assert entry["log_level"] == "info"


class TestRepositoryLogging:
    def test_pagination_logged(self) -> None:
        col = InMemoryCollection("things", [{"n": 1}, {"n": 2}])
        with capture_logs() as logs:
            asyncio.run(_repo(col).find_with_pagination({"limit": 1}))
        (entry,) = [log for log in logs if log["event"] == "repository.paginate"]
        assert entry["collection"] == "things"
        assert entry["mode"] == "plain"
        assert entry["limit"] == 1
        assert entry["returned"] == 1
        assert entry["total"] == 2

    def test_store_failure_logged_then_raised(self) -> None:
        col = InMemoryCollection("things")
        col.error = OperationFailure("boom")
        with capture_logs() as logs, pytest.raises(StoreQueryFailedError):
            asyncio.run(_repo(col).count({}))
        (entry,) = [log for log in logs if log["event"] == "repository.store_query_failed"]
        assert entry["log_level"] == "error"
        assert entry["operation"] == "count"
