"""MongoDB adapter – MongoCollectionRepository generic base."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Callable, Generic, TypeVar

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from docrepo.adapters.mongodb.cursor import AggregationCursor, compose_cursor
from docrepo.adapters.mongodb.entities import EntityFactory
from docrepo.adapters.mongodb.identifiers import sanitize_id
from docrepo.adapters.mongodb.sources import PipelineQuery, PlainQuery, QuerySource
from docrepo.application.pagination import PaginationResult, QueryParameters, build_query_parameters
from docrepo.application.search import build_tokenized_filter
from docrepo.kernel.errors import StoreQueryFailedError
from docrepo.observability.logging import get_logger

T = TypeVar("T")

CollectionProvider = Callable[[str], Any]

logger = get_logger(__name__)

_COUNT_STAGE = {"_id": None, "count": {"$sum": 1}}


class MongoCollectionRepository(Generic[T]):
    """Generic repository for one MongoDB collection.

    Subclasses pick the collection, the entity factory and the fields that
    free-text search looks at::

        class UserRepository(MongoCollectionRepository[User]):
            def __init__(self, provider: CollectionProvider) -> None:
                super().__init__(
                    provider, "users", ConstructorEntityFactory(User),
                    searchable_properties=["name", "email"],
                )

    Single-document lookups never report "not found": they return
    ``entity_factory.default()`` instead. Multi-document lookups return an
    empty list. Every driver failure surfaces as
    :class:`~docrepo.kernel.errors.StoreQueryFailedError`.
    """

    def __init__(
        self,
        provider: CollectionProvider,
        collection_name: str,
        entity_factory: EntityFactory[T],
        searchable_properties: Sequence[str] = (),
    ) -> None:
        self._provider = provider
        self.collection_name = collection_name
        self.entity_factory = entity_factory
        self.searchable_properties: list[str] = list(searchable_properties)

    @property
    def collection(self) -> Any:
        return self._provider(self.collection_name)

    @contextlib.contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except PyMongoError as exc:
            logger.error(
                "repository.store_query_failed",
                collection=self.collection_name,
                operation=operation,
                error=repr(exc),
            )
            raise StoreQueryFailedError(self.collection_name, operation, cause=exc) from exc

    # ------------------------------------------------------------------
    # Hydration
    # ------------------------------------------------------------------

    @property
    def default_object(self) -> T:
        return self.entity_factory.default()

    def hydrate_object(self, record: Mapping[str, Any] | None) -> T | None:
        if record is None:
            return None
        return self.entity_factory.hydrate(record)

    # ------------------------------------------------------------------
    # Single and multi document access
    # ------------------------------------------------------------------

    def aggregate(self, pipeline: list[dict[str, Any]], **options: Any) -> AggregationCursor[Any]:
        return AggregationCursor(self.collection, pipeline, **options)

    async def find_one(self, filter: Mapping[str, Any], **options: Any) -> T:
        query = sanitize_id(filter)
        with self._store_errors("find_one"):
            record = await self.collection.find_one(query, **options)
        hydrated = self.hydrate_object(record)
        return hydrated if hydrated is not None else self.default_object

    async def find_one_and_update(
        self,
        filter: Mapping[str, Any],
        update: Mapping[str, Any] | list[dict[str, Any]],
        **options: Any,
    ) -> T:
        """Atomically update one document and hydrate the result.

        The updated document is returned unless the caller passes
        ``return_document=ReturnDocument.BEFORE``.
        """
        query = sanitize_id(filter)
        options.setdefault("return_document", ReturnDocument.AFTER)
        with self._store_errors("find_one_and_update"):
            record = await self.collection.find_one_and_update(query, update, **options)
        hydrated = self.hydrate_object(record)
        return hydrated if hydrated is not None else self.default_object

    async def find(
        self,
        query: Mapping[str, Any],
        fields: Sequence[str] | Mapping[str, Any] | None = None,
        skip: int = 0,
        limit: int = 0,
        timeout: int | None = None,
    ) -> list[T]:
        """Return every matching document, hydrated.

        *fields* may be a list of field names or a projection document;
        *timeout* is the server-side time limit in milliseconds.
        """
        projection = self.fields_to_projection(fields) if isinstance(fields, (list, tuple)) else fields
        options: dict[str, Any] = {}
        if timeout is not None:
            options["max_time_ms"] = timeout
        with self._store_errors("find"):
            cursor = self.collection.find(query, projection=projection, skip=skip, limit=limit, **options)
            records = await cursor.to_list(length=None)
        return [self.entity_factory.hydrate(record) for record in records]

    async def count(self, query: Mapping[str, Any], **options: Any) -> int:
        with self._store_errors("count"):
            return await self.collection.count_documents(query, **options)

    @staticmethod
    def fields_to_projection(fields: Sequence[str]) -> dict[str, int]:
        return {field: 1 for field in fields}

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def build_filter(
        self,
        query: Mapping[str, Any] | str,
        searchable_properties: Sequence[str],
        parameters: QueryParameters | None = None,
    ) -> dict[str, Any]:
        """Build the filter shared by the page query and the total count."""
        if isinstance(query, str):
            built = build_tokenized_filter(query, searchable_properties)
        else:
            built = sanitize_id(query)
        if parameters is not None and parameters.filter:
            search = build_tokenized_filter(parameters.filter, searchable_properties)
            built = {"$and": [built, search]} if built else search
        return built

    def get_cursor(self, query: Mapping[str, Any] | str, searchable_properties: Sequence[str]) -> Any:
        return self.collection.find(self.build_filter(query, searchable_properties))

    def build_query(self, cursor: Any, parameters: QueryParameters | None) -> Any:
        return compose_cursor(cursor, parameters)

    async def get_total(
        self,
        total_cursor: AggregationCursor[Any] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> int:
        if total_cursor is not None:
            with self._store_errors("aggregate"):
                groups = await total_cursor.group(_COUNT_STAGE).to_list(length=None)
            return groups[0]["count"] if groups else 0
        return await self.count(query or {})

    async def _materialize(self, cursor: Any, operation: str) -> list[Any]:
        with self._store_errors(operation):
            return await cursor.to_list(length=None)

    async def find_with_pagination(
        self,
        query_params: Any,
        source: QuerySource | None = None,
        searchable_properties: Sequence[str] | None = None,
        hydrate: bool = False,
    ) -> PaginationResult[Any]:
        """Return one page of documents and the total matching count.

        *query_params* is the raw parameter bag from the transport layer
        (``filter``, ``skip``, ``limit``, ``order``). *source* defaults to a
        plain query matching every document. *searchable_properties*
        overrides the configured ones for plain queries only. With
        *hydrate* the records are passed through the entity factory.
        """
        parameters = build_query_parameters(query_params)
        source = source if source is not None else PlainQuery()
        total_cursor: AggregationCursor[Any] | None = None
        query: dict[str, Any] | None = None

        match source:
            case PipelineQuery(factory):
                page_cursor = factory()
                total_cursor = factory()
                if parameters is not None and parameters.filter:
                    search = build_tokenized_filter(parameters.filter, self.searchable_properties)
                    page_cursor = page_cursor.match(search)
                    total_cursor = total_cursor.match(search)
                mode = "pipeline"
            case PlainQuery(raw_query):
                properties = (
                    searchable_properties if searchable_properties is not None else self.searchable_properties
                )
                query = self.build_filter(raw_query, properties, parameters)
                with self._store_errors("find"):
                    page_cursor = self.collection.find(query)
                mode = "plain"
            case _:
                raise TypeError(f"unsupported query source: {source!r}")

        page_cursor = self.build_query(page_cursor, parameters)
        # A failure in either task cancels the other; the first error is re-raised unwrapped.
        try:
            async with asyncio.TaskGroup() as group:
                page_task = group.create_task(
                    self._materialize(page_cursor, "aggregate" if mode == "pipeline" else "find")
                )
                total_task = group.create_task(self.get_total(total_cursor, query))
        except BaseExceptionGroup as errors:
            raise errors.exceptions[0]
        records, total = page_task.result(), total_task.result()
        data = [self.entity_factory.hydrate(record) for record in records] if hydrate else records

        logger.debug(
            "repository.paginate",
            collection=self.collection_name,
            mode=mode,
            skip=parameters.skip if parameters else None,
            limit=parameters.limit if parameters else None,
            returned=len(data),
            total=total,
        )
        return PaginationResult(data=data, total=total)


__all__ = ["CollectionProvider", "MongoCollectionRepository"]
