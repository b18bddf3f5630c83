"""MongoDB adapter – where a paginated query reads its documents from."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable, Union

from docrepo.adapters.mongodb.cursor import AggregationCursor


@dataclasses.dataclass(frozen=True)
class PlainQuery:
    """A ``find`` against the collection.

    ``filter`` is either a MongoDB filter document or free text that is
    turned into a tokenized search over the searchable properties.
    """

    filter: Mapping[str, Any] | str = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class PipelineQuery:
    """An aggregation pipeline.

    ``factory`` is called once for the page and once for the total, since
    a consumed aggregation cursor cannot be re-run.
    """

    factory: Callable[[], AggregationCursor[Any]]


QuerySource = Union[PlainQuery, PipelineQuery]


__all__ = ["PipelineQuery", "PlainQuery", "QuerySource"]
