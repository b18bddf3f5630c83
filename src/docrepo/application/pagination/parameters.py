"""Application pagination – QueryParameters and the raw-parameter normalizer."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from docrepo.kernel.errors import MalformedParameterError


@dataclasses.dataclass(frozen=True)
class QueryParameters:
    """Recognized pagination parameters; ``None`` means "no constraint"."""

    filter: str | None = None
    skip: int | None = None
    limit: int | None = None
    sort_key_or_list: Any = None


def _read(source: Any, key: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


def _to_int(name: str, value: Any, *, minimum: int) -> int:
    if isinstance(value, bool):
        raise MalformedParameterError(name, value, "expected an integer")
    try:
        parsed = int(value.strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError) as exc:
        raise MalformedParameterError(name, value, "expected an integer", cause=exc) from exc
    if parsed < minimum:
        raise MalformedParameterError(name, value, f"must be >= {minimum}")
    return parsed


def build_query_parameters(source: Any) -> QueryParameters | None:
    """Extract ``filter``, ``skip``, ``limit`` and ``order`` from *source*.

    *source* may be a mapping (query string, JSON body) or any object exposing
    those names as attributes. Unrecognized keys are ignored. ``skip`` and
    ``limit`` are only kept when truthy, so ``0`` is the same as absent.

    Raises
    ------
    MalformedParameterError
        When ``skip``/``limit`` are not integers, or are negative.
    """
    if not source:
        return None

    raw_filter = _read(source, "filter")
    raw_skip = _read(source, "skip")
    raw_limit = _read(source, "limit")
    raw_order = _read(source, "order")

    return QueryParameters(
        filter=raw_filter if isinstance(raw_filter, str) and raw_filter else None,
        skip=_to_int("skip", raw_skip, minimum=0) if raw_skip else None,
        limit=_to_int("limit", raw_limit, minimum=0) if raw_limit else None,
        sort_key_or_list=raw_order if raw_order else None,
    )


__all__ = ["QueryParameters", "build_query_parameters"]
