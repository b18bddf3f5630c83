"""Application pagination – sort key translation.

``"name"`` sorts ascending, ``"-name"`` descending. Anything that is not a
string is assumed to be an already structured sort specification.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pymongo import ASCENDING, DESCENDING

from docrepo.kernel.errors import MalformedParameterError

DESCENDING_MARKER = "-"


def sort_key_to_spec(sort_key: Any) -> Any:
    if not isinstance(sort_key, str):
        return sort_key
    is_desc = sort_key.startswith(DESCENDING_MARKER)
    field = sort_key[1:] if is_desc else sort_key
    if not field:
        raise MalformedParameterError("order", sort_key, "missing field name")
    return {field: DESCENDING if is_desc else ASCENDING}


def sort_key_or_list_to_specs(sort_key_or_list: Any) -> list[Any]:
    if isinstance(sort_key_or_list, str):
        return [sort_key_to_spec(sort_key_or_list)]
    if isinstance(sort_key_or_list, (list, tuple)):
        return [sort_key_to_spec(key) for key in sort_key_or_list]
    return [sort_key_or_list]


def _pairs(spec: Any) -> Iterable[tuple[str, Any]]:
    if isinstance(spec, Mapping):
        return spec.items()
    if isinstance(spec, (list, tuple)) and len(spec) == 2 and isinstance(spec[0], str):
        return [(spec[0], spec[1])]
    raise MalformedParameterError("order", spec, "unsupported sort specification")


def merge_sort_specs(specs: Iterable[Any]) -> list[tuple[str, Any]]:
    """Flatten translated specs into one compound sort, first key most significant."""
    merged: dict[str, Any] = {}
    for spec in specs:
        for field, direction in _pairs(spec):
            merged.setdefault(field, direction)
    return list(merged.items())


__all__ = [
    "DESCENDING_MARKER",
    "merge_sort_specs",
    "sort_key_or_list_to_specs",
    "sort_key_to_spec",
]
