"""Application search – tokenized free-text filters.

Every whitespace-separated token must appear somewhere in a field value,
in any order and regardless of case. The per-field patterns are combined
with ``$or`` so a document matches when any searchable field matches.
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

MATCH_EVERYTHING = re.compile(".*", re.IGNORECASE | re.DOTALL)

# A {} sub-filter matches every document, so its negation matches none.
MATCH_NOTHING: dict[str, Any] = {"$nor": [{}]}


def tokenize(search_text: str) -> list[str]:
    return [token for token in search_text.split() if isinstance(token, str) and token]


def build_token_pattern(search_text: str) -> re.Pattern[str]:
    tokens = tokenize(search_text)
    if not tokens:
        return MATCH_EVERYTHING
    lookaheads = "".join(f"(?=.*{re.escape(token)})" for token in tokens)
    return re.compile(f"^{lookaheads}.*$", re.IGNORECASE | re.DOTALL)


def build_tokenized_filter(search_text: str, searchable_properties: Iterable[str]) -> dict[str, Any]:
    """Return a filter matching *search_text* against any of *searchable_properties*.

    With no searchable properties there is nothing to search, and
    :data:`MATCH_NOTHING` is returned instead of an empty ``$or`` (which
    MongoDB rejects).
    """
    properties = list(searchable_properties)
    if not properties:
        return {"$nor": [{}]}
    pattern = build_token_pattern(search_text)
    return {"$or": [{prop: pattern} for prop in properties]}


__all__ = [
    "MATCH_EVERYTHING",
    "MATCH_NOTHING",
    "build_token_pattern",
    "build_tokenized_filter",
    "tokenize",
]
