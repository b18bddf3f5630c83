"""Application search – tokenized free-text filter builder."""
from docrepo.application.search.tokens import (
    MATCH_EVERYTHING,
    MATCH_NOTHING,
    build_token_pattern,
    build_tokenized_filter,
    tokenize,
)

__all__ = [
    "MATCH_EVERYTHING",
    "MATCH_NOTHING",
    "build_token_pattern",
    "build_tokenized_filter",
    "tokenize",
]
