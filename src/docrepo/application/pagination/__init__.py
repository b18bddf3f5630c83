"""Application pagination – query parameters, sort translation, results."""
from docrepo.application.pagination.parameters import QueryParameters, build_query_parameters
from docrepo.application.pagination.result import PaginationResult
from docrepo.application.pagination.sort import (
    merge_sort_specs,
    sort_key_or_list_to_specs,
    sort_key_to_spec,
)

__all__ = [
    "PaginationResult",
    "QueryParameters",
    "build_query_parameters",
    "merge_sort_specs",
    "sort_key_or_list_to_specs",
    "sort_key_to_spec",
]
