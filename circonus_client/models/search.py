"""
Search request types.

Free-text search plus attribute filters, encoded as repeated query parameters.

Dependencies: urllib (stdlib)
System role: Query string construction for resource search endpoints
"""

from typing import Mapping, Sequence
from urllib.parse import urlencode

SearchQuery = str
SearchFilter = Mapping[str, Sequence[str]]


def build_search_params(
    query: SearchQuery | None = None,
    filters: SearchFilter | None = None,
) -> list[tuple[str, str]]:
    """
    Build ordered query parameters for a search request.

    Args:
        query: Free-text search (sent as "search")
        filters: Filter name to values, e.g. {"f__tags_has": ["env:prod"]}

    Returns:
        list[tuple[str, str]]: Parameters, empty if no criteria were given
    """
    params: list[tuple[str, str]] = []

    if query:
        params.append(("search", query))

    if filters:
        for name, values in filters.items():
            if isinstance(values, str):
                values = [values]
            for value in values:
                params.append((name, value))

    return params


def encode_search_params(params: list[tuple[str, str]]) -> str:
    """Encode parameters as a query string, sorted by key (repeated keys keep their order)."""
    return urlencode(sorted(params, key=lambda item: item[0]))
