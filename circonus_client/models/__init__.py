"""
Resource models and search types.

Exports: OutlierReport, new_outlier_report, SearchQuery, SearchFilter, search param helpers
"""

from circonus_client.models.outlier_report import OutlierReport, new_outlier_report
from circonus_client.models.search import (
    SearchFilter,
    SearchQuery,
    build_search_params,
    encode_search_params,
)

__all__ = [
    "OutlierReport",
    "new_outlier_report",
    "SearchFilter",
    "SearchQuery",
    "build_search_params",
    "encode_search_params",
]
