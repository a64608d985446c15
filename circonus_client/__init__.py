"""
Circonus API client.

Typed bindings for the Circonus REST API. Currently covers outlier reports.
"""

from circonus_client.dependencies import CirconusAPI, get_api
from circonus_client.models import OutlierReport, new_outlier_report

__all__ = ["CirconusAPI", "get_api", "OutlierReport", "new_outlier_report"]
