"""
Resource bindings.

Exports: BaseResourceClient, OutlierReportClient
"""

from .base_resource import BaseResourceClient
from .outlier_report import OutlierReportClient

__all__ = ["BaseResourceClient", "OutlierReportClient"]
