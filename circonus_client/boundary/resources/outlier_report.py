"""
Outlier report API binding.

Fetch, Create, Update, Delete and Search for /outlier_report.
See: https://login.circonus.com/resources/api/calls/report

Dependencies: circonus_client.boundary.resources.base_resource
System role: Outlier report persistence operations
"""

from circonus_client.boundary.http.api_client import APIClient
from circonus_client.boundary.resources.base_resource import BaseResourceClient
from circonus_client.configs.constants import OUTLIER_REPORT_CID_REGEX, OUTLIER_REPORT_PREFIX
from circonus_client.models.outlier_report import OutlierReport
from circonus_client.models.search import SearchFilter, SearchQuery


class OutlierReportClient(BaseResourceClient[OutlierReport]):
    """
    Binding for outlier reports.

    Inherits the generic operations and exposes them under the
    outlier-report-specific names as well.
    """

    def __init__(self, api: APIClient) -> None:
        """Initialize OutlierReportClient with the shared API client."""
        super().__init__(
            api,
            OutlierReport,
            prefix=OUTLIER_REPORT_PREFIX,
            cid_regex=OUTLIER_REPORT_CID_REGEX,
            name="outlier report",
        )

    def fetch_outlier_report(self, cid: str | None) -> OutlierReport:
        """Retrieve outlier report with passed cid."""
        return self.fetch(cid)

    def fetch_outlier_reports(self) -> list[OutlierReport]:
        """Retrieve all outlier reports available to the API token."""
        return self.fetch_all()

    def create_outlier_report(self, report: OutlierReport | None) -> OutlierReport:
        """Create a new outlier report."""
        return self.create(report)

    def update_outlier_report(self, report: OutlierReport | None) -> OutlierReport:
        """Update passed outlier report."""
        return self.update(report)

    def delete_outlier_report(self, report: OutlierReport | None) -> bool:
        """Delete passed outlier report."""
        return self.delete(report)

    def delete_outlier_report_by_cid(self, cid: str | None) -> bool:
        """Delete outlier report with passed cid."""
        return self.delete_by_cid(cid)

    def search_outlier_reports(
        self,
        query: SearchQuery | None = None,
        filters: SearchFilter | None = None,
    ) -> list[OutlierReport]:
        """
        Return outlier reports matching the search query and/or filter.

        If neither is given, all outlier reports are returned.
        """
        return self.search(query, filters)
