"""
Outlier report domain model.

An outlier report is a saved configuration describing outlier-detection
analysis over a metric cluster.
See: https://login.circonus.com/resources/api/calls/report

Dependencies: pydantic
System role: Outlier report API contract
"""

from pydantic import Field, field_validator

from circonus_client.models.base import ResourceModel


class OutlierReport(ResourceModel):
    """Outlier report record. All fields optional; CID assigned by the server."""

    config: str | None = Field(default=None, description="Report configuration blob")
    created: int | None = Field(default=None, alias="_created", description="Unix creation time")
    created_by: str | None = Field(default=None, alias="_created_by", description="Creator user CID")
    last_modified: int | None = Field(
        default=None, alias="_last_modified", description="Unix last modification time"
    )
    last_modified_by: str | None = Field(
        default=None, alias="_last_modified_by", description="Last modifier user CID"
    )
    metric_cluster_cid: str | None = Field(
        default=None, alias="metric_cluster", description="Metric cluster CID the report analyses"
    )
    tags: list[str] = Field(default_factory=list, description="Report tags")
    title: str | None = Field(default=None, description="Report title")

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_as_empty(cls, value):
        """Map "tags": null (untagged report) to an empty list."""
        return [] if value is None else value


def new_outlier_report() -> OutlierReport:
    """Return a new OutlierReport (no resource defaults apply)."""
    return OutlierReport()
