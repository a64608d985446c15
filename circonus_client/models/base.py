"""
Base model for API resource records.

Handles the wire conventions shared by every resource: underscore-prefixed
server-managed keys exposed through aliases, unknown keys ignored, and empty
values omitted from request bodies.

Dependencies: pydantic
System role: Foundation for resource record schemas
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, list, dict)):
        return len(value) == 0
    if isinstance(value, int):
        return value == 0
    return False


class ResourceModel(BaseModel):
    """Base schema for API resource records."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    cid: str | None = Field(default=None, alias="_cid", description="Canonical identifier")

    def to_payload(self) -> dict[str, Any]:
        """
        Serialize record for a request body.

        Returns:
            dict: JSON-ready dict keyed by API field names, empty fields omitted
        """
        data = self.model_dump(by_alias=True, mode="json")
        return {key: value for key, value in data.items() if not _is_empty(value)}

    def to_json(self) -> bytes:
        """Serialize record to request body bytes."""
        return json.dumps(self.to_payload()).encode("utf-8")
