"""
CID helpers.

Canonical identifiers (CIDs) are resource paths such as ``/outlier_report/1234``.
Callers may pass either the full CID or just the trailing ID.

Dependencies: re (stdlib)
System role: Identifier validation before any request is dispatched
"""

import re

from circonus_client.core.exceptions import InvalidCIDError


def match_cid(cid: str, pattern: str) -> bool:
    """Return True if ``cid`` matches the resource CID ``pattern``."""
    # fullmatch: a trailing newline must not satisfy "$"
    return re.fullmatch(pattern, cid) is not None


def normalize_cid(cid: str | None, prefix: str, pattern: str, resource: str) -> str:
    """
    Prefix and validate a CID.

    Args:
        cid: Full CID or bare ID
        prefix: Resource URL prefix (e.g. "/outlier_report")
        pattern: Regex a full CID must match
        resource: Resource name used in error messages

    Returns:
        str: Full CID, e.g. "/outlier_report/1234"

    Raises:
        InvalidCIDError: If cid is None/empty or fails the pattern
    """
    if not cid:
        raise InvalidCIDError(f"invalid {resource} CID (none)")

    if not cid.startswith(prefix):
        cid = f"{prefix}/{cid}"

    if not match_cid(cid, pattern):
        raise InvalidCIDError(f"invalid {resource} CID ({cid})", cid=cid)

    return cid
