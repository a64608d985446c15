"""
Test suite for CID helpers.

Tests prefix normalisation and pattern validation of canonical identifiers.

System role: Verification of identifier checks performed before dispatch
"""

import pytest

from circonus_client.configs.constants import OUTLIER_REPORT_CID_REGEX, OUTLIER_REPORT_PREFIX
from circonus_client.core.cid import match_cid, normalize_cid
from circonus_client.core.exceptions import InvalidCIDError, ValidationError


class TestMatchCID:
    """Test suite for match_cid()."""

    @pytest.mark.parametrize("cid", ["/outlier_report/1", "/outlier_report/1234567"])
    def test_match_cid_should_accept_full_numeric_cids(self, cid: str) -> None:
        """Test well-formed CIDs match the outlier report pattern."""
        assert match_cid(cid, OUTLIER_REPORT_CID_REGEX)

    @pytest.mark.parametrize(
        "cid",
        [
            "",
            "1234",
            "/outlier_report/",
            "/outlier_report/abc",
            "/outlier_report/12/34",
            "/metric_cluster/1234",
            "/outlier_report/1234\n",
        ],
    )
    def test_match_cid_should_reject_malformed_cids(self, cid: str) -> None:
        """Test malformed CIDs (including trailing newline) do not match."""
        assert not match_cid(cid, OUTLIER_REPORT_CID_REGEX)


class TestNormalizeCID:
    """Test suite for normalize_cid()."""

    def _normalize(self, cid: str | None) -> str:
        return normalize_cid(cid, OUTLIER_REPORT_PREFIX, OUTLIER_REPORT_CID_REGEX, "outlier report")

    def test_normalize_cid_should_prefix_bare_id(self) -> None:
        """Test bare numeric ID gets the collection prefix."""
        assert self._normalize("1234") == "/outlier_report/1234"

    def test_normalize_cid_should_keep_full_cid(self) -> None:
        """Test full CID is returned unchanged."""
        assert self._normalize("/outlier_report/1234") == "/outlier_report/1234"

    @pytest.mark.parametrize("cid", [None, ""])
    def test_normalize_cid_should_reject_missing_cid(self, cid: str | None) -> None:
        """Test None and empty string raise the (none) error."""
        with pytest.raises(InvalidCIDError) as exc_info:
            self._normalize(cid)

        assert exc_info.value.message == "invalid outlier report CID (none)"

    def test_normalize_cid_should_report_normalized_cid_on_mismatch(self) -> None:
        """Test error message carries the prefixed CID that failed validation."""
        with pytest.raises(InvalidCIDError) as exc_info:
            self._normalize("abc")

        assert exc_info.value.message == "invalid outlier report CID (/outlier_report/abc)"
        assert exc_info.value.details["cid"] == "/outlier_report/abc"
        assert exc_info.value.details["field"] == "cid"

    def test_invalid_cid_error_should_be_validation_error(self) -> None:
        """Test InvalidCIDError can be caught as ValidationError."""
        with pytest.raises(ValidationError):
            self._normalize("/outlier_report/x")
