"""
API constants for the Circonus client.

Contains endpoint defaults and per-resource URL prefixes and CID patterns.
"""

from typing import Final

DEFAULT_API_URL: Final[str] = "https://api.circonus.com/v2"
DEFAULT_APP_NAME: Final[str] = "circonus-client"

# Outlier reports
OUTLIER_REPORT_PREFIX: Final[str] = "/outlier_report"
OUTLIER_REPORT_CID_REGEX: Final[str] = "^" + OUTLIER_REPORT_PREFIX + "/[0-9]+$"
