"""Constants for the list pages date facet.

Static values shared by the codec, the widget and the API. Facet
definitions themselves live in facets.yaml (see config_loader).
"""

from typing import Dict, List

# =============================================================================
# URL token
# =============================================================================

# Cannot appear in ISO-8601 timestamps or in operator codes.
TOKEN_DELIMITER = "|"

# Seconds precision with offset, e.g. 2024-02-29T23:59:59+00:00
TIMESTAMP_TIMESPEC = "seconds"

# =============================================================================
# Widget
# =============================================================================

OPERATOR_LABELS: Dict[str, str] = {
    "gt": "After",
    "lt": "Before",
    "bt": "In between",
    "ym": "By year, month",
}

MONTH_NAMES: Dict[int, str] = {
    1: "January",
    2: "February",
    3: "March",
    4: "April",
    5: "May",
    6: "June",
    7: "July",
    8: "August",
    9: "September",
    10: "October",
    11: "November",
    12: "December",
}

EMPTY_OPERATOR_LABEL = "Select"
EMPTY_YEAR_LABEL = "Year"
EMPTY_MONTH_LABEL = "Month"
END_DATE_TITLE = "End Date"
DATE_TITLE = "Date"

WRAPPER_CLASS = "oe-list-pages-date-widget-wrapper"
YEAR_CLASS = "oe-list-pages-date-widget-year"
MONTH_CLASS = "oe-list-pages-date-widget-month"
WIDGET_LIBRARY = "date_widget"

CACHE_CONTEXTS: List[str] = ["url.query_args", "url.path"]

# =============================================================================
# Validation messages
# =============================================================================

MSG_SECOND_DATE_REQUIRED = "The second date is required."
MSG_SECOND_DATE_BEFORE_FIRST = "The second date cannot be before the first date."
MSG_OPERATOR_REQUIRED = "The operator is required."
MSG_FIRST_DATE_REQUIRED = "The first date is required."
MSG_YEAR_REQUIRED = "The year is required."

# =============================================================================
# Index
# =============================================================================

INDEX_TABLE = "search_index"
DEFAULT_YEAR_MONTH_SCAN_LIMIT = 100000
