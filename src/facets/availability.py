"""Year/month availability of a date facet field.

Maps each year present in the indexed data to the months that occur in
it. The map only drives which year/month options the widget offers; it
carries no counts and is rebuilt on every render.
"""

import itertools
import json
import numbers
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from config import config
from config.logging_config import get_logger
from src.facets.codec import TimezoneLike, get_timezone, to_datetime

logger = get_logger("facets.availability")

_MIN_SECONDS = int(pd.Timestamp.min.tz_localize("UTC").timestamp()) + 1
_MAX_SECONDS = int(pd.Timestamp.max.tz_localize("UTC").timestamp()) - 1


class YearMonthAvailability:
    """Read-only mapping of year -> ascending months present in the data."""

    def __init__(self, year_months: Optional[Mapping[int, Iterable[int]]] = None,
                 truncated: bool = False):
        year_months = year_months or {}
        self._year_months: Dict[int, Tuple[int, ...]] = {
            int(year): tuple(sorted({int(m) for m in months}))
            for year, months in sorted(year_months.items(), key=lambda item: int(item[0]))
        }
        self.truncated = truncated

    @property
    def years(self) -> List[int]:
        return list(self._year_months)

    def months(self, year: Optional[int]) -> Tuple[int, ...]:
        """Months present for a year, empty for unknown years."""
        if year is None:
            return ()
        return self._year_months.get(int(year), ())

    def __contains__(self, year: object) -> bool:
        try:
            return int(year) in self._year_months
        except (TypeError, ValueError):
            return False

    def __len__(self) -> int:
        return len(self._year_months)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonthAvailability):
            return NotImplemented
        return self._year_months == other._year_months

    def __repr__(self) -> str:
        return f"YearMonthAvailability({self.as_dict()!r})"

    def as_dict(self) -> Dict[int, List[int]]:
        return {year: list(months) for year, months in self._year_months.items()}

    def to_payload(self) -> Dict[str, Dict[str, int]]:
        """Client payload, keyed so the browser can look up year then month directly."""
        return {
            str(year): {str(month): month for month in months}
            for year, months in self._year_months.items()
        }

    def to_json(self) -> str:
        return json.dumps(self.to_payload())

    @classmethod
    def from_payload(cls, payload: Mapping[Any, Any]) -> "YearMonthAvailability":
        """Rebuild from a client payload (month mappings or month lists)."""
        year_months = {}
        for year, months in payload.items():
            if isinstance(months, Mapping):
                months = months.values()
            year_months[int(year)] = [int(m) for m in months]
        return cls(year_months)


def _to_unix_seconds(value: Any, tz: TimezoneLike) -> Optional[float]:
    """Unix seconds of an index value, None when it cannot be read as a date."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        seconds = float(value)
    elif isinstance(value, str) and value.strip().lstrip("-").isdigit():
        seconds = float(value.strip())
    elif isinstance(value, (datetime, date, str)):
        try:
            seconds = to_datetime(value, tz).timestamp()
        except ValueError:
            return None
    else:
        return None

    # Outside the range pandas can represent
    if not _MIN_SECONDS <= seconds <= _MAX_SECONDS:
        return None
    return seconds


def build_year_month_availability(
    values: Iterable[Any],
    tz: TimezoneLike = None,
    limit: Optional[int] = None,
) -> YearMonthAvailability:
    """
    Build the year/month availability from raw date values.

    Args:
        values: Date values of the facet field: unix timestamps as stored
            by the index, datetimes, dates or ISO-8601 strings.
        tz: Time zone in which years and months are read.
        limit: Maximum number of values to scan. Defaults to the
            configured scan limit.

    Returns:
        The availability. When more than ``limit`` values are supplied the
        map covers only the first ``limit`` and is flagged as truncated.
    """
    zone = get_timezone(tz)
    if limit is None:
        limit = config.facets.year_month_scan_limit

    scanned = list(itertools.islice(values, limit + 1))
    truncated = len(scanned) > limit
    if truncated:
        logger.warning(
            f"Year/month availability scan capped at {limit} values; "
            "some years or months may be missing"
        )
        scanned = scanned[:limit]

    seconds = []
    for value in scanned:
        converted = _to_unix_seconds(value, zone)
        if converted is None:
            logger.debug(f"Skipping unreadable date value: {value!r}")
            continue
        seconds.append(converted)

    if not seconds:
        return YearMonthAvailability(truncated=truncated)

    stamps = pd.to_datetime(pd.Series(seconds, dtype="float64"), unit="s", utc=True)
    local = stamps.dt.tz_convert(zone)
    pairs = (
        pd.DataFrame({"year": local.dt.year, "month": local.dt.month})
        .drop_duplicates()
        .sort_values(["year", "month"])
    )

    year_months: Dict[int, List[int]] = {}
    for year, month in pairs.itertuples(index=False):
        year_months.setdefault(int(year), []).append(int(month))

    return YearMonthAvailability(year_months, truncated=truncated)
