"""URL codec for date facet filters.

A filter travels in the URL as a single token: the operator code followed
by zero to two ISO-8601 timestamps, joined by a pipe:

    gt|2024-03-10T00:00:00+00:00
    bt|2024-03-01T00:00:00+00:00|2024-03-31T00:00:00+00:00
    ym|2024-02-01T00:00:00+00:00|2024-02-29T23:59:59+00:00

Year/month selections are stored as the inclusive span they cover, since
the query layer only understands date ranges.
"""

import calendar
from datetime import date, datetime, time, tzinfo
from typing import Iterable, List, Optional, Tuple, Union
from zoneinfo import ZoneInfo

from config import config
from config.constants import TOKEN_DELIMITER, TIMESTAMP_TIMESPEC
from config.logging_config import get_logger
from src.facets.models import FilterOperator
from src.facets.state import DateFilterState

logger = get_logger("facets.codec")

DateValue = Union[datetime, date, str]
TimezoneLike = Union[tzinfo, str, None]


def get_timezone(tz: TimezoneLike = None) -> tzinfo:
    """Resolve a time zone argument, falling back to the configured zone."""
    if tz is None:
        return config.facets.tzinfo
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def to_datetime(value: DateValue, tz: TimezoneLike = None) -> datetime:
    """
    Normalize a date value to an aware datetime.

    Naive datetimes and bare dates are interpreted in the given (or
    configured) time zone; bare dates at midnight.

    Raises:
        ValueError: If a string value is not ISO-8601.
        TypeError: For unsupported value types.
    """
    zone = get_timezone(tz)
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=zone)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=zone)
    raise TypeError(f"Unsupported date value: {value!r}")


def format_timestamp(value: datetime) -> str:
    """Format an aware datetime the way tokens carry it."""
    return value.replace(microsecond=0).isoformat(timespec=TIMESTAMP_TIMESPEC)


def expand_year_month(
    year: int,
    month: Optional[int] = None,
    tz: TimezoneLike = None,
) -> Tuple[datetime, datetime]:
    """
    Expand a year and optional month into the inclusive span it covers.

    Args:
        year: Calendar year.
        month: Month 1-12, or None for the whole year.
        tz: Time zone of the span.

    Returns:
        Tuple of (first second of the span, last second of the span).

    Raises:
        ValueError: If month is outside 1-12.
    """
    if month is not None and not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")

    zone = get_timezone(tz)
    first_month = month or 1
    last_month = month or 12
    days_in_month = calendar.monthrange(year, last_month)[1]

    start = datetime(year, first_month, 1, 0, 0, 0, tzinfo=zone)
    end = datetime(year, last_month, days_in_month, 23, 59, 59, tzinfo=zone)
    return start, end


def encode(
    operator: Union[FilterOperator, str, None],
    values: Iterable[Optional[DateValue]] = (),
    *,
    year: Optional[int] = None,
    month: Optional[int] = None,
    tz: TimezoneLike = None,
) -> Optional[str]:
    """
    Encode an operator and its values into a URL token.

    Args:
        operator: Operator or operator code; falsy means no filter.
        values: One date for AFTER/BEFORE, two for BETWEEN. Ignored for
            YEAR_MONTH.
        year: Year for YEAR_MONTH.
        month: Optional month for YEAR_MONTH.
        tz: Time zone for naive values and year/month spans.

    Returns:
        The token, or None when there is nothing to filter on.
    """
    if not operator:
        return None

    operator = FilterOperator(operator)
    zone = get_timezone(tz)

    if operator is FilterOperator.YEAR_MONTH:
        if year is None or year == "":
            return None
        stamps = list(expand_year_month(int(year), int(month) if month is not None and month != "" else None, zone))
    else:
        stamps = [to_datetime(v, zone) for v in values if v is not None and v != ""]
        stamps = stamps[:operator.value_count]
        if len(stamps) < operator.value_count:
            return None

    return TOKEN_DELIMITER.join([operator.value] + [format_timestamp(s) for s in stamps])


def encode_state(state: DateFilterState, tz: TimezoneLike = None) -> Optional[str]:
    """Encode a DateFilterState into a URL token."""
    if state.operator is FilterOperator.YEAR_MONTH:
        return encode(state.operator, year=state.year, month=state.month, tz=tz)
    return encode(state.operator, [state.first_date, state.second_date], tz=tz)


def parse_timestamp(raw: str, tz: TimezoneLike = None) -> Optional[datetime]:
    """Parse one token value into the given zone.

    None when it is not an ISO-8601 timestamp or cannot be expressed in the
    zone (values at the edges of the datetime range).
    """
    # An unescaped '+' in the offset arrives as a space after query decoding.
    candidate = raw.strip().replace(" ", "+")
    zone = get_timezone(tz)
    try:
        return to_datetime(datetime.fromisoformat(candidate), zone).astimezone(zone)
    except (ValueError, OverflowError):
        return None


def decode(
    token: Optional[str],
    tz: TimezoneLike = None,
) -> Tuple[Optional[FilterOperator], List[datetime]]:
    """
    Decode a URL token into its operator and values.

    Tokens come from user-editable URLs: anything malformed (unknown
    operator, unparseable timestamp, too many values) yields
    ``(None, [])`` instead of an error.
    """
    if not token:
        return None, []

    code, *raw_values = token.split(TOKEN_DELIMITER)
    operator = FilterOperator.from_code(code.strip())
    if operator is None:
        logger.debug(f"Discarding date filter with unknown operator: {code!r}")
        return None, []

    raw_values = [raw for raw in raw_values if raw.strip()]
    if len(raw_values) > operator.value_count:
        logger.debug(f"Discarding date filter with too many values: {token!r}")
        return None, []

    zone = get_timezone(tz)
    values = []
    for raw in raw_values:
        parsed = parse_timestamp(raw, zone)
        if parsed is None:
            logger.debug(f"Discarding date filter with malformed value: {raw!r}")
            return None, []
        values.append(parsed)

    return operator, values
