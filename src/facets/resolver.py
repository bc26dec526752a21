"""Resolve the active date filter of a facet into a DateFilterState."""

from typing import Optional, Sequence

from src.facets.codec import TimezoneLike, decode, get_timezone
from src.facets.models import FilterOperator
from src.facets.state import DateFilterState


def resolve(token: Optional[str], tz: TimezoneLike = None) -> DateFilterState:
    """
    Derive operator and date values from a URL token.

    Unknown or malformed tokens resolve to the empty state. An operator
    without its value keeps the operator so the form can show it, but the
    state is not complete. BETWEEN values are returned in the order
    received; callers validate the ordering.

    For YEAR_MONTH the year comes from the start of the span and the month
    only when start and end fall in the same calendar month, so a
    year-only span (or any irregular span) leaves the month absent.
    """
    zone = get_timezone(tz)
    operator, values = decode(token, zone)
    if operator is None:
        return DateFilterState()

    first = values[0] if values else None
    second = values[1] if len(values) > 1 else None

    if operator is not FilterOperator.YEAR_MONTH:
        return DateFilterState(operator=operator, first_date=first, second_date=second)

    year = month = None
    if first is not None:
        start = first.astimezone(zone)
        year = start.year
        if second is not None:
            end = second.astimezone(zone)
            if (start.year, start.month) == (end.year, end.month):
                month = start.month

    return DateFilterState(
        operator=operator,
        first_date=first,
        second_date=second,
        year=year,
        month=month,
    )


def resolve_active_items(
    active_items: Optional[Sequence[str]],
    tz: TimezoneLike = None,
) -> DateFilterState:
    """Resolve a facet's active items; a date facet holds at most one."""
    if not active_items:
        return DateFilterState()
    return resolve(active_items[0], tz)
