"""Collaborators the date widget needs from its host."""

from datetime import datetime
from typing import Any, Iterable, Protocol, Union

from src.facets.codec import TimezoneLike, get_timezone
from src.facets.models import FacetSource


class DateFormatter(Protocol):
    """Formats dates for display in the widget."""

    def format(self, value: Union[datetime, int, float], pattern: str) -> str:
        ...


class IndexReader(Protocol):
    """Read-only access to indexed field values."""

    def fetch_field_values(self, source: FacetSource, field: str, limit: int) -> Iterable[Any]:
        ...


class TimezoneDateFormatter:
    """DateFormatter rendering values in a fixed time zone with strftime patterns."""

    def __init__(self, tz: TimezoneLike = None):
        self.tz = get_timezone(tz)

    def format(self, value: Union[datetime, int, float], pattern: str) -> str:
        if isinstance(value, (int, float)):
            value = datetime.fromtimestamp(value, tz=self.tz)
        elif value.tzinfo is None:
            value = value.replace(tzinfo=self.tz)
        return value.astimezone(self.tz).strftime(pattern)
