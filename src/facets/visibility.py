"""Month option visibility for the year/month selector.

Server-side model of the browser behaviour shipped in
api/static/date_widget.js. Both follow the same rules:

- changing to a different year clears the month selection;
- the visible months are exactly those present for the selected year;
- hidden options stay in the list;
- attaching synchronises once with the year already selected.
"""

from typing import Any, Iterable, List, Mapping, Optional

from src.facets.availability import YearMonthAvailability


class MonthVisibility:
    """Month selector state driven by the year selector."""

    def __init__(
        self,
        payload: Mapping[Any, Any],
        month_options: Iterable[int] = range(1, 13),
        year: Optional[int] = None,
        month: Optional[int] = None,
    ):
        """
        Args:
            payload: Year/month availability as delivered to the client.
            month_options: Month values of the selector options.
            year: Year selected when the behaviour attaches.
            month: Month selected when the behaviour attaches.
        """
        self.availability = YearMonthAvailability.from_payload(payload)
        self.month_options = list(month_options)
        self.year = year
        self.month = month
        self._latest_year = year
        self._hidden: set = set()

    def attach(self) -> "MonthVisibility":
        """Run the initial synchronisation with the current year."""
        self.change_year(self.year)
        return self

    def change_year(self, year: Optional[int]) -> None:
        """Handle a change of the year selector."""
        if year != self._latest_year:
            self._latest_year = year
            self.month = None

        self.year = year
        present = set(self.availability.months(year))
        self._hidden = {m for m in self.month_options if m not in present}

    def select_month(self, month: Optional[int]) -> None:
        self.month = month

    @property
    def visible_months(self) -> List[int]:
        return [m for m in self.month_options if m not in self._hidden]

    @property
    def hidden_months(self) -> List[int]:
        return [m for m in self.month_options if m in self._hidden]
