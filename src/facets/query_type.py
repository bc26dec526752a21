"""Date comparison handed to the index query layer."""

from dataclasses import dataclass
from datetime import datetime, time
from typing import Any, List, Optional, Tuple

from src.facets.codec import expand_year_month
from src.facets.models import DateType, FilterOperator
from src.facets.state import DateFilterState

# Comparison operators understood by the index
COMPARISONS = {
    ">": "> ?",
    "<": "< ?",
    "between": "BETWEEN ? AND ?",
}


@dataclass(frozen=True)
class DateComparison:
    """A date predicate: greater than, less than, or inclusive range."""

    operator: str
    lower: Optional[datetime] = None
    upper: Optional[datetime] = None

    @property
    def bounds(self) -> List[datetime]:
        if self.operator == ">":
            return [self.lower]
        if self.operator == "<":
            return [self.upper]
        return [self.lower, self.upper]

    def to_sql(self, column: str) -> Tuple[str, List[Any]]:
        """Convert to a SQL condition on a unix timestamp column."""
        if self.operator not in COMPARISONS:
            raise ValueError(f"Unknown comparison operator: {self.operator}")
        params = [int(bound.timestamp()) for bound in self.bounds]
        return f"{column} {COMPARISONS[self.operator]}", params


def _start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min, tzinfo=value.tzinfo)


def _end_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time(23, 59, 59), tzinfo=value.tzinfo)


def build_comparison(
    state: DateFilterState,
    date_type: DateType = DateType.DATE,
) -> Optional[DateComparison]:
    """
    Build the comparison for a resolved filter state.

    With date-only widgets, "after" means after the selected day, "before"
    means before it and "in between" covers both selected days entirely.

    Returns:
        The comparison, or None when the state is empty or incomplete.
    """
    if not state.is_complete:
        return None

    operator = state.operator
    first, second = state.first_date, state.second_date

    if operator is FilterOperator.YEAR_MONTH:
        if first is None or second is None:
            first, second = expand_year_month(state.year, state.month)
        return DateComparison("between", lower=first, upper=second)

    if date_type is DateType.DATE:
        if operator is FilterOperator.AFTER:
            return DateComparison(">", lower=_end_of_day(first))
        if operator is FilterOperator.BEFORE:
            return DateComparison("<", upper=_start_of_day(first))
        return DateComparison("between", lower=_start_of_day(first), upper=_end_of_day(second))

    if operator is FilterOperator.AFTER:
        return DateComparison(">", lower=first)
    if operator is FilterOperator.BEFORE:
        return DateComparison("<", upper=first)
    return DateComparison("between", lower=first, upper=second)
