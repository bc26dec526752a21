"""Date filter state reconstructed from a URL token."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from src.facets.models import FilterOperator


@dataclass(frozen=True)
class DateFilterState:
    """Operator and values of a date facet for the current request.

    Never persisted: it is rebuilt from the incoming token on every
    request.
    """

    operator: Optional[FilterOperator] = None
    first_date: Optional[datetime] = None
    second_date: Optional[datetime] = None
    year: Optional[int] = None
    month: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        """No operator selected."""
        return self.operator is None

    @property
    def is_complete(self) -> bool:
        """Whether the state carries everything its operator needs."""
        if self.operator in (FilterOperator.AFTER, FilterOperator.BEFORE):
            return self.first_date is not None
        if self.operator is FilterOperator.BETWEEN:
            return (
                self.first_date is not None
                and self.second_date is not None
                and self.second_date >= self.first_date
            )
        if self.operator is FilterOperator.YEAR_MONTH:
            return self.year is not None and (self.month is None or 1 <= self.month <= 12)
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "operator": self.operator.value if self.operator else None,
            "first_date": self.first_date.isoformat() if self.first_date else None,
            "second_date": self.second_date.isoformat() if self.second_date else None,
            "year": self.year,
            "month": self.month,
            "complete": self.is_complete,
        }
