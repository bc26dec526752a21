"""Date facet widget.

Builds the form descriptor for a date facet (operator selector, one or two
date inputs, year/month selectors), validates submitted values and turns
them into the URL token the query layer consumes.

The descriptor is a plain nested dict keyed by element name. Visibility
rules ("states") are keyed to the operator selector's input name and are
evaluated client side.
"""

import copy
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Dict, List, Optional, Sequence

from config import config
from config.constants import (
    CACHE_CONTEXTS,
    DATE_TITLE,
    EMPTY_MONTH_LABEL,
    EMPTY_OPERATOR_LABEL,
    EMPTY_YEAR_LABEL,
    END_DATE_TITLE,
    MONTH_CLASS,
    MONTH_NAMES,
    MSG_FIRST_DATE_REQUIRED,
    MSG_OPERATOR_REQUIRED,
    MSG_SECOND_DATE_BEFORE_FIRST,
    MSG_SECOND_DATE_REQUIRED,
    MSG_YEAR_REQUIRED,
    WIDGET_LIBRARY,
    WRAPPER_CLASS,
    YEAR_CLASS,
)
from config.logging_config import get_logger
from src.facets.availability import YearMonthAvailability, build_year_month_availability
from src.facets.codec import TimezoneLike, encode, get_timezone
from src.facets.interfaces import DateFormatter, IndexReader, TimezoneDateFormatter
from src.facets.models import DateType, FacetDefinition, FilterOperator
from src.facets.resolver import resolve_active_items
from src.facets.state import DateFilterState

logger = get_logger("facets.widget")


@dataclass
class DateFormValues:
    """Values submitted through the date widget form."""
    operator: Optional[str] = None
    first_date: Optional[date] = None
    first_time: Optional[time] = None
    second_date: Optional[date] = None
    second_time: Optional[time] = None
    year: Optional[int] = None
    month: Optional[int] = None


@dataclass(frozen=True)
class ValidationError:
    """A validation message attached to a form element."""
    element: str
    message: str


def input_name(name: str, parents: Sequence[str] = ()) -> str:
    """HTML input name of an element nested under form parents."""
    if not parents:
        return name
    first, *rest = parents
    return first + "[" + "][".join([*rest, name]) + "]"


def _visible_when(selector_name: str, *values: str) -> Dict[str, Any]:
    return {
        "visible": [
            {f':input[name="{selector_name}"]': {"value": value}} for value in values
        ]
    }


def set_title_display_visible(element: Dict[str, Any]) -> Dict[str, Any]:
    """Show the date input's title before the input."""
    element = copy.deepcopy(element)
    element["date"]["title_display"] = "before"
    return element


def set_end_date_title(element: Dict[str, Any]) -> Dict[str, Any]:
    """Label a date input as the end of a range."""
    element = copy.deepcopy(element)
    element["date"]["title"] = END_DATE_TITLE
    return element


def combine_date_time(
    day: Optional[date],
    at: Optional[time],
    date_type: DateType,
    tz: TimezoneLike = None,
) -> Optional[datetime]:
    """Aware datetime of a submitted date (and time, for date-and-time widgets)."""
    if day is None:
        return None
    if date_type is DateType.DATE or at is None:
        at = time.min
    return datetime.combine(day, at.replace(tzinfo=None), tzinfo=get_timezone(tz))


class DateWidget:
    """Widget that filters a facet by one or two dates, or by year and month."""

    def __init__(
        self,
        index: IndexReader,
        formatter: Optional[DateFormatter] = None,
        tz: TimezoneLike = None,
        scan_limit: Optional[int] = None,
    ):
        """
        Args:
            index: Reader used to list the years/months present in the data.
            formatter: Formats default values; defaults to the configured zone.
            tz: Time zone for submitted and displayed dates.
            scan_limit: Cap on the number of indexed values scanned for the
                year/month availability.
        """
        self.index = index
        self.tz = get_timezone(tz)
        self.formatter = formatter or TimezoneDateFormatter(self.tz)
        self.scan_limit = scan_limit or config.facets.year_month_scan_limit

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def build(
        self,
        facet: FacetDefinition,
        active_items: Optional[Sequence[str]] = None,
        parents: Sequence[str] = (),
    ) -> Dict[str, Any]:
        """Build the form descriptor for a facet and its active filter."""
        state = resolve_active_items(active_items, self.tz)
        return self._build_elements(facet, state, parents)

    def build_default_value_form(
        self,
        facet: FacetDefinition,
        preset_values: Optional[Sequence[str]] = None,
        parents: Sequence[str] = (),
    ) -> Dict[str, Any]:
        """Build the descriptor used to configure a default filter value.

        Unlike the public filter, the operator and the first date are
        required.
        """
        build = self.build(facet, preset_values, parents)
        build[f"{facet.id}_op"]["required"] = True
        first_wrapper = build[f"{facet.id}_first_date_wrapper"]
        first_wrapper[f"{facet.id}_first_date"]["required"] = True
        return build

    def get_year_months(self, facet: FacetDefinition) -> YearMonthAvailability:
        """Years and months present in the indexed data for a facet."""
        values = self.index.fetch_field_values(facet.source, facet.field, self.scan_limit)
        return build_year_month_availability(values, self.tz, self.scan_limit)

    def _build_elements(
        self,
        facet: FacetDefinition,
        state: DateFilterState,
        parents: Sequence[str],
    ) -> Dict[str, Any]:
        facet_id = facet.id
        op_name = input_name(f"{facet_id}_op", parents)

        build: Dict[str, Any] = {}
        build[f"{facet_id}_op"] = {
            "type": "select",
            "title": facet.name,
            "name": op_name,
            "options": {op.value: op.label for op in FilterOperator},
            "empty_option": EMPTY_OPERATOR_LABEL,
            "default_value": state.operator.value if state.operator else None,
            "required": False,
        }

        first_date = self._date_element(state.first_date, facet.date_type)
        build[f"{facet_id}_first_date_wrapper"] = {
            "type": "container",
            "tree": True,
            "states": _visible_when(op_name, "lt", "gt", "bt"),
            f"{facet_id}_first_date": set_title_display_visible(first_date),
        }

        # The second date only applies to "in between".
        second_default = None
        if state.operator is FilterOperator.BETWEEN:
            second_default = state.second_date

        second_date = self._date_element(second_default, facet.date_type)
        build[f"{facet_id}_second_date_wrapper"] = {
            "type": "container",
            "tree": True,
            "states": _visible_when(op_name, "bt"),
            f"{facet_id}_second_date": set_end_date_title(set_title_display_visible(second_date)),
        }

        self._build_year_month_filter(build, facet, state, op_name, parents)

        build["cache"] = {"contexts": list(CACHE_CONTEXTS)}
        build["attached"] = {"library": [WIDGET_LIBRARY]}
        return build

    def _date_element(self, default: Optional[datetime], date_type: DateType) -> Dict[str, Any]:
        default_value = None
        if default is not None:
            default_value = {
                "date": self.formatter.format(default, "%Y-%m-%d"),
                "time": (
                    self.formatter.format(default, "%H:%M:%S")
                    if date_type is DateType.DATETIME
                    else None
                ),
            }

        return {
            "type": "datetime",
            "date_element": "date",
            "time_element": "none" if date_type is DateType.DATE else "time",
            "default_value": default_value,
            "required": False,
            "date": {"title": DATE_TITLE, "title_display": "invisible"},
        }

    def _build_year_month_filter(
        self,
        build: Dict[str, Any],
        facet: FacetDefinition,
        state: DateFilterState,
        op_name: str,
        parents: Sequence[str],
    ) -> None:
        year_months = self.get_year_months(facet)
        wrapper = f"{facet.id}_year_month_wrapper"
        year_element = f"{facet.id}_year"
        month_element = f"{facet.id}_month"

        default_year, default_month = self._default_year_month(state)
        if default_year not in year_months:
            default_year = None
        if default_year is None:
            default_month = None

        year_options = {"": EMPTY_YEAR_LABEL}
        year_options.update({str(year): str(year) for year in year_months.years})

        month_options = {"": EMPTY_MONTH_LABEL}
        month_options.update({str(month): name for month, name in MONTH_NAMES.items()})

        year_name = input_name(year_element, [*parents, wrapper])

        build[wrapper] = {
            "type": "container",
            "tree": True,
            "attributes": {
                "class": [WRAPPER_CLASS],
                "data-year-months": year_months.to_json(),
            },
            "states": _visible_when(op_name, "ym"),
            year_element: {
                "type": "select",
                "title": EMPTY_YEAR_LABEL,
                "name": year_name,
                "attributes": {"class": [YEAR_CLASS]},
                "options": year_options,
                "default_value": default_year,
            },
            month_element: {
                "type": "select",
                "title": EMPTY_MONTH_LABEL,
                "name": input_name(month_element, [*parents, wrapper]),
                "attributes": {"class": [MONTH_CLASS]},
                "options": month_options,
                "default_value": default_month,
                "states": {"visible": [{f':input[name="{year_name}"]': {"filled": True}}]},
            },
        }

    def _default_year_month(self, state: DateFilterState):
        """Year and month the year/month selectors start with."""
        if state.operator is FilterOperator.YEAR_MONTH:
            return state.year, state.month
        if state.first_date is None:
            return None, None

        start = state.first_date.astimezone(self.tz)
        month = None
        if state.second_date is not None:
            end = state.second_date.astimezone(self.tz)
            if (start.year, start.month) == (end.year, end.month):
                month = start.month
        return start.year, month

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def validate(
        self,
        facet_id: str,
        values: DateFormValues,
        date_type: DateType = DateType.DATE,
        require_value: bool = False,
    ) -> List[ValidationError]:
        """
        Validate submitted values.

        Args:
            facet_id: Facet the values belong to; errors are keyed by its
                element names.
            values: Submitted values.
            date_type: Whether submitted times are taken into account.
            require_value: Whether a complete filter is mandatory (default
                value forms).

        Returns:
            Validation errors, empty when the values are acceptable.
        """
        errors = []
        operator = FilterOperator.from_code(values.operator)

        if operator is None:
            if require_value:
                errors.append(ValidationError(f"{facet_id}_op", MSG_OPERATOR_REQUIRED))
            return errors

        first = combine_date_time(values.first_date, values.first_time, date_type, self.tz)

        if require_value:
            if operator is FilterOperator.YEAR_MONTH:
                if values.year is None:
                    errors.append(ValidationError(f"{facet_id}_year", MSG_YEAR_REQUIRED))
            elif first is None:
                errors.append(ValidationError(f"{facet_id}_first_date", MSG_FIRST_DATE_REQUIRED))

        if operator is not FilterOperator.BETWEEN:
            return errors

        second = combine_date_time(values.second_date, values.second_time, date_type, self.tz)
        if second is None:
            errors.append(ValidationError(f"{facet_id}_second_date", MSG_SECOND_DATE_REQUIRED))
        elif first is not None and second < first:
            errors.append(ValidationError(f"{facet_id}_second_date", MSG_SECOND_DATE_BEFORE_FIRST))

        return errors

    def prepare_value_for_url(self, facet: FacetDefinition, values: DateFormValues) -> List[str]:
        """
        Turn submitted values into the facet's URL values.

        Returns:
            A single token, or an empty list when the selection does not
            amount to a filter yet.
        """
        operator = FilterOperator.from_code(values.operator)
        if operator is None:
            return []

        if operator is FilterOperator.YEAR_MONTH:
            token = encode(operator, year=values.year, month=values.month, tz=self.tz)
        else:
            dates = [combine_date_time(values.first_date, values.first_time, facet.date_type, self.tz)]
            if operator is FilterOperator.BETWEEN:
                dates.append(
                    combine_date_time(values.second_date, values.second_time, facet.date_type, self.tz)
                )
            token = encode(operator, dates, tz=self.tz)

        if token is None:
            logger.debug(f"No filter value for facet {facet.id} with operator {operator.value}")
            return []
        return [token]
