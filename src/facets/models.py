"""Data model for list page date facets."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from config.constants import OPERATOR_LABELS


class FilterOperator(str, Enum):
    """Comparison operators offered by the date widget."""
    AFTER = "gt"
    BEFORE = "lt"
    BETWEEN = "bt"
    YEAR_MONTH = "ym"

    @property
    def label(self) -> str:
        return OPERATOR_LABELS[self.value]

    @property
    def value_count(self) -> int:
        """Number of timestamps the operator carries in a URL token."""
        if self in (FilterOperator.AFTER, FilterOperator.BEFORE):
            return 1
        return 2

    @property
    def comparison(self) -> str:
        """Comparison predicate handed to the query layer."""
        if self is FilterOperator.AFTER:
            return ">"
        if self is FilterOperator.BEFORE:
            return "<"
        return "between"

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["FilterOperator"]:
        """Look up an operator by code, None when missing or unknown."""
        if not code:
            return None
        try:
            return cls(code)
        except ValueError:
            return None


class DateType(str, Enum):
    """Whether the widget collects a time of day."""
    DATE = "date"
    DATETIME = "datetime"


@dataclass(frozen=True)
class DateWidgetConfig:
    """Per-facet widget configuration."""
    date_type: DateType = DateType.DATE

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DateWidgetConfig":
        data = data or {}
        return cls(date_type=DateType(data.get("date_type", DateType.DATE.value)))


@dataclass(frozen=True)
class FacetSource:
    """The entity type and bundle a facet lists."""
    entity_type: str
    bundle: str

    PREFIX = "list_facet_source"

    @classmethod
    def from_id(cls, source_id: str) -> "FacetSource":
        """Parse a source id of the form list_facet_source:<entity_type>:<bundle>."""
        parts = source_id.split(":")
        if len(parts) != 3 or parts[0] != cls.PREFIX or not all(parts[1:]):
            raise ValueError(f"Invalid facet source id: {source_id!r}")
        return cls(entity_type=parts[1], bundle=parts[2])

    @property
    def id(self) -> str:
        return f"{self.PREFIX}:{self.entity_type}:{self.bundle}"

    @property
    def datasource(self) -> str:
        return f"entity:{self.entity_type}"


@dataclass
class FacetDefinition:
    """A date facet bound to an index field."""
    id: str
    name: str
    field: str
    source: FacetSource
    url_alias: str = ""
    widget: DateWidgetConfig = field(default_factory=DateWidgetConfig)

    def __post_init__(self):
        if not self.url_alias:
            self.url_alias = self.id

    @property
    def date_type(self) -> DateType:
        return self.widget.date_type

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FacetDefinition":
        """Create from a facets.yaml entry."""
        return cls(
            id=data["id"],
            name=data.get("name") or data["id"],
            field=data["field"],
            source=FacetSource.from_id(data["source"]),
            url_alias=data.get("url_alias") or data["id"],
            widget=DateWidgetConfig.from_dict(data.get("widget")),
        )


def load_facet_definitions(entries: Iterable[Dict[str, Any]]) -> List[FacetDefinition]:
    """Build facet definitions from loaded configuration entries."""
    return [FacetDefinition.from_dict(entry) for entry in entries]
