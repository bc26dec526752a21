"""Tests for the date facet data model."""

import pytest

from src.facets import (
    DateType,
    FacetDefinition,
    FacetSource,
    FilterOperator,
    load_facet_definitions,
)


class TestFilterOperator:
    """Tests for FilterOperator."""

    def test_from_code(self):
        assert FilterOperator.from_code("bt") is FilterOperator.BETWEEN
        assert FilterOperator.from_code("eq") is None
        assert FilterOperator.from_code(None) is None

    def test_value_counts(self):
        """Test how many timestamps each operator carries."""
        assert FilterOperator.AFTER.value_count == 1
        assert FilterOperator.BEFORE.value_count == 1
        assert FilterOperator.BETWEEN.value_count == 2
        assert FilterOperator.YEAR_MONTH.value_count == 2

    def test_labels(self):
        assert FilterOperator.YEAR_MONTH.label == "By year, month"
        assert FilterOperator.BETWEEN.comparison == "between"


class TestFacetSource:
    """Tests for FacetSource."""

    def test_from_id(self):
        source = FacetSource.from_id("list_facet_source:node:news")
        assert source == FacetSource("node", "news")
        assert source.id == "list_facet_source:node:news"
        assert source.datasource == "entity:node"

    @pytest.mark.parametrize("source_id", [
        "node:news",
        "other_source:node:news",
        "list_facet_source:node:",
        "list_facet_source:node:news:extra",
    ])
    def test_invalid_id(self, source_id):
        with pytest.raises(ValueError):
            FacetSource.from_id(source_id)


class TestFacetDefinition:
    """Tests for FacetDefinition."""

    def test_from_dict(self):
        facet = FacetDefinition.from_dict({
            "id": "published",
            "name": "Published",
            "source": "list_facet_source:node:content_type_one",
            "field": "published",
            "widget": {"date_type": "datetime"},
        })
        assert facet.url_alias == "published"
        assert facet.date_type is DateType.DATETIME
        assert facet.source.bundle == "content_type_one"

    def test_defaults(self):
        """Test name, alias and date type defaults."""
        facet, = load_facet_definitions([{
            "id": "created",
            "source": "list_facet_source:node:page",
            "field": "created",
        }])
        assert facet.name == "created"
        assert facet.url_alias == "created"
        assert facet.date_type is DateType.DATE
