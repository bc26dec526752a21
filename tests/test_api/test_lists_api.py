"""Tests for list pages API endpoints."""


class TestListItems:
    """Tests for GET /api/lists/{entity_type}/{bundle} endpoint."""

    def test_list_default(self, client):
        """Test listing items with default parameters."""
        response = client.get("/api/lists/node/content_type_one")
        assert response.status_code == 200

        data = response.json()
        assert [item["item_id"] for item in data["items"]] == ["n4", "n3", "n2", "n1"]
        assert data["active_filters"] == {}
        assert data["pagination"] == {"page": 1, "page_size": 10, "total": 4, "total_pages": 1}

    def test_list_pagination(self, client):
        response = client.get("/api/lists/node/content_type_one", params={"page": 2, "page_size": 3})
        data = response.json()
        assert [item["item_id"] for item in data["items"]] == ["n1"]
        assert data["pagination"]["total_pages"] == 2

    def test_filter_after(self, client):
        """Test a date facet filters the list."""
        response = client.get(
            "/api/lists/node/content_type_one",
            params={"created": "gt|2024-03-09T00:00:00+00:00"},
        )
        data = response.json()
        assert {item["item_id"] for item in data["items"]} == {"n3", "n4"}
        assert data["active_filters"] == {"created": "gt|2024-03-09T00:00:00+00:00"}

    def test_filter_year_month(self, client):
        response = client.get(
            "/api/lists/node/content_type_one",
            params={"created": "ym|2024-01-01T00:00:00+00:00|2024-01-31T23:59:59+00:00"},
        )
        assert [item["item_id"] for item in response.json()["items"]] == ["n2"]

    def test_combined_facets(self, client):
        response = client.get(
            "/api/lists/node/content_type_one",
            params={
                "created": "ym|2024-01-01T00:00:00+00:00|2024-12-31T23:59:59+00:00",
                "published": "gt|2024-01-01T00:00:00+00:00",
            },
        )
        assert [item["item_id"] for item in response.json()["items"]] == ["n2"]

    def test_incomplete_filter_ignored(self, client):
        """Test malformed or incomplete tokens do not filter."""
        response = client.get(
            "/api/lists/node/content_type_one",
            params={"created": "bt|2024-03-31T00:00:00+00:00|2024-03-01T00:00:00+00:00"},
        )
        data = response.json()
        assert data["pagination"]["total"] == 4
        assert data["active_filters"] == {}

    def test_out_of_range_filter_ignored(self, client):
        """Test a span at the edge of the datetime range does not filter."""
        response = client.get(
            "/api/lists/node/content_type_one",
            params={"created": "ym|0001-01-01T00:00:00+05:00|0001-01-31T23:59:59+05:00"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["pagination"]["total"] == 4
        assert data["active_filters"] == {}

    def test_facet_of_other_bundle_ignored(self, client):
        """Test only the bundle's own facets apply."""
        response = client.get(
            "/api/lists/node/news",
            params={"created": "gt|2030-01-01T00:00:00+00:00"},
        )
        assert response.json()["pagination"]["total"] == 2

    def test_news_facet(self, client):
        response = client.get(
            "/api/lists/node/news",
            params={"news_date": "lt|2023-01-01T00:00:00+00:00"},
        )
        assert [item["item_id"] for item in response.json()["items"]] == ["news1"]

    def test_page_size_capped(self, client):
        response = client.get("/api/lists/node/content_type_one", params={"page_size": 500})
        assert response.json()["pagination"]["page_size"] == 100


class TestAppEndpoints:
    """Tests for root, health and static endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["endpoints"]["facets"] == "/api/facets"

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["indexed_items"] == 6

    def test_widget_script(self, client):
        response = client.get("/static/date_widget.js")
        assert response.status_code == 200
        assert "oe-list-pages-date-widget-wrapper" in response.text
