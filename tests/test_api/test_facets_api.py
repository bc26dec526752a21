"""Tests for facets API endpoints."""

BETWEEN_MARCH = "bt|2024-03-01T00:00:00+00:00|2024-03-31T00:00:00+00:00"


class TestListFacets:
    """Tests for GET /api/facets endpoint."""

    def test_list_facets(self, client):
        response = client.get("/api/facets")
        assert response.status_code == 200

        facets = {f["id"]: f for f in response.json()}
        assert set(facets) == {"created", "published", "news_date"}
        assert facets["created"]["source"] == "list_facet_source:node:content_type_one"
        assert facets["published"]["date_type"] == "datetime"


class TestWidget:
    """Tests for GET /api/facets/{id}/widget endpoint."""

    def test_widget_default(self, client):
        """Test an inactive facet renders an empty widget."""
        response = client.get("/api/facets/created/widget")
        assert response.status_code == 200

        data = response.json()
        assert data["created_op"]["default_value"] is None
        assert data["cache"]["contexts"] == ["url.query_args", "url.path"]

    def test_widget_active_filter(self, client):
        """Test the active filter is read from the facet's query parameter."""
        response = client.get("/api/facets/created/widget", params={"created": BETWEEN_MARCH})
        assert response.status_code == 200

        data = response.json()
        assert data["created_op"]["default_value"] == "bt"
        first = data["created_first_date_wrapper"]["created_first_date"]
        assert first["default_value"]["date"] == "2024-03-01"
        year_month = data["created_year_month_wrapper"]
        assert year_month["created_year"]["default_value"] == 2024
        assert year_month["created_month"]["default_value"] == 3

    def test_widget_parents(self, client):
        response = client.get("/api/facets/created/widget", params={"parents": "filters"})
        assert response.json()["created_op"]["name"] == "filters[created_op]"

    def test_widget_malformed_token(self, client):
        """Test a tampered URL renders the empty widget."""
        response = client.get("/api/facets/created/widget", params={"created": "gt|yesterday"})
        assert response.status_code == 200
        assert response.json()["created_op"]["default_value"] is None

    def test_widget_out_of_range_token(self, client):
        """Test dates that cannot be shown in the configured zone are discarded."""
        for token in ("gt|0001-01-01T00:00:00+05:00", "lt|9999-12-31T23:59:59-05:00"):
            response = client.get("/api/facets/created/widget", params={"created": token})
            assert response.status_code == 200
            assert response.json()["created_op"]["default_value"] is None

    def test_widget_not_cached(self, client):
        response = client.get("/api/facets/created/widget")
        assert response.headers["cache-control"] == "no-cache"

    def test_unknown_facet(self, client):
        response = client.get("/api/facets/missing/widget")
        assert response.status_code == 404


class TestDefaultValueForm:
    """Tests for GET /api/facets/{id}/default-value-form endpoint."""

    def test_required_elements(self, client):
        response = client.get(
            "/api/facets/created/default-value-form",
            params={"value": "gt|2024-01-15T00:00:00+00:00"},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["created_op"]["required"] is True
        assert data["created_op"]["default_value"] == "gt"
        assert data["created_first_date_wrapper"]["created_first_date"]["required"] is True


class TestState:
    """Tests for GET /api/facets/{id}/state endpoint."""

    def test_year_month_state(self, client):
        response = client.get(
            "/api/facets/created/state",
            params={"created": "ym|2024-02-01T00:00:00+00:00|2024-02-29T23:59:59+00:00"},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["operator"] == "ym"
        assert data["year"] == 2024
        assert data["month"] == 2
        assert data["complete"] is True

    def test_plus_sent_as_space(self, client):
        """Test an unescaped '+' in the offset still resolves."""
        response = client.get("/api/facets/created/state?created=gt|2024-03-10T00:00:00+00:00")
        data = response.json()
        assert data["operator"] == "gt"
        assert data["first_date"] == "2024-03-10T00:00:00+00:00"

    def test_no_filter(self, client):
        data = client.get("/api/facets/created/state").json()
        assert data["operator"] is None
        assert data["complete"] is False


class TestYearMonths:
    """Tests for GET /api/facets/{id}/year-months endpoint."""

    def test_year_months(self, client):
        response = client.get("/api/facets/created/year-months")
        assert response.status_code == 200

        data = response.json()
        assert data["facet_id"] == "created"
        assert data["year_months"] == {"2023": {"5": 5}, "2024": {"1": 1, "3": 3}}
        assert data["truncated"] is False

    def test_other_source(self, client):
        """Test availability is scoped to the facet's bundle."""
        data = client.get("/api/facets/news_date/year-months").json()
        assert data["year_months"] == {"2022": {"12": 12}, "2024": {"6": 6}}

    def test_cacheable(self, client):
        response = client.get("/api/facets/created/year-months")
        assert response.headers["cache-control"] == "public, max-age=300"


class TestSubmit:
    """Tests for POST /api/facets/{id}/submit endpoint."""

    def test_submit_between(self, client):
        response = client.post(
            "/api/facets/created/submit",
            json={"operator": "bt", "first_date": "2024-03-01", "second_date": "2024-03-31"},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["token"] == BETWEEN_MARCH
        assert data["query"] == {"created": BETWEEN_MARCH}

    def test_submit_year_month(self, client):
        response = client.post(
            "/api/facets/created/submit",
            json={"operator": "ym", "year": 2024, "month": 2},
        )
        assert response.json()["token"] == (
            "ym|2024-02-01T00:00:00+00:00|2024-02-29T23:59:59+00:00"
        )

    def test_submit_datetime(self, client):
        response = client.post(
            "/api/facets/published/submit",
            json={"operator": "gt", "first_date": "2024-03-10", "first_time": "10:30:00"},
        )
        assert response.json()["token"] == "gt|2024-03-10T10:30:00+00:00"

    def test_submit_reversed_range(self, client):
        """Test a range ending before it starts is rejected."""
        response = client.post(
            "/api/facets/created/submit",
            json={"operator": "bt", "first_date": "2024-03-10", "second_date": "2024-03-05"},
        )
        assert response.status_code == 422
        assert response.json()["detail"] == [{
            "element": "created_second_date",
            "message": "The second date cannot be before the first date.",
        }]

    def test_submit_empty(self, client):
        """Test an empty public filter clears the facet."""
        response = client.post("/api/facets/created/submit", json={})
        assert response.status_code == 200
        assert response.json() == {"token": None, "query": {}}

    def test_submit_default_value_required(self, client):
        response = client.post(
            "/api/facets/created/submit",
            params={"default_value": True},
            json={"operator": "gt"},
        )
        assert response.status_code == 422
        assert response.json()["detail"][0]["element"] == "created_first_date"

    def test_submit_invalid_month(self, client):
        response = client.post(
            "/api/facets/created/submit",
            json={"operator": "ym", "year": 2024, "month": 13},
        )
        assert response.status_code == 422
