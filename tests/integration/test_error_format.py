"""Integration tests for standardized error responses."""

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_not_found_has_standard_format(self, api_client):
        response = api_client.get("/customers/424242")
        assert response.status_code == 404
        data = response.json()
        assert data["type"] == "client_error"
        assert isinstance(data["errors"], list)
        assert data["errors"]
        assert "code" in data["errors"][0]
        assert "detail" in data["errors"][0]

    def test_malformed_json_has_standard_format(self, api_client):
        response = api_client.post("/customers", data="{", content_type="application/json")
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "parse_error"

    def test_unsupported_media_type(self, api_client):
        response = api_client.post("/customers", data={"name": "Form Post"})
        assert response.status_code == 415
        assert response.json()["errors"][0]["code"] == "unsupported_media_type"

    def test_method_not_allowed(self, api_client):
        response = api_client.delete("/customers")
        assert response.status_code == 405
        assert response.json()["type"] == "client_error"

    def test_field_errors_are_flat_map(self, api_client):
        response = api_client.post("/customers", data={}, format="json")
        assert response.status_code == 400
        data = response.json()
        assert "type" not in data
        assert all(isinstance(message, str) for message in data.values())
