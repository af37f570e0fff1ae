import pytest

from rest_framework.test import APIClient

from modules.customers.models import Customer


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_customer():
    """Factory persisting a Customer with sane defaults."""

    def _make(**overrides) -> Customer:
        defaults = {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "phone_number": "1914960000",
        }
        defaults.update(overrides)
        return Customer.objects.create(**defaults)

    return _make
