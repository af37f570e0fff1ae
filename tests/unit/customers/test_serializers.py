"""Unit tests for the Customer output serializer."""

from __future__ import annotations

import pytest

from modules.customers.dtos import CustomerDTO
from modules.customers.serializers import CustomerSerializer

pytestmark = pytest.mark.unit


def _dto(**overrides) -> CustomerDTO:
    fields = {
        "id": 4,
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone_number": "1914960000",
    }
    fields.update(overrides)
    return CustomerDTO(**fields)


class TestSerializerFields:
    def test_expected_fields(self):
        assert set(CustomerSerializer().fields) == {"id", "name", "email", "phoneNumber"}

    def test_id_is_read_only(self):
        assert CustomerSerializer().fields["id"].read_only is True


class TestSerialization:
    def test_serializes_dto(self):
        assert CustomerSerializer(_dto()).data == {
            "id": 4,
            "name": "Jane Doe",
            "email": "jane@example.com",
            "phoneNumber": "1914960000",
        }

    def test_serializes_many(self):
        data = CustomerSerializer([_dto(id=1), _dto(id=2)], many=True).data
        assert [item["id"] for item in data] == [1, 2]
