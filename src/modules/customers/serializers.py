"""Customer DRF serializer for API output.

Renders ``CustomerDTO`` instances (attribute access) into the wire shape
and documents that shape for drf-spectacular.  Input validation lives in
``CustomerDTO``.
"""

from __future__ import annotations

from rest_framework import serializers


class CustomerSerializer(serializers.Serializer):
    """Wire representation of a Customer."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(max_length=25)
    email = serializers.EmailField()
    phoneNumber = serializers.CharField(source="phone_number", max_length=12)
