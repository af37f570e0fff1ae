"""Telephone area-code look-up used before a customer is written.

The area code is the leading ``length`` digits of ``phoneNumber``.  The
settings-backed implementation accepts every code when no known codes are
configured.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from django.conf import settings


class IAreaCodeLookup(ABC):
    @abstractmethod
    def is_valid(self, phone_number: str) -> bool:
        """``True`` when the phone number starts with a known area code."""


class SettingsAreaCodeLookup(IAreaCodeLookup):
    """Area codes read from ``CUSTOMER_AREA_CODES``."""

    def __init__(self, area_codes: Iterable[str], length: int = 3) -> None:
        self._area_codes = frozenset(code.strip() for code in area_codes if code.strip())
        self._length = length

    @classmethod
    def from_settings(cls) -> SettingsAreaCodeLookup:
        return cls(
            area_codes=settings.CUSTOMER_AREA_CODES,
            length=settings.CUSTOMER_AREA_CODE_LENGTH,
        )

    def area_code(self, phone_number: str) -> str:
        return phone_number[: self._length]

    def is_valid(self, phone_number: str) -> bool:
        if not self._area_codes:
            return True
        return self.area_code(phone_number) in self._area_codes
