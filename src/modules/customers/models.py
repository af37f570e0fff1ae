"""Customer model.

Business rules implemented:
- ``email`` is unique across all customers (database unique index).  The
  Service Layer pre-checks it as well, but the index is the authoritative
  backstop.
- ``name`` holds letters and spaces only, with at least one letter;
  ``phone_number`` digits only.
"""

from __future__ import annotations

import re

from django.core.validators import RegexValidator
from django.db import models

NAME_PATTERN = re.compile(r"^(?=.*[A-Za-z])[A-Za-z ]{2,25}$")
PHONE_NUMBER_PATTERN = re.compile(r"^[0-9]{10,12}$")

NAME_MESSAGE = "Please use a name without numbers or specials"
PHONE_NUMBER_MESSAGE = "Please use a phone number of 10 to 12 digits"


class Customer(models.Model):
    """Customer aggregate root.

    ``id`` is assigned by the database on insert and never changes.
    """

    name = models.CharField(
        max_length=25,
        validators=[RegexValidator(NAME_PATTERN, NAME_MESSAGE)],
    )
    email = models.EmailField(max_length=254, unique=True)
    phone_number = models.CharField(
        max_length=12,
        validators=[RegexValidator(PHONE_NUMBER_PATTERN, PHONE_NUMBER_MESSAGE)],
    )

    class Meta:
        db_table = "customers"
        ordering = ["name", "id"]
        indexes = [
            models.Index(fields=["name"], name="customers_name_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
