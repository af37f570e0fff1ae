"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and database exceptions (e.g. ``IntegrityError`` on the
unique email index) propagate unchanged for the Service Layer to translate.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def find_all_ordered_by_name(self) -> List[Customer]:
        return list(Customer.objects.order_by("name", "id"))

    def find_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, TypeError, OverflowError, ValidationError):
            return None

    def find_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve the first customer (lowest id) with this email address."""
        return Customer.objects.filter(email=email).order_by("id").first()

    def find_all_by_name(self, name: str) -> List[Customer]:
        return list(Customer.objects.filter(name=name).order_by("id"))

    @transaction.atomic
    def create(self, entity: Customer) -> Customer:
        """Insert a customer; runs in a savepoint when nested."""
        entity.save(force_insert=True)
        logger.info("customer.created", customer_id=entity.id)
        return entity

    @transaction.atomic
    def update(self, entity: Customer) -> Customer:
        """Write a customer by identity (inserted if the row has vanished)."""
        if entity.id is None:
            raise ValueError("Cannot update a Customer without an id.")
        entity.save()
        logger.info("customer.updated", customer_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, entity: Customer) -> Customer:
        """Delete a customer by identity.

        ``entity`` may be a detached instance built from a DTO; only its
        ``id`` is needed.  Without an ``id`` nothing is deleted.
        """
        if entity.id is None:
            logger.info("customer.delete_skipped", reason="missing_id")
            return entity
        customer_id = entity.id
        Customer.objects.filter(id=customer_id).delete()
        logger.info("customer.deleted", customer_id=customer_id)
        return entity
