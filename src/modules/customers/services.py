"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.  Every operation
returns a ``Result``; domain failures never escape as exceptions.

Business rules enforced here:
- Email must be unique.  Checked before writing, and an ``IntegrityError``
  from the unique index is translated into the same failure.  The pre-check
  alone is racy under concurrent writers; the index is the backstop.
- The phone number's area code must be known (``IAreaCodeLookup``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import DatabaseError, IntegrityError, transaction

from modules.customers import mapper
from shared.domain.result import ErrorKind, Result

if TYPE_CHECKING:
    from modules.customers.area_codes import IAreaCodeLookup
    from modules.customers.dtos import CustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

AREA_CODE_MESSAGE = (
    "The telephone area code provided is not recognised, please provide another"
)
UNEXPECTED_MESSAGE = "An unexpected error occurred whilst processing the request"


class CustomerService:
    """Application service for Customer use-cases.

    Receives its collaborators via constructor injection (DIP).  Without an
    ``area_codes`` look-up, phone numbers are not checked against area codes.
    """

    def __init__(
        self,
        repository: ICustomerRepository,
        area_codes: Optional[IAreaCodeLookup] = None,
    ) -> None:
        self._repo = repository
        self._area_codes = area_codes

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all_ordered_by_name(self) -> Result[List[CustomerDTO]]:
        return Result.success(mapper.to_domain_list(self._repo.find_all_ordered_by_name()))

    def find_by_id(self, id: int) -> Result[CustomerDTO]:
        customer = self._repo.find_by_id(id)
        if customer is None:
            return Result.failure(
                ErrorKind.NOT_FOUND, f"No Customer with the id {id} was found!"
            )
        logger.info("customer.retrieved", customer_id=id)
        return Result.success(mapper.to_domain(customer))

    def find_by_email(self, email: str) -> Result[CustomerDTO]:
        customer = self._repo.find_by_email(email)
        if customer is None:
            return Result.failure(
                ErrorKind.NOT_FOUND, f"No Customer with the email {email} was found!"
            )
        return Result.success(mapper.to_domain(customer))

    def find_all_by_name(self, name: str) -> Result[List[CustomerDTO]]:
        return Result.success(mapper.to_domain_list(self._repo.find_all_by_name(name)))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, customer: CustomerDTO) -> Result[CustomerDTO]:
        """Create a customer; any client-supplied ``id`` is discarded.

        Failures: ``UNIQUE_EMAIL``, ``INVALID_AREA_CODE``, ``UNEXPECTED``.
        """
        customer = customer.model_copy(update={"id": None})
        log = logger.bind(email=customer.email)
        unique_email = Result.failure(
            ErrorKind.UNIQUE_EMAIL,
            "Email already registered.",
            {
                "email": f"The email {customer.email} is already used, "
                "please use a unique email"
            },
        )

        with transaction.atomic():
            if self._repo.find_by_email(customer.email) is not None:
                log.warning("customer.duplicate_email")
                return unique_email

            if not self._area_code_is_valid(customer.phone_number):
                log.warning("customer.invalid_area_code")
                return self._invalid_area_code()

            try:
                entity = self._repo.create(mapper.to_entity(customer))
            except IntegrityError:
                log.warning("customer.duplicate_email", source="unique_index")
                return unique_email
            except DatabaseError:
                log.exception("customer.create_failed")
                return Result.failure(ErrorKind.UNEXPECTED, UNEXPECTED_MESSAGE)

        return Result.success(mapper.update_domain_from_entity(entity, customer))

    def update(self, customer: CustomerDTO) -> Result[CustomerDTO]:
        """Replace every field of an existing customer except ``id``.

        Failures: ``FIELD_VALIDATION`` (no id), ``NOT_FOUND``,
        ``UNIQUE_EMAIL``, ``INVALID_AREA_CODE``, ``UNEXPECTED``.
        """
        if customer.id is None:
            return Result.failure(
                ErrorKind.FIELD_VALIDATION,
                "Customer id is required for an update.",
                {"id": "The Customer ID is required"},
            )

        log = logger.bind(customer_id=customer.id)
        unique_email = Result.failure(
            ErrorKind.UNIQUE_EMAIL,
            "Email already registered.",
            {"email": "That email is already used, please use a unique email"},
        )

        with transaction.atomic():
            entity = self._repo.find_by_id(customer.id)
            if entity is None:
                return Result.failure(
                    ErrorKind.NOT_FOUND,
                    f"No Customer with the id {customer.id} was found!",
                )

            existing = self._repo.find_by_email(customer.email)
            if existing is not None and existing.id != customer.id:
                log.warning("customer.duplicate_email")
                return unique_email

            if not self._area_code_is_valid(customer.phone_number):
                log.warning("customer.invalid_area_code")
                return self._invalid_area_code()

            mapper.update_entity_from_domain(customer, entity)
            try:
                entity = self._repo.update(entity)
            except IntegrityError:
                log.warning("customer.duplicate_email", source="unique_index")
                return unique_email
            except DatabaseError:
                log.exception("customer.update_failed")
                return Result.failure(ErrorKind.UNEXPECTED, UNEXPECTED_MESSAGE)

        return Result.success(mapper.to_domain(entity))

    def delete(self, customer: CustomerDTO) -> Result[CustomerDTO]:
        """Delete a customer previously loaded in another unit of work."""
        with transaction.atomic():
            try:
                self._repo.delete(mapper.to_entity(customer))
            except DatabaseError:
                logger.exception("customer.delete_failed", customer_id=customer.id)
                return Result.failure(ErrorKind.UNEXPECTED, UNEXPECTED_MESSAGE)
        return Result.success(customer)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _area_code_is_valid(self, phone_number: str) -> bool:
        if self._area_codes is None:
            return True
        return self._area_codes.is_valid(phone_number)

    @staticmethod
    def _invalid_area_code() -> Result[CustomerDTO]:
        return Result.failure(
            ErrorKind.INVALID_AREA_CODE,
            AREA_CODE_MESSAGE,
            {"area_code": AREA_CODE_MESSAGE},
        )
