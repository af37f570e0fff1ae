"""Field-by-field copy between ``CustomerDTO`` and the ``Customer`` model."""

from __future__ import annotations

from typing import Iterable, List

from modules.customers.dtos import CustomerDTO
from modules.customers.models import Customer

_FIELDS = ("name", "email", "phone_number")


def to_domain(entity: Customer) -> CustomerDTO:
    # Structural copy: rows already passed validation on the way in.
    return CustomerDTO.model_construct(
        id=entity.id,
        name=entity.name,
        email=entity.email,
        phoneNumber=entity.phone_number,
    )


def to_domain_list(entities: Iterable[Customer]) -> List[CustomerDTO]:
    return [to_domain(entity) for entity in entities]


def to_entity(dto: CustomerDTO) -> Customer:
    """Build an unsaved ``Customer`` carrying the DTO's id (if any)."""
    return Customer(
        id=dto.id,
        name=dto.name,
        email=dto.email,
        phone_number=dto.phone_number,
    )


def update_entity_from_domain(dto: CustomerDTO, entity: Customer) -> None:
    """Copy the mutable fields onto ``entity`` in place.

    ``entity.id`` and the model's ORM state are left untouched.
    """
    for name in _FIELDS:
        setattr(entity, name, getattr(dto, name))


def update_domain_from_entity(entity: Customer, dto: CustomerDTO) -> CustomerDTO:
    """Return a copy of ``dto`` with every field, ``id`` included, taken from ``entity``."""
    return dto.model_copy(
        update={"id": entity.id, **{name: getattr(entity, name) for name in _FIELDS}}
    )
