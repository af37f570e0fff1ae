from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.customers.area_codes import SettingsAreaCodeLookup
from modules.customers.dtos import CustomerDTO
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from shared.domain.result import ErrorKind

SEED_CUSTOMERS = [
    ("Ana Souza", "ana@example.com", "1914960000"),
    ("Bruno Lima", "bruno@example.com", "2079460000"),
    ("Carla Mendes", "carla@example.com", "1614960000"),
    ("Daniel Costa", "daniel@example.com", "1914960123"),
    ("Helena Ferreira", "helena@example.com", "2079460456"),
]


class Command(BaseCommand):
    help = "Seed database with development customers."

    def handle(self, *args, **options):
        self.stdout.write("Creating customers...")
        service = CustomerService(
            repository=CustomerDjangoRepository(),
            area_codes=SettingsAreaCodeLookup.from_settings(),
        )

        created = skipped = 0
        for name, email, phone_number in SEED_CUSTOMERS:
            result = service.create(
                CustomerDTO(name=name, email=email, phone_number=phone_number)
            )
            if result.ok:
                created += 1
            elif result.error.kind == ErrorKind.UNIQUE_EMAIL:
                skipped += 1
            else:
                self.stderr.write(f"{email}: {result.error.message}")

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: customers={created}, already_present={skipped}"
            )
        )
