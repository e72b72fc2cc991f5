from __future__ import annotations

from decimal import Decimal

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand

from modules.accounts.dtos import AccountDTO
from modules.accounts.repositories.django_repository import AccountDjangoRepository
from modules.accounts.services import AccountService
from modules.products.dtos import ProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

CATALOG = [
    ("Space Dust", "IPA", "123123", 12, Decimal("10.00")),
    ("Galaxy Cat", "Pale Ale", "12356222", 392, Decimal("12.99")),
    ("Sunshine City", "IPA", "12356", 144, Decimal("13.99")),
    ("Crank", "Pale Ale", "8380495518", 48, Decimal("9.99")),
    ("Mango Bobs", "Lager", "873458798", 96, Decimal("11.49")),
]

ACCOUNTS = [
    "Ana Souza",
    "Bruno Lima",
    "Carla Mendes",
]


class Command(BaseCommand):
    help = "Seed the store with sample products and accounts (idempotent by name)."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        products_created = async_to_sync(self._seed_products)()
        accounts_created = async_to_sync(self._seed_accounts)()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"products={products_created}, "
                f"accounts={accounts_created}"
            )
        )

    async def _seed_products(self) -> int:
        service = ProductService(repository=ProductDjangoRepository())
        created = 0
        for name, style, upc, quantity, price in CATALOG:
            if await service.find_first_by_name(name) is not None:
                continue
            await service.create(
                ProductDTO(
                    name=name,
                    style=style,
                    upc=upc,
                    quantity_on_hand=quantity,
                    price=price,
                )
            )
            created += 1
        return created

    async def _seed_accounts(self) -> int:
        service = AccountService(repository=AccountDjangoRepository())
        created = 0
        for name in ACCOUNTS:
            if await service.find_first_by_name(name) is not None:
                continue
            await service.create(AccountDTO(name=name))
            created += 1
        return created
