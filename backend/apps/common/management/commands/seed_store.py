from decimal import Decimal

from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from django.core.management.color import no_style
from django.db import connection, transaction

from apps.catalog.models import Category, Product
from apps.common import get_logger
from apps.users.models import User

logger = get_logger(__name__).bind(component="common", layer="command")

# Category ids are fixed; products and clients refer to them by number
CATEGORIES = [
    (1, "Electronics"),
    (2, "Books"),
    (3, "Clothing"),
    (4, "Home & Kitchen"),
]

PRODUCTS = [
    (1, "Wireless Mouse", "24.99", "Two-button optical mouse with USB receiver", 1),
    (2, "Mechanical Keyboard", "89.00", "Tenkeyless board with brown switches", 1),
    (3, "27in Monitor", "219.50", "IPS panel, 2560x1440, 75Hz", 1),
    (4, "The Pragmatic Programmer", "39.95", "20th anniversary edition", 2),
    (5, "Designing Data-Intensive Applications", "45.00", "", 2),
    (6, "Rain Jacket", "59.99", "Lightweight hooded windbreaker", 3),
    (7, "Cotton T-Shirt", "12.00", "Crew neck, regular fit", 3),
    (8, "Chef's Knife", "34.90", "8 inch stainless steel blade", 4),
    (9, "French Press", "27.25", "1 litre borosilicate glass", 4),
]

USERS = [
    (1, "Ada Lovelace", "ada@example.com", "analytical"),
    (2, "Grace Hopper", "grace@example.com", "cobol1959"),
    (3, "Alan Turing", "alan@example.com", "enigma"),
]


class Command(BaseCommand):
    help = "Seed categories, sample products and sample users."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete existing data before seeding"
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing existing data...")
            logger.warning("Flushing store data")
            Product.objects.all().delete()
            Category.objects.all().delete()
            User.objects.all().delete()

        self.stdout.write("Seeding categories...")
        for category_id, name in CATEGORIES:
            Category.objects.update_or_create(id=category_id, defaults={"name": name})

        self.stdout.write("Seeding products...")
        for product_id, name, price, description, category_id in PRODUCTS:
            Product.objects.update_or_create(
                id=product_id,
                defaults={
                    "name": name,
                    "price": Decimal(price),
                    "description": description,
                    "category_id": category_id,
                },
            )

        self.stdout.write("Seeding users...")
        for user_id, name, email, raw_password in USERS:
            User.objects.update_or_create(
                id=user_id,
                defaults={
                    "name": name,
                    "email": email,
                    "password": make_password(raw_password),
                },
            )

        # Explicit ids were inserted; move sequences past them
        self._reset_sequences([Category, Product, User])

        logger.info(
            "Store seeded",
            categories=len(CATEGORIES),
            products=len(PRODUCTS),
            users=len(USERS),
        )
        self.stdout.write(self.style.SUCCESS("Store seed completed."))

    @staticmethod
    def _reset_sequences(models):
        sql_list = connection.ops.sequence_reset_sql(no_style(), models)
        if not sql_list:
            return
        with connection.cursor() as cursor:
            for sql in sql_list:
                cursor.execute(sql)
