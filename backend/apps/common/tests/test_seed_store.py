from io import StringIO

from django.contrib.auth.hashers import check_password
from django.core.management import call_command
from django.test import TestCase

from apps.catalog.models import Category, Product
from apps.common.management.commands.seed_store import CATEGORIES, PRODUCTS, USERS
from apps.users.models import User


class SeedStoreCommandTests(TestCase):
    def seed(self, *args):
        out = StringIO()
        call_command("seed_store", *args, stdout=out)
        return out.getvalue()

    def test_seeds_categories_products_and_users(self):
        output = self.seed()
        self.assertIn("Store seed completed.", output)
        self.assertEqual(Category.objects.count(), len(CATEGORIES))
        self.assertEqual(Product.objects.count(), len(PRODUCTS))
        self.assertEqual(User.objects.count(), len(USERS))
        self.assertEqual(Category.objects.get(id=1).name, CATEGORIES[0][1])

    def test_user_passwords_are_hashed(self):
        self.seed()
        user_id, _, _, raw_password = USERS[0]
        user = User.objects.get(id=user_id)
        self.assertNotEqual(user.password, raw_password)
        self.assertTrue(check_password(raw_password, user.password))

    def test_running_twice_is_idempotent(self):
        self.seed()
        self.seed()
        self.assertEqual(Product.objects.count(), len(PRODUCTS))
        self.assertEqual(User.objects.count(), len(USERS))

    def test_flush_removes_extra_rows(self):
        self.seed()
        extra = Product.objects.create(
            name="Extra", price="1.00", description="", category_id=1
        )
        self.seed("--flush")
        self.assertFalse(Product.objects.filter(id=extra.id).exists())
        self.assertEqual(Product.objects.count(), len(PRODUCTS))
