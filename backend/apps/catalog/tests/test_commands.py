import unittest
from decimal import Decimal
from apps.catalog.commands import ProductWriteCommand


class ProductCommandTests(unittest.TestCase):
    def test_write_command_reads_camel_case_and_drops_id(self):
        cmd = ProductWriteCommand.from_raw(
            {
                "id": 999,
                "name": "Phone",
                "price": "10.50",
                "description": "Desc",
                "categoryId": "3",
            }
        )
        self.assertEqual(cmd.name, "Phone")
        self.assertEqual(cmd.price, Decimal("10.50"))
        self.assertEqual(cmd.category_id, 3)
        self.assertIsNone(getattr(cmd, "id", None))

    def test_write_command_accepts_snake_case_category(self):
        cmd = ProductWriteCommand.from_raw({"name": "A", "price": 1, "category_id": 2})
        self.assertEqual(cmd.category_id, 2)

    def test_unusable_category_becomes_none(self):
        for raw in ("abc", None, True, [1]):
            cmd = ProductWriteCommand.from_raw({"name": "A", "price": 1, "categoryId": raw})
            self.assertIsNone(cmd.category_id, raw)

    def test_missing_description_is_empty_string(self):
        cmd = ProductWriteCommand.from_raw({"name": "A", "price": "2", "description": None})
        self.assertEqual(cmd.description, "")

    def test_unparsable_price_falls_back_to_zero(self):
        cmd = ProductWriteCommand.from_raw({"name": "A", "price": "free"})
        self.assertEqual(cmd.price, Decimal("0"))

    def test_price_is_rounded_half_up_to_cents(self):
        self.assertEqual(
            ProductWriteCommand.from_raw({"name": "A", "price": "1.005"}).price,
            Decimal("1.01"),
        )
        self.assertEqual(
            ProductWriteCommand.from_raw({"name": "A", "price": Decimal("-1.005")}).price,
            Decimal("-1.01"),
        )
