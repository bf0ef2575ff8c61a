from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Optional


def _parse_int(raw: Any) -> Optional[int]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (ValueError, TypeError):
        return None


CENT = Decimal("0.01")


def quantize_price(value: Decimal) -> Decimal:
    """Round to the stored two decimal places, halves away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _parse_decimal(raw: Any) -> Decimal:
    try:
        value = raw if isinstance(raw, Decimal) else Decimal(str(raw))
        return quantize_price(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0.00")


@dataclass
class ProductWriteCommand:
    """Full product payload for create and replace.

    ``category_id`` is ``None`` when the payload carried nothing usable, which
    the service reports the same way as a category that does not exist.
    """

    name: str
    price: Decimal
    description: str
    category_id: Optional[int]

    @staticmethod
    def from_raw(payload: Dict[str, Any]) -> "ProductWriteCommand":
        data = dict(payload or {})
        # server-assigned; ignore if present
        data.pop("id", None)
        raw_category = data.get("categoryId", data.get("category_id"))
        description = data.get("description")
        return ProductWriteCommand(
            name=str(data.get("name", "")),
            price=_parse_decimal(data.get("price", "0")),
            description="" if description is None else str(description),
            category_id=_parse_int(raw_category),
        )

