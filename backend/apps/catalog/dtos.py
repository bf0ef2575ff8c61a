"""DTO dataclasses only. Mapping logic lives in mappers.py."""
from dataclasses import dataclass
from decimal import Decimal


@dataclass
class ProductDTO:
    id: int
    name: str
    price: Decimal
    description: str
    category_id: int
