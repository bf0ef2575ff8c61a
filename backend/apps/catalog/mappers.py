from typing import Any, Dict, Iterable, List

from .commands import ProductWriteCommand
from .dtos import ProductDTO
from .models import Category, Product


class ProductMapper:
    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price,
            description=product.description,
            category_id=product.category_id,
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]

    @staticmethod
    def to_fields(cmd: ProductWriteCommand, category: Category) -> Dict[str, Any]:
        """Column values for a product built from a write command.

        Used for both create and full replacement; the product id is never
        part of the result.
        """
        return {
            "name": cmd.name,
            "price": cmd.price,
            "description": cmd.description,
            "category": category,
        }
