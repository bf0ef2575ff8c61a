from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from apps.common import get_logger
from .commands import ProductWriteCommand
from .dtos import ProductDTO
from .mappers import ProductMapper
from .protocols import CategoryRepositoryProtocol, ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")

ErrorTriple = Tuple[str, str, Optional[Dict[str, Any]]]


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        categories: CategoryRepositoryProtocol,
    ):
        self.products = products
        self.categories = categories
        self.logger = logger.bind(service="ProductService")

    def list_products(self, category_id: Optional[int] = None) -> List[ProductDTO]:
        self.logger.debug("Listing products", category_id=category_id)
        qs = (
            self.products.list_by_category_id(category_id)
            if category_id is not None
            else self.products.list_with_category()
        )
        return ProductMapper.many_to_dto(qs)

    def get_product(self, product_id: int) -> Optional[ProductDTO]:
        self.logger.debug("Fetching product", product_id=product_id)
        p = self.products.get(id=product_id)
        if not p:
            self.logger.info("Product not found", product_id=product_id)
        return ProductMapper.to_dto(p) if p else None

    def _resolve_category(self, cmd: ProductWriteCommand):
        if cmd.category_id is None:
            return None
        return self.categories.get(id=cmd.category_id)

    def create_product(
        self, data: Union[Dict[str, Any], ProductWriteCommand]
    ) -> Tuple[Optional[ProductDTO], Optional[ErrorTriple]]:
        cmd = data if isinstance(data, ProductWriteCommand) else ProductWriteCommand.from_raw(data)
        self.logger.info("Creating product", name=cmd.name, category_id=cmd.category_id)
        category = self._resolve_category(cmd)
        if category is None:
            # Reported as a generic bad request rather than a missing category
            self.logger.warning(
                "Product creation rejected: unknown category",
                category_id=cmd.category_id,
            )
            return None, (
                "VALIDATION_ERROR",
                "Invalid category",
                {"categoryId": cmd.category_id},
            )
        product = self.products.create(**ProductMapper.to_fields(cmd, category))
        self.logger.info("Product created", product_id=product.id)
        return ProductMapper.to_dto(product), None

    def update_product(
        self,
        product_id: int,
        data: Union[Dict[str, Any], ProductWriteCommand],
    ) -> Tuple[Optional[ProductDTO], Optional[ErrorTriple]]:
        """Replace every mutable field of a product.

        The category is checked before the product, so a request that is wrong
        on both counts gets the bad-request answer. Nothing is written unless
        both resolve.
        """
        cmd = data if isinstance(data, ProductWriteCommand) else ProductWriteCommand.from_raw(data)
        self.logger.info("Updating product", product_id=product_id, category_id=cmd.category_id)
        category = self._resolve_category(cmd)
        if category is None:
            self.logger.warning(
                "Product update rejected: unknown category",
                product_id=product_id,
                category_id=cmd.category_id,
            )
            return None, (
                "VALIDATION_ERROR",
                "Invalid category",
                {"categoryId": cmd.category_id},
            )
        product = self.products.get(id=product_id)
        if not product:
            self.logger.warning("Product update failed: not found", product_id=product_id)
            return None, ("NOT_FOUND", "Product not found", {"id": str(product_id)})
        self.products.update(product, **ProductMapper.to_fields(cmd, category))
        self.logger.info("Product updated", product_id=product_id)
        return ProductMapper.to_dto(product), None

    def delete_product(self, product_id: int) -> Tuple[bool, Optional[ErrorTriple]]:
        self.logger.info("Deleting product", product_id=product_id)
        product = self.products.get(id=product_id)
        if not product:
            self.logger.warning("Product deletion failed: not found", product_id=product_id)
            return False, ("NOT_FOUND", "Product not found", {"id": str(product_id)})
        self.products.delete(product)
        self.logger.info("Product deleted", product_id=product_id)
        return True, None
