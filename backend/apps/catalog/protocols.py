from __future__ import annotations

from typing import Iterable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.catalog.models import Category, Product


class CategoryRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Category"]: ...


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]: ...

    def list_with_category(self) -> Iterable["Product"]: ...

    def list_by_category_id(self, category_id: int) -> Iterable["Product"]: ...

    def create(self, **data) -> "Product": ...

    def update(self, product: "Product", **data) -> "Product": ...

    def delete(self, product: "Product") -> None: ...
