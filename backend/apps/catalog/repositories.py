from apps.common.repository import GenericRepository
from .models import Category, Product


class CategoryRepository(GenericRepository[Category]):
    def __init__(self):
        super().__init__(Category)


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def _queryset(self):
        # ProductMapper reads the category; join it up front
        return self.model.objects.select_related("category")

    def list_with_category(self):
        return self._queryset().order_by("id")

    def list_by_category_id(self, category_id: int):
        return self._queryset().filter(category_id=category_id).order_by("id")
