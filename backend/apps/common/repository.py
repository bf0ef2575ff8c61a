from typing import Generic, Iterable, Optional, Type, TypeVar

from django.db import models
from django.db.models import QuerySet

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    """Storage port over a single Django model.

    Subclasses narrow ``_queryset`` to eagerly join whatever their mappers
    read, so no DTO conversion triggers a lazy fetch.
    """

    def __init__(self, model: Type[T]):
        self.model = model

    def _queryset(self) -> QuerySet:
        return self.model.objects.all()

    def get(self, **filters) -> Optional[T]:
        return self._queryset().filter(**filters).first()

    def list(self, *ordering: str, **filters) -> Iterable[T]:
        qs = self._queryset().filter(**filters)
        return qs.order_by(*ordering) if ordering else qs

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def update(self, obj: T, **data) -> T:
        for k, v in data.items():
            setattr(obj, k, v)
        obj.save()
        return obj

    def delete(self, obj: T) -> None:
        obj.delete()
