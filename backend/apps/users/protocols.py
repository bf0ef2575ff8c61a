from __future__ import annotations

from typing import Iterable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.models import User


class UserRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["User"]: ...

    def list_sorted(self, field: str) -> Iterable["User"]: ...

    def create(self, **data) -> "User": ...

    def update(self, user: "User", **data) -> "User": ...

    def delete(self, user: "User") -> None: ...
