from apps.common.repository import GenericRepository
from .models import User


class UserRepository(GenericRepository[User]):
    def __init__(self):
        super().__init__(User)

    def list_sorted(self, field: str):
        # id breaks ties so equal names come back in a stable order
        return self.list(field, "id")
