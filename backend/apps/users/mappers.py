from typing import Any, Dict, Iterable, List

from .commands import UpdateUserCommand
from .dtos import UserDTO
from .models import User


class UserMapper:
    @staticmethod
    def to_dto(user: User) -> UserDTO:
        return UserDTO(id=user.id, name=user.name, email=user.email)

    @staticmethod
    def many_to_dto(users: Iterable[User]) -> List[UserDTO]:
        return [UserMapper.to_dto(u) for u in users]

    @staticmethod
    def to_fields(cmd: UpdateUserCommand) -> Dict[str, Any]:
        return {"name": cmd.name, "email": cmd.email}
