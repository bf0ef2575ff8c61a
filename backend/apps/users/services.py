from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from django.contrib.auth.hashers import check_password, make_password

from apps.common import get_logger
from .commands import ChangePasswordCommand, RegisterUserCommand, UpdateUserCommand
from .dtos import UserDTO
from .mappers import UserMapper
from .protocols import UserRepositoryProtocol

logger = get_logger(__name__).bind(component="users", layer="service")

ErrorTriple = Tuple[str, str, Optional[Dict[str, Any]]]

SORT_FIELDS = ("name", "email")
DEFAULT_SORT = "name"


class UserService:
    def __init__(self, users: UserRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="UserService")

    @staticmethod
    def resolve_sort(sort: Optional[str]) -> str:
        return sort if sort in SORT_FIELDS else DEFAULT_SORT

    def list_users(self, sort: Optional[str] = None) -> List[UserDTO]:
        field = self.resolve_sort(sort)
        if field != sort:
            self.logger.debug("Falling back to default sort", requested=sort, sort=field)
        self.logger.debug("Listing users", sort=field)
        return UserMapper.many_to_dto(self.users.list_sorted(field))

    def get_user(self, user_id: int) -> Optional[UserDTO]:
        self.logger.debug("Fetching user", user_id=user_id)
        u = self.users.get(id=user_id)
        if not u:
            self.logger.info("User not found", user_id=user_id)
        return UserMapper.to_dto(u) if u else None

    def create_user(
        self, data: Union[Dict[str, Any], RegisterUserCommand]
    ) -> Tuple[Optional[UserDTO], Optional[ErrorTriple]]:
        cmd = data if isinstance(data, RegisterUserCommand) else RegisterUserCommand.from_raw(data)
        self.logger.info("Creating user", email=cmd.email)
        user = self.users.create(
            name=cmd.name,
            email=cmd.email,
            password=make_password(cmd.password),
        )
        self.logger.info("User created", user_id=user.id)
        return UserMapper.to_dto(user), None

    def update_user(
        self, user_id: int, data: Union[Dict[str, Any], UpdateUserCommand]
    ) -> Tuple[Optional[UserDTO], Optional[ErrorTriple]]:
        cmd = data if isinstance(data, UpdateUserCommand) else UpdateUserCommand.from_raw(data)
        self.logger.info("Updating user", user_id=user_id)
        user = self.users.get(id=user_id)
        if not user:
            self.logger.warning("User update failed: not found", user_id=user_id)
            return None, ("NOT_FOUND", "User not found", {"id": str(user_id)})
        self.users.update(user, **UserMapper.to_fields(cmd))
        self.logger.info("User updated", user_id=user_id)
        return UserMapper.to_dto(user), None

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[ErrorTriple]]:
        self.logger.info("Deleting user", user_id=user_id)
        user = self.users.get(id=user_id)
        if not user:
            self.logger.warning("User deletion failed: not found", user_id=user_id)
            return False, ("NOT_FOUND", "User not found", {"id": str(user_id)})
        self.users.delete(user)
        self.logger.info("User deleted", user_id=user_id)
        return True, None

    def change_password(
        self, user_id: int, data: Union[Dict[str, Any], ChangePasswordCommand]
    ) -> Tuple[bool, Optional[ErrorTriple]]:
        """Swap a user's password after checking the current one.

        A missing user wins over a wrong password. On mismatch the stored
        hash is left as it was.
        """
        cmd = data if isinstance(data, ChangePasswordCommand) else ChangePasswordCommand.from_raw(data)
        self.logger.info("Changing password", user_id=user_id)
        user = self.users.get(id=user_id)
        if not user:
            self.logger.warning("Password change failed: not found", user_id=user_id)
            return False, ("NOT_FOUND", "User not found", {"id": str(user_id)})
        if not check_password(cmd.old_password, user.password):
            self.logger.warning("Password change rejected: old password mismatch", user_id=user_id)
            return False, ("UNAUTHORIZED", "Old password does not match", None)
        self.users.update(user, password=make_password(cmd.new_password))
        self.logger.info("Password changed", user_id=user_id)
        return True, None
