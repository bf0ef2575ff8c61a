from dataclasses import dataclass
from typing import Any, Dict


def _text(raw: Any) -> str:
    return "" if raw is None else str(raw)


@dataclass
class RegisterUserCommand:
    name: str
    email: str
    password: str

    @staticmethod
    def from_raw(payload: Dict[str, Any]) -> "RegisterUserCommand":
        data = dict(payload or {})
        data.pop("id", None)
        return RegisterUserCommand(
            name=_text(data.get("name")),
            email=_text(data.get("email")),
            password=_text(data.get("password")),
        )


@dataclass
class UpdateUserCommand:
    """Full replacement of a user's profile fields.

    The password is deliberately absent; it only changes through
    ``ChangePasswordCommand``.
    """

    name: str
    email: str

    @staticmethod
    def from_raw(payload: Dict[str, Any]) -> "UpdateUserCommand":
        data = dict(payload or {})
        return UpdateUserCommand(
            name=_text(data.get("name")),
            email=_text(data.get("email")),
        )


@dataclass
class ChangePasswordCommand:
    old_password: str
    new_password: str

    @staticmethod
    def from_raw(payload: Dict[str, Any]) -> "ChangePasswordCommand":
        data = dict(payload or {})
        return ChangePasswordCommand(
            old_password=_text(data.get("oldPassword", data.get("old_password"))),
            new_password=_text(data.get("newPassword", data.get("new_password"))),
        )
