from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class RegisterCommand:
    username: str
    email: str
    password: str

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "RegisterCommand":
        return RegisterCommand(
            username=data["username"].strip(),
            email=data["email"].strip().lower(),
            password=data["password"],
        )


@dataclass
class ChangePasswordCommand:
    email: str
    old_password: str
    new_password: str

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "ChangePasswordCommand":
        return ChangePasswordCommand(
            email=data["email"].strip().lower(),
            old_password=data["old_password"],
            new_password=data["new_password"],
        )
