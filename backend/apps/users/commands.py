from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class AddressCommand:
    street: str
    city: str
    state: str
    postal_code: str
    country: str
    is_default: bool = False

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "AddressCommand":
        return AddressCommand(
            street=data["street"].strip(),
            city=data["city"].strip(),
            state=data["state"].strip(),
            postal_code=data["postal_code"].strip(),
            country=data["country"].strip(),
            is_default=bool(data.get("is_default", False)),
        )

    def fields(self) -> Dict[str, Any]:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "country": self.country,
            "is_default": self.is_default,
        }


@dataclass
class ProfileUpdateCommand:
    username: str
    email: str

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "ProfileUpdateCommand":
        return ProfileUpdateCommand(
            username=data["username"].strip(),
            email=data["email"].strip().lower(),
        )
