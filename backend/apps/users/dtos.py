from dataclasses import dataclass
from typing import Optional

from .models import Address, User


@dataclass
class AddressDTO:
    id: int
    street: str
    city: str
    state: str
    postal_code: str
    country: str
    is_default: bool
    created_at: Optional[str]
    updated_at: Optional[str]


@dataclass
class UserDTO:
    id: int
    username: str
    email: str
    phone: Optional[str]
    date_joined: Optional[str]


def _isoformat(value) -> Optional[str]:
    if value is None:
        return None
    try:
        return value.isoformat()
    except AttributeError:
        return str(value)


def address_to_dto(a: Address) -> AddressDTO:
    return AddressDTO(
        id=a.id,
        street=a.street,
        city=a.city,
        state=a.state,
        postal_code=a.postal_code,
        country=a.country,
        is_default=bool(a.is_default),
        created_at=_isoformat(getattr(a, "created_at", None)),
        updated_at=_isoformat(getattr(a, "updated_at", None)),
    )


def user_to_dto(u: User) -> UserDTO:
    return UserDTO(
        id=u.id,
        username=u.username,
        email=u.email,
        phone=getattr(u, "phone", None),
        date_joined=_isoformat(getattr(u, "date_joined", None)),
    )
