from __future__ import annotations

from typing import Iterable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.models import User, Address


class UserRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["User"]: ...

    def update(self, user: "User", **data) -> "User": ...

    def is_taken(self, *, username: str, email: str, exclude_id: int) -> bool: ...


class AddressRepositoryProtocol(Protocol):
    def list_for_user(self, user_id: int) -> Iterable["Address"]: ...

    def get(self, **filters) -> Optional["Address"]: ...

    def create(self, **data) -> "Address": ...

    def update(self, address: "Address", **data) -> "Address": ...

    def delete(self, address: "Address") -> None: ...

    def clear_default(self, user_id: int, exclude_id: Optional[int] = None) -> int: ...
