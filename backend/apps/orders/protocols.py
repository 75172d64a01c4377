from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.orders.models import Order
    from apps.users.models import Address


class OrderRepositoryProtocol(Protocol):
    def create(self, **data) -> "Order":
        ...

    def add_items(self, order: "Order", lines: List[Dict[str, Any]]) -> None:
        ...

    def list_for_user(self, user_id: int) -> Iterable["Order"]:
        ...

    def get_for_user(self, order_id: int, user_id: int) -> Optional["Order"]:
        ...


class OwnedAddressLookupProtocol(Protocol):
    def get(self, **filters) -> Optional["Address"]:
        ...
