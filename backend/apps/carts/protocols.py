from __future__ import annotations

from typing import Iterable, Optional, Protocol, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.carts.models import Cart, CartItem
    from apps.catalog.models import Jewellery


class CartRepositoryProtocol(Protocol):
    def get_or_create_for_user(self, user_id: int) -> Tuple["Cart", bool]:
        ...

    def get_for_user(self, user_id: int, *, lock: bool = False) -> Optional["Cart"]:
        ...

    def touch(self, cart: "Cart") -> None:
        ...


class CartItemRepositoryProtocol(Protocol):
    def list_for_cart(self, cart_id: int) -> Iterable["CartItem"]:
        ...

    def get_for_cart(self, cart_id: int, item_id: int) -> Optional["CartItem"]:
        ...

    def get_by_jewellery(self, cart_id: int, jewellery_id: int) -> Optional["CartItem"]:
        ...

    def create(self, **data) -> "CartItem":
        ...

    def increment(self, item: "CartItem", quantity: int) -> "CartItem":
        ...

    def update(self, item: "CartItem", **data) -> "CartItem":
        ...

    def delete(self, item: "CartItem") -> None:
        ...

    def clear(self, cart_id: int) -> int:
        ...


class JewelleryLookupProtocol(Protocol):
    def get(self, **filters) -> Optional["Jewellery"]:
        ...
