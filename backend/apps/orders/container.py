from __future__ import annotations

from apps.carts.repositories import CartItemRepository, CartRepository
from apps.users.repositories import AddressRepository

from .repositories import OrderRepository
from .services import OrderService


def build_order_service() -> OrderService:
    return OrderService(
        orders=OrderRepository(),
        carts=CartRepository(),
        cart_items=CartItemRepository(),
        addresses=AddressRepository(),
    )
