from __future__ import annotations

from apps.catalog.repositories import JewelleryRepository

from .repositories import CartItemRepository, CartRepository
from .services import CartService


def build_cart_service() -> CartService:
    return CartService(
        carts=CartRepository(),
        items=CartItemRepository(),
        jewellery=JewelleryRepository(),
    )
