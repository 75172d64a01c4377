from __future__ import annotations

from typing import Any, Optional, Tuple

from django.db import IntegrityError, transaction

from apps.common import get_logger
from .commands import AddToCartCommand, UpdateCartItemCommand
from .dtos import CartDTO
from .mappers import CartMapper
from .protocols import (
    CartItemRepositoryProtocol,
    CartRepositoryProtocol,
    JewelleryLookupProtocol,
)

logger = get_logger(__name__).bind(component="carts", layer="service")

ServiceError = Tuple[str, str, Optional[Any]]


class CartService:
    """Per-user shopping cart. The cart row is created lazily on first access."""

    def __init__(
        self,
        carts: CartRepositoryProtocol,
        items: CartItemRepositoryProtocol,
        jewellery: JewelleryLookupProtocol,
    ):
        self.carts = carts
        self.items = items
        self.jewellery = jewellery
        self.logger = logger.bind(service="CartService")

    def _ensure_cart(self, user_id: int):
        cart, created = self.carts.get_or_create_for_user(user_id)
        if created:
            self.logger.info("Cart created", user_id=user_id, cart_id=cart.id)
        return cart

    def _to_dto(self, cart, *, base_url: str) -> CartDTO:
        return CartMapper.to_dto(
            cart, self.items.list_for_cart(cart.id), base_url=base_url
        )

    def _item_not_found(self, item_id: int) -> ServiceError:
        return ("NOT_FOUND", "Cart item not found", {"itemId": str(item_id)})

    def get_cart(self, user_id: int, *, base_url: str) -> CartDTO:
        self.logger.debug("Fetching cart", user_id=user_id)
        cart = self._ensure_cart(user_id)
        return self._to_dto(cart, base_url=base_url)

    def add_item(
        self, user_id: int, command: AddToCartCommand, *, base_url: str
    ) -> Tuple[Optional[CartDTO], Optional[ServiceError]]:
        self.logger.info(
            "Adding item to cart",
            user_id=user_id,
            jewellery_id=command.jewellery_id,
            quantity=command.quantity,
        )
        if not self.jewellery.get(id=command.jewellery_id):
            self.logger.warning(
                "Add to cart rejected: jewellery missing",
                jewellery_id=command.jewellery_id,
            )
            return None, (
                "NOT_FOUND",
                "Jewellery not found",
                {"jewelleryId": str(command.jewellery_id)},
            )
        with transaction.atomic():
            cart = self._ensure_cart(user_id)
            existing = self.items.get_by_jewellery(cart.id, command.jewellery_id)
            if existing:
                item = self.items.increment(existing, command.quantity)
                self.logger.debug(
                    "Merged quantity into existing line",
                    item_id=item.id,
                    quantity=item.quantity,
                )
            else:
                try:
                    with transaction.atomic():
                        item = self.items.create(
                            cart_id=cart.id,
                            jewellery_id=command.jewellery_id,
                            quantity=command.quantity,
                        )
                except IntegrityError:
                    # A concurrent add inserted the same line first
                    existing = self.items.get_by_jewellery(cart.id, command.jewellery_id)
                    item = self.items.increment(existing, command.quantity)
            self.carts.touch(cart)
        self.logger.info("Cart item saved", cart_id=cart.id, item_id=item.id)
        return self._to_dto(cart, base_url=base_url), None

    def update_item(
        self, user_id: int, command: UpdateCartItemCommand, *, base_url: str
    ) -> Tuple[Optional[CartDTO], Optional[ServiceError]]:
        self.logger.info(
            "Updating cart item",
            user_id=user_id,
            item_id=command.item_id,
            quantity=command.quantity,
        )
        cart = self._ensure_cart(user_id)
        item = self.items.get_for_cart(cart.id, command.item_id)
        if not item:
            self.logger.warning(
                "Cart item update failed: not found",
                user_id=user_id,
                item_id=command.item_id,
            )
            return None, self._item_not_found(command.item_id)
        with transaction.atomic():
            if command.removes_item:
                self.items.delete(item)
                self.logger.debug("Removed cart item via zero quantity", item_id=item.id)
            else:
                self.items.update(item, quantity=command.quantity)
            self.carts.touch(cart)
        return self._to_dto(cart, base_url=base_url), None

    def remove_item(
        self, user_id: int, item_id: int, *, base_url: str
    ) -> Tuple[Optional[CartDTO], Optional[ServiceError]]:
        self.logger.info("Removing cart item", user_id=user_id, item_id=item_id)
        cart = self._ensure_cart(user_id)
        item = self.items.get_for_cart(cart.id, item_id)
        if not item:
            self.logger.warning(
                "Cart item removal failed: not found", user_id=user_id, item_id=item_id
            )
            return None, self._item_not_found(item_id)
        with transaction.atomic():
            self.items.delete(item)
            self.carts.touch(cart)
        return self._to_dto(cart, base_url=base_url), None

    def clear_cart(self, user_id: int, *, base_url: str) -> CartDTO:
        self.logger.info("Clearing cart", user_id=user_id)
        cart = self._ensure_cart(user_id)
        with transaction.atomic():
            removed = self.items.clear(cart.id)
            self.carts.touch(cart)
        self.logger.debug("Cart cleared", cart_id=cart.id, removed=removed)
        return self._to_dto(cart, base_url=base_url)
