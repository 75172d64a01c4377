from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional, Tuple

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.carts.protocols import CartItemRepositoryProtocol, CartRepositoryProtocol
from apps.common import get_logger
from .commands import CreateOrderCommand
from .dtos import OrderDTO
from .mappers import OrderMapper
from .models import OrderStatus
from .protocols import OrderRepositoryProtocol, OwnedAddressLookupProtocol

logger = get_logger(__name__).bind(component="orders", layer="service")

ServiceError = Tuple[str, str, Optional[Any]]

CART_EMPTY = ("CART_EMPTY", "Cart is empty", None)
INVALID_ADDRESS = ("INVALID_ADDRESS", "Invalid address", None)
ORDER_FAILED = ("SERVER_ERROR", "Internal server error", None)


class OrderService:
    """Checkout and order history.

    ``create_order`` turns the caller's cart into an order in a single
    transaction: the cart row is locked, line prices are snapshotted from the
    current catalog, and the cart is emptied. Either every write lands or none
    does.
    """

    def __init__(
        self,
        orders: OrderRepositoryProtocol,
        carts: CartRepositoryProtocol,
        cart_items: CartItemRepositoryProtocol,
        addresses: OwnedAddressLookupProtocol,
    ):
        self.orders = orders
        self.carts = carts
        self.cart_items = cart_items
        self.addresses = addresses
        self.logger = logger.bind(service="OrderService")

    def create_order(
        self, user_id: int, command: CreateOrderCommand, *, base_url: str
    ) -> Tuple[Optional[OrderDTO], Optional[ServiceError]]:
        self.logger.info(
            "Creating order",
            user_id=user_id,
            address_id=command.address_id,
            payment_method=command.payment_method,
        )
        try:
            with transaction.atomic():
                cart = self.carts.get_for_user(user_id, lock=True)
                lines = list(self.cart_items.list_for_cart(cart.id)) if cart else []
                if not lines:
                    self.logger.warning("Order rejected: cart is empty", user_id=user_id)
                    return None, CART_EMPTY
                address = self.addresses.get(id=command.address_id, user_id=user_id)
                if not address:
                    self.logger.warning(
                        "Order rejected: address not owned",
                        user_id=user_id,
                        address_id=command.address_id,
                    )
                    return None, INVALID_ADDRESS
                snapshot = [
                    {
                        "jewellery_id": line.jewellery_id,
                        "quantity": line.quantity,
                        "price": line.jewellery.price,
                    }
                    for line in lines
                ]
                total = sum(
                    (Decimal(s["price"]) * s["quantity"] for s in snapshot),
                    Decimal("0"),
                )
                order = self.orders.create(
                    user_id=user_id,
                    address_id=address.id,
                    payment_method=command.payment_method,
                    total_amount=total,
                    status=OrderStatus.CONFIRMED,
                    order_date=timezone.now(),
                )
                self.orders.add_items(order, snapshot)
                self.cart_items.clear(cart.id)
                self.carts.touch(cart)
        except DatabaseError:
            self.logger.exception("Order creation failed", user_id=user_id)
            return None, ORDER_FAILED
        self.logger.info(
            "Order created",
            user_id=user_id,
            order_id=order.id,
            total_amount=str(total),
            lines=len(snapshot),
        )
        created = self.orders.get_for_user(order.id, user_id) or order
        return OrderMapper.to_dto(created, base_url=base_url), None

    def list_orders(self, user_id: int, *, base_url: str) -> List[OrderDTO]:
        self.logger.debug("Listing orders", user_id=user_id)
        return OrderMapper.many_to_dto(self.orders.list_for_user(user_id), base_url=base_url)

    def get_order(
        self, user_id: int, order_id: int, *, base_url: str
    ) -> Tuple[Optional[OrderDTO], Optional[ServiceError]]:
        self.logger.debug("Fetching order", user_id=user_id, order_id=order_id)
        order = self.orders.get_for_user(order_id, user_id)
        if not order:
            self.logger.info("Order not found", user_id=user_id, order_id=order_id)
            return None, ("NOT_FOUND", "Order not found", {"id": str(order_id)})
        return OrderMapper.to_dto(order, base_url=base_url), None
