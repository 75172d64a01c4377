from decimal import Decimal
from typing import Iterable

from apps.catalog.images import resolve_image_url

from .dtos import CartDTO, CartItemDTO
from .models import Cart, CartItem

TWO_PLACES = Decimal("0.01")


def _isoformat(value):
    return value.isoformat() if value is not None else None


class CartItemMapper:
    @staticmethod
    def to_dto(item: CartItem, *, base_url: str) -> CartItemDTO:
        jewellery = item.jewellery
        return CartItemDTO(
            id=item.id,
            jewellery_id=jewellery.id,
            name=jewellery.name,
            description=jewellery.description or "",
            price=str(jewellery.price),
            image_url=resolve_image_url(jewellery.image_url, base_url),
            quantity=item.quantity,
            added_at=_isoformat(getattr(item, "added_at", None)),
        )


class CartMapper:
    @staticmethod
    def to_dto(cart: Cart, items: Iterable[CartItem], *, base_url: str) -> CartDTO:
        items = list(items)
        total_items = sum(i.quantity for i in items)
        # Totals always use the current catalog price
        total_amount = sum(
            (Decimal(i.jewellery.price) * i.quantity for i in items), Decimal("0")
        )
        return CartDTO(
            id=cart.id,
            items=[CartItemMapper.to_dto(i, base_url=base_url) for i in items],
            total_items=total_items,
            total_amount=str(total_amount.quantize(TWO_PLACES)),
        )

