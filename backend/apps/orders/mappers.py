from typing import Iterable, List

from apps.catalog.images import resolve_image_url

from .dtos import OrderAddressDTO, OrderDTO, OrderItemDTO
from .models import Order, OrderItem


def _isoformat(value):
    return value.isoformat() if value is not None else None


class OrderItemMapper:
    @staticmethod
    def to_dto(item: OrderItem, *, base_url: str) -> OrderItemDTO:
        jewellery = item.jewellery
        return OrderItemDTO(
            id=item.id,
            jewellery_id=item.jewellery_id,
            name=jewellery.name,
            description=jewellery.description or "",
            image_url=resolve_image_url(jewellery.image_url, base_url),
            quantity=item.quantity,
            price=str(item.price),
        )


class OrderMapper:
    @staticmethod
    def to_dto(order: Order, *, base_url: str) -> OrderDTO:
        address = order.address
        return OrderDTO(
            id=order.id,
            total_amount=str(order.total_amount),
            status=order.status,
            order_date=_isoformat(order.order_date),
            payment_method=order.payment_method,
            address=OrderAddressDTO(
                id=address.id,
                street=address.street,
                city=address.city,
                state=address.state,
                postal_code=address.postal_code,
                country=address.country,
            ),
            items=[
                OrderItemMapper.to_dto(i, base_url=base_url) for i in order.items.all()
            ],
        )

    @staticmethod
    def many_to_dto(orders: Iterable[Order], *, base_url: str) -> List[OrderDTO]:
        return [OrderMapper.to_dto(o, base_url=base_url) for o in orders]
