from typing import Any, Dict, List, Optional

from apps.common.repository import GenericRepository
from .models import Order, OrderItem


class OrderRepository(GenericRepository[Order]):
    def __init__(self):
        super().__init__(Order)

    def _base_queryset(self):
        return self.model.objects.select_related("address").prefetch_related(
            "items__jewellery"
        )

    def add_items(self, order: Order, lines: List[Dict[str, Any]]) -> None:
        OrderItem.objects.bulk_create([OrderItem(order=order, **line) for line in lines])

    def list_for_user(self, user_id: int):
        return self._base_queryset().filter(user_id=user_id).order_by("-order_date", "-id")

    def get_for_user(self, order_id: int, user_id: int) -> Optional[Order]:
        return self._base_queryset().filter(id=order_id, user_id=user_id).first()
