from typing import Optional, Tuple

from django.db.models import F
from django.utils import timezone

from apps.common.repository import GenericRepository
from .models import Cart, CartItem


class CartRepository(GenericRepository[Cart]):
    def __init__(self):
        super().__init__(Cart)

    def get_or_create_for_user(self, user_id: int) -> Tuple[Cart, bool]:
        return self.model.objects.get_or_create(user_id=user_id)

    def get_for_user(self, user_id: int, *, lock: bool = False) -> Optional[Cart]:
        qs = self.model.objects.filter(user_id=user_id)
        if lock:
            # Row lock held until the surrounding transaction ends
            qs = qs.select_for_update()
        return qs.first()

    def touch(self, cart: Cart) -> None:
        cart.updated_at = timezone.now()
        cart.save(update_fields=["updated_at"])


class CartItemRepository(GenericRepository[CartItem]):
    def __init__(self):
        super().__init__(CartItem)

    def list_for_cart(self, cart_id: int):
        return (
            self.model.objects.filter(cart_id=cart_id)
            .select_related("jewellery")
            .order_by("added_at", "id")
        )

    def get_for_cart(self, cart_id: int, item_id: int) -> Optional[CartItem]:
        return (
            self.model.objects.filter(cart_id=cart_id, id=item_id)
            .select_related("jewellery")
            .first()
        )

    def get_by_jewellery(self, cart_id: int, jewellery_id: int) -> Optional[CartItem]:
        return self.model.objects.filter(
            cart_id=cart_id, jewellery_id=jewellery_id
        ).first()

    def increment(self, item: CartItem, quantity: int) -> CartItem:
        self.model.objects.filter(id=item.id).update(quantity=F("quantity") + quantity)
        item.refresh_from_db(fields=["quantity"])
        return item

    def clear(self, cart_id: int) -> int:
        deleted, _ = self.model.objects.filter(cart_id=cart_id).delete()
        return deleted
