from typing import Iterable, Set

from apps.common.repository import GenericRepository
from .models import Favorite


class FavoriteRepository(GenericRepository[Favorite]):
    def __init__(self):
        super().__init__(Favorite)

    def list_for_user(self, user_id: int):
        return (
            self.model.objects.filter(user_id=user_id)
            .select_related("jewellery__category")
            .order_by("-created_at", "-id")
        )

    def favorited_ids(self, user_id: int, jewellery_ids: Iterable[int]) -> Set[int]:
        return set(
            self.model.objects.filter(
                user_id=user_id, jewellery_id__in=list(jewellery_ids)
            ).values_list("jewellery_id", flat=True)
        )
