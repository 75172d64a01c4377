from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from django.db import IntegrityError, transaction

from apps.catalog.mappers import JewelleryMapper
from apps.common import get_logger
from .dtos import FavoriteDTO
from .protocols import FavoriteRepositoryProtocol, JewelleryLookupProtocol

logger = get_logger(__name__).bind(component="favorites", layer="service")

ServiceError = Tuple[str, str, Optional[Any]]

ALREADY_FAVORITED = ("CONFLICT", "Item already in favorites.", None)


def _isoformat(value):
    return value.isoformat() if value is not None else None


class FavoriteService:
    def __init__(
        self,
        favorites: FavoriteRepositoryProtocol,
        jewellery: JewelleryLookupProtocol,
    ):
        self.favorites = favorites
        self.jewellery = jewellery
        self.logger = logger.bind(service="FavoriteService")

    def list_favorites(self, user_id: int, *, base_url: str) -> List[FavoriteDTO]:
        self.logger.debug("Listing favorites", user_id=user_id)
        return [
            FavoriteDTO(
                id=f.id,
                created_at=_isoformat(getattr(f, "created_at", None)),
                jewellery=JewelleryMapper.to_dto(f.jewellery, base_url=base_url),
            )
            for f in self.favorites.list_for_user(user_id)
        ]

    def add_favorite(
        self, user_id: int, jewellery_id: int
    ) -> Tuple[bool, Optional[ServiceError]]:
        self.logger.info("Adding favorite", user_id=user_id, jewellery_id=jewellery_id)
        if not self.jewellery.get(id=jewellery_id):
            self.logger.warning("Favorite rejected: jewellery missing", jewellery_id=jewellery_id)
            return False, (
                "NOT_FOUND",
                "Jewellery not found",
                {"jewelleryId": str(jewellery_id)},
            )
        if self.favorites.exists(user_id=user_id, jewellery_id=jewellery_id):
            self.logger.info(
                "Favorite rejected: already present",
                user_id=user_id,
                jewellery_id=jewellery_id,
            )
            return False, ALREADY_FAVORITED
        try:
            with transaction.atomic():
                self.favorites.create(user_id=user_id, jewellery_id=jewellery_id)
        except IntegrityError:
            self.logger.warning(
                "Favorite lost a uniqueness race",
                user_id=user_id,
                jewellery_id=jewellery_id,
            )
            return False, ALREADY_FAVORITED
        return True, None

    def remove_favorite(
        self, user_id: int, jewellery_id: int
    ) -> Tuple[bool, Optional[ServiceError]]:
        self.logger.info("Removing favorite", user_id=user_id, jewellery_id=jewellery_id)
        favorite = self.favorites.get(user_id=user_id, jewellery_id=jewellery_id)
        if not favorite:
            return False, (
                "NOT_FOUND",
                "Item not found in favorites.",
                {"jewelleryId": str(jewellery_id)},
            )
        self.favorites.delete(favorite)
        return True, None

    def is_favorited(self, user_id: int, jewellery_id: int) -> bool:
        return self.favorites.exists(user_id=user_id, jewellery_id=jewellery_id)

    def batch_status(self, user_id: int, jewellery_ids: Iterable[int]) -> Dict[str, bool]:
        """Map each requested id (as a string key) to whether the user favorited it."""
        ids = list(dict.fromkeys(jewellery_ids))
        self.logger.debug("Checking favorite statuses", user_id=user_id, count=len(ids))
        found = self.favorites.favorited_ids(user_id, ids) if ids else set()
        return {str(jid): jid in found for jid in ids}
