from __future__ import annotations

from apps.catalog.repositories import JewelleryRepository

from .repositories import FavoriteRepository
from .services import FavoriteService


def build_favorite_service() -> FavoriteService:
    return FavoriteService(favorites=FavoriteRepository(), jewellery=JewelleryRepository())
