from __future__ import annotations

from django.core.cache import cache

from .repositories import CategoryRepository, JewelleryRepository
from .services import CategoryService, JewelleryService


def build_jewellery_service(*, disable_cache: bool = False) -> JewelleryService:
    return JewelleryService(
        jewellery=JewelleryRepository(),
        categories=CategoryRepository(),
        cache_backend=cache,
        disable_cache=disable_cache,
    )


def build_category_service() -> CategoryService:
    return CategoryService(
        categories=CategoryRepository(),
        jewellery=JewelleryRepository(),
        cache_backend=cache,
    )
