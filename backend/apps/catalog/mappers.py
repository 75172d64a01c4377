from dataclasses import replace
from typing import Iterable, List, Optional

from .dtos import CategoryDTO, JewelleryDTO
from .images import resolve_image_url
from .models import Category, Jewellery


def _isoformat(value):
    return value.isoformat() if value is not None else None


class CategoryMapper:
    @staticmethod
    def to_dto(cat: Category) -> CategoryDTO:
        count = getattr(cat, "jewellery_count", None)
        if count is None:
            count = cat.jewellery.count()
        return CategoryDTO(
            id=cat.id,
            name=cat.name,
            description=cat.description or "",
            icon_name=cat.icon_name or "",
            jewellery_count=count,
        )

    @staticmethod
    def many_to_dto(categories: Iterable[Category]) -> List[CategoryDTO]:
        return [CategoryMapper.to_dto(c) for c in categories]


class JewelleryMapper:
    @staticmethod
    def to_dto(item: Jewellery, *, base_url: Optional[str]) -> JewelleryDTO:
        """``base_url=None`` keeps the stored image name unresolved."""
        category = getattr(item, "category", None)
        return JewelleryDTO(
            id=item.id,
            name=item.name,
            description=item.description or "",
            price=str(item.price),
            image_url=(
                resolve_image_url(item.image_url, base_url)
                if base_url is not None
                else item.image_url or ""
            ),
            category_id=item.category_id,
            category_name=getattr(category, "name", None),
            created_at=_isoformat(getattr(item, "created_at", None)),
            updated_at=_isoformat(getattr(item, "updated_at", None)),
        )

    @staticmethod
    def many_to_dto(items: Iterable[Jewellery], *, base_url: Optional[str]) -> List[JewelleryDTO]:
        return [JewelleryMapper.to_dto(i, base_url=base_url) for i in items]

    @staticmethod
    def with_base_url(dto: JewelleryDTO, base_url: str) -> JewelleryDTO:
        return replace(dto, image_url=resolve_image_url(dto.image_url, base_url))
