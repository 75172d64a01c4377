from typing import Optional

from django.db.models import Count

from apps.common.repository import GenericRepository
from .models import Category, Jewellery


class CategoryRepository(GenericRepository[Category]):
    def __init__(self):
        super().__init__(Category)

    def _annotated(self):
        return self.model.objects.annotate(jewellery_count=Count("jewellery"))

    def list_active(self):
        return self._annotated().filter(is_active=True).order_by("name")

    def get_active(self, category_id: int) -> Optional[Category]:
        return self._annotated().filter(id=category_id, is_active=True).first()

    def name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        qs = self.model.objects.filter(name__iexact=name)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return qs.exists()

    def jewellery_count(self, category: Category) -> int:
        return category.jewellery.count()


class JewelleryRepository(GenericRepository[Jewellery]):
    def __init__(self):
        super().__init__(Jewellery)

    def list(self, **filters):  # type: ignore[override]
        """Return jewellery with its category joined to avoid N+1 during DTO mapping."""
        return self.model.objects.filter(**filters).select_related("category")

    def get(self, **filters):
        return self.list(**filters).first()

    def list_for_category(self, category_id: Optional[int]):
        if category_id is None:
            return self.list()
        return self.list(category_id=category_id)
