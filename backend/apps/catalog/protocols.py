from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.catalog.models import Category, Jewellery


class CacheBackendProtocol(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any, timeout: Optional[int] = ...) -> None: ...


class CategoryRepositoryProtocol(Protocol):
    def list_active(self) -> Iterable["Category"]: ...

    def get_active(self, category_id: int) -> Optional["Category"]: ...

    def get(self, **filters) -> Optional["Category"]: ...

    def name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool: ...

    def create(self, **data) -> "Category": ...

    def update(self, category: "Category", **data) -> "Category": ...

    def jewellery_count(self, category: "Category") -> int: ...


class JewelleryRepositoryProtocol(Protocol):
    def list(self, **filters) -> Iterable["Jewellery"]: ...

    def list_for_category(self, category_id: Optional[int]) -> Iterable["Jewellery"]: ...

    def get(self, **filters) -> Optional["Jewellery"]: ...

    def create(self, **data) -> "Jewellery": ...

    def update(self, item: "Jewellery", **data) -> "Jewellery": ...

    def delete(self, item: "Jewellery") -> None: ...
