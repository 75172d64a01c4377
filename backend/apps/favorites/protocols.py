from __future__ import annotations

from typing import Iterable, Optional, Protocol, Set, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.catalog.models import Jewellery
    from apps.favorites.models import Favorite


class FavoriteRepositoryProtocol(Protocol):
    def list_for_user(self, user_id: int) -> Iterable["Favorite"]:
        ...

    def get(self, **filters) -> Optional["Favorite"]:
        ...

    def exists(self, **filters) -> bool:
        ...

    def create(self, **data) -> "Favorite":
        ...

    def delete(self, favorite: "Favorite") -> None:
        ...

    def favorited_ids(self, user_id: int, jewellery_ids: Iterable[int]) -> Set[int]:
        ...


class JewelleryLookupProtocol(Protocol):
    def get(self, **filters) -> Optional["Jewellery"]:
        ...
