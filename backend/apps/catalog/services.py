from __future__ import annotations

from typing import Any, List, Optional, Tuple, Type

from django.db.models import ProtectedError
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from apps.common import get_logger
from .commands import CategoryWriteCommand, JewelleryWriteCommand
from .dtos import CategoryDTO, JewelleryDTO
from .mappers import CategoryMapper, JewelleryMapper
from .protocols import (
    CacheBackendProtocol,
    CategoryRepositoryProtocol,
    JewelleryRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="catalog", layer="service")

ServiceError = Tuple[str, str, Optional[Any]]

JEWELLERY_CACHE_PREFIX = "jewellery:list"
JEWELLERY_CACHE_VERSION_KEY = f"{JEWELLERY_CACHE_PREFIX}:version"


class CatalogCacheMixin:
    """Versioned list cache: every catalog write bumps the version so stale keys are never read."""

    cache: CacheBackendProtocol
    _default_version = 1

    def _get_cache_version(self) -> int:
        v = self.cache.get(JEWELLERY_CACHE_VERSION_KEY)
        return v or self._default_version

    def _bump_cache_version(self) -> None:
        v = self._get_cache_version()
        # Version key should not expire
        self.cache.set(JEWELLERY_CACHE_VERSION_KEY, v + 1, timeout=None)
        self.logger.debug("Bumped jewellery cache version", new_version=v + 1)


class JewelleryService(CatalogCacheMixin):
    def __init__(
        self,
        jewellery: JewelleryRepositoryProtocol,
        categories: CategoryRepositoryProtocol,
        cache_backend: CacheBackendProtocol,
        disable_cache: bool = False,
    ):
        self.jewellery = jewellery
        self.categories = categories
        self.cache = cache_backend
        self.disable_cache = disable_cache
        self.logger = logger.bind(service="JewelleryService")

    def _cache_key(self, category_id: Optional[int]) -> str:
        version = self._get_cache_version()
        cat = category_id if category_id is not None else "all"
        return f"{JEWELLERY_CACHE_PREFIX}:v{version}:{cat}"

    def list_jewellery(
        self, category_id: Optional[int] = None, *, base_url: str
    ) -> List[JewelleryDTO]:
        self.logger.debug(
            "Listing jewellery",
            category_id=category_id,
            cache_enabled=not self.disable_cache,
        )
        if self.disable_cache:
            qs = self.jewellery.list_for_category(category_id)
            return JewelleryMapper.many_to_dto(qs, base_url=base_url)
        # Cached entries hold stored image names; resolved per request
        key = self._cache_key(category_id)
        data = self.cache.get(key)
        if data is None:
            self.logger.debug("Jewellery list cache miss", cache_key=key)
            qs = self.jewellery.list_for_category(category_id)
            data = JewelleryMapper.many_to_dto(qs, base_url=None)
            self.cache.set(key, data)
        else:
            self.logger.debug("Jewellery list cache hit", cache_key=key)
        return [JewelleryMapper.with_base_url(d, base_url) for d in data]

    def list_jewellery_paginated(
        self,
        request,
        *,
        category_id: Optional[int] = None,
        base_url: str,
        paginator_class: Optional[Type[PageNumberPagination]] = None,
        serializer_class=None,
        view=None,
    ) -> Response:
        paginator_cls = paginator_class or PageNumberPagination
        self.logger.debug("Building paginated jewellery list", category_id=category_id)
        queryset = self.jewellery.list_for_category(category_id)
        paginator = paginator_cls()
        page = paginator.paginate_queryset(queryset, request, view=view)
        data_source = page if page is not None else queryset
        dtos = JewelleryMapper.many_to_dto(data_source, base_url=base_url)
        if serializer_class is None:
            from .serializers import JewellerySerializer  # Avoid circular import

            serializer_class = JewellerySerializer
        serializer = serializer_class(dtos, many=True)
        if page is None:
            return Response(serializer.data)
        return paginator.get_paginated_response(serializer.data)

    def get_jewellery(
        self, jewellery_id: int, *, base_url: str
    ) -> Tuple[Optional[JewelleryDTO], Optional[ServiceError]]:
        self.logger.debug("Fetching jewellery", jewellery_id=jewellery_id)
        item = self.jewellery.get(id=jewellery_id)
        if not item:
            self.logger.info("Jewellery not found", jewellery_id=jewellery_id)
            return None, ("NOT_FOUND", "Jewellery not found", {"id": str(jewellery_id)})
        return JewelleryMapper.to_dto(item, base_url=base_url), None

    def _check_category(self, category_id: int) -> Optional[ServiceError]:
        if not self.categories.get_active(category_id):
            self.logger.warning("Jewellery write rejected: unknown category", category_id=category_id)
            return (
                "VALIDATION_ERROR",
                "Category not found",
                {"categoryId": str(category_id)},
            )
        return None

    def create_jewellery(
        self, command: JewelleryWriteCommand, *, base_url: str
    ) -> Tuple[Optional[JewelleryDTO], Optional[ServiceError]]:
        self.logger.info("Creating jewellery", name=command.name)
        error = self._check_category(command.category_id)
        if error:
            return None, error
        created = self.jewellery.create(**command.fields())
        self._bump_cache_version()
        item = self.jewellery.get(id=created.id) or created
        self.logger.info("Jewellery created", jewellery_id=item.id)
        return JewelleryMapper.to_dto(item, base_url=base_url), None

    def update_jewellery(
        self, jewellery_id: int, command: JewelleryWriteCommand, *, base_url: str
    ) -> Tuple[Optional[JewelleryDTO], Optional[ServiceError]]:
        self.logger.info("Updating jewellery", jewellery_id=jewellery_id)
        item = self.jewellery.get(id=jewellery_id)
        if not item:
            self.logger.warning("Jewellery update failed: not found", jewellery_id=jewellery_id)
            return None, ("NOT_FOUND", "Jewellery not found", {"id": str(jewellery_id)})
        error = self._check_category(command.category_id)
        if error:
            return None, error
        self.jewellery.update(item, **command.fields())
        self._bump_cache_version()
        item = self.jewellery.get(id=jewellery_id) or item
        self.logger.info("Jewellery updated", jewellery_id=jewellery_id)
        return JewelleryMapper.to_dto(item, base_url=base_url), None

    def delete_jewellery(self, jewellery_id: int) -> Tuple[bool, Optional[ServiceError]]:
        self.logger.info("Deleting jewellery", jewellery_id=jewellery_id)
        item = self.jewellery.get(id=jewellery_id)
        if not item:
            self.logger.warning("Jewellery deletion failed: not found", jewellery_id=jewellery_id)
            return False, ("NOT_FOUND", "Jewellery not found", {"id": str(jewellery_id)})
        try:
            self.jewellery.delete(item)
        except ProtectedError:
            self.logger.warning(
                "Jewellery deletion blocked by order history", jewellery_id=jewellery_id
            )
            return False, (
                "CONFLICT",
                "Jewellery is referenced by existing orders",
                {"id": str(jewellery_id)},
            )
        self._bump_cache_version()
        self.logger.info("Jewellery deleted", jewellery_id=jewellery_id)
        return True, None


class CategoryService(CatalogCacheMixin):
    def __init__(
        self,
        categories: CategoryRepositoryProtocol,
        jewellery: JewelleryRepositoryProtocol,
        cache_backend: CacheBackendProtocol,
    ):
        self.categories = categories
        self.jewellery = jewellery
        self.cache = cache_backend
        self.logger = logger.bind(service="CategoryService")

    def _not_found(self, category_id: int) -> ServiceError:
        return ("NOT_FOUND", "Category not found", {"id": str(category_id)})

    def _name_conflict(self) -> ServiceError:
        return ("CONFLICT", "Category with this name already exists", None)

    def list_categories(self) -> List[CategoryDTO]:
        self.logger.debug("Listing categories")
        return CategoryMapper.many_to_dto(self.categories.list_active())

    def get_category(
        self, category_id: int
    ) -> Tuple[Optional[CategoryDTO], Optional[ServiceError]]:
        self.logger.debug("Fetching category", category_id=category_id)
        category = self.categories.get_active(category_id)
        if not category:
            self.logger.info("Category not found", category_id=category_id)
            return None, self._not_found(category_id)
        return CategoryMapper.to_dto(category), None

    def list_category_jewellery(
        self, category_id: int, *, base_url: str
    ) -> Tuple[Optional[List[JewelleryDTO]], Optional[ServiceError]]:
        self.logger.debug("Listing jewellery for category", category_id=category_id)
        if not self.categories.get_active(category_id):
            self.logger.info("Category not found", category_id=category_id)
            return None, self._not_found(category_id)
        items = self.jewellery.list_for_category(category_id)
        return JewelleryMapper.many_to_dto(items, base_url=base_url), None

    def create_category(
        self, command: CategoryWriteCommand
    ) -> Tuple[Optional[CategoryDTO], Optional[ServiceError]]:
        self.logger.info("Creating category", name=command.name)
        if self.categories.name_taken(command.name):
            self.logger.warning("Category create rejected: duplicate name", name=command.name)
            return None, self._name_conflict()
        category = self.categories.create(is_active=True, **command.fields())
        self.logger.info("Category created", category_id=category.id)
        return CategoryMapper.to_dto(category), None

    def update_category(
        self, category_id: int, command: CategoryWriteCommand
    ) -> Tuple[Optional[CategoryDTO], Optional[ServiceError]]:
        self.logger.info("Updating category", category_id=category_id)
        category = self.categories.get(id=category_id)
        if not category:
            self.logger.warning("Category update failed: not found", category_id=category_id)
            return None, self._not_found(category_id)
        if self.categories.name_taken(command.name, exclude_id=category_id):
            self.logger.warning(
                "Category update rejected: duplicate name",
                category_id=category_id,
                name=command.name,
            )
            return None, self._name_conflict()
        category = self.categories.update(category, **command.fields())
        self._bump_cache_version()
        self.logger.info("Category updated", category_id=category_id)
        return CategoryMapper.to_dto(category), None

    def delete_category(self, category_id: int) -> Tuple[bool, Optional[ServiceError]]:
        """Soft delete; refused while jewellery still points at the category."""
        self.logger.info("Deleting category", category_id=category_id)
        category = self.categories.get(id=category_id)
        if not category:
            self.logger.warning("Category deletion failed: not found", category_id=category_id)
            return False, self._not_found(category_id)
        count = self.categories.jewellery_count(category)
        if count:
            self.logger.warning(
                "Category deletion blocked by jewellery",
                category_id=category_id,
                jewellery_count=count,
            )
            return False, (
                "VALIDATION_ERROR",
                "Cannot delete category with associated jewellery items",
                {"jewelleryCount": count},
            )
        self.categories.update(category, is_active=False)
        self._bump_cache_version()
        self.logger.info("Category deleted", category_id=category_id)
        return True, None
