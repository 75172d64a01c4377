from typing import Generic, Iterable, Optional, Type, TypeVar

from django.db import models

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    """Thin ORM gateway shared by the app repositories."""

    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def list(self, **filters) -> Iterable[T]:
        return self.model.objects.filter(**filters)

    def exists(self, **filters) -> bool:
        return self.model.objects.filter(**filters).exists()

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def update(self, obj: T, **data) -> T:
        """Assign ``data`` and write only those columns plus any ``auto_now`` stamps."""
        for k, v in data.items():
            setattr(obj, k, v)
        touched = list(data) + [
            f.name for f in self.model._meta.concrete_fields if getattr(f, "auto_now", False)
        ]
        obj.save(update_fields=touched)
        return obj

    def delete(self, obj: T) -> None:
        obj.delete()
