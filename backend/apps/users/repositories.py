from typing import Optional

from django.db.models import Q

from apps.common.repository import GenericRepository
from .models import User, Address


class UserRepository(GenericRepository[User]):
    def __init__(self):
        super().__init__(User)

    def is_taken(self, *, username: str, email: str, exclude_id: int) -> bool:
        return (
            self.model.objects.filter(Q(username=username) | Q(email=email))
            .exclude(id=exclude_id)
            .exists()
        )


class AddressRepository(GenericRepository[Address]):
    def __init__(self):
        super().__init__(Address)

    def list_for_user(self, user_id: int):
        return self.model.objects.filter(user_id=user_id).order_by(
            "-is_default", "-created_at"
        )

    def clear_default(self, user_id: int, exclude_id: Optional[int] = None) -> int:
        qs = self.model.objects.filter(user_id=user_id, is_default=True)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return qs.update(is_default=False)
