from __future__ import annotations

from typing import Any, Optional

from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login
from django.db.models import Q

from .protocols import AuthUserRepositoryProtocol


class DjangoAuthUserRepository(AuthUserRepositoryProtocol):
    def __init__(self) -> None:
        self.model = get_user_model()

    def identity_exists(self, *, username: str, email: str) -> bool:
        return self.model.objects.filter(
            Q(username=username) | Q(email__iexact=email)
        ).exists()

    def get_by_email(self, email: str) -> Optional[Any]:
        return self.model.objects.filter(email__iexact=email).first()

    def create_user(self, *, username: str, email: str, password: str):
        return self.model.objects.create_user(
            username=username, email=email, password=password
        )

    def set_password(self, user, raw_password: str) -> None:
        user.set_password(raw_password)
        user.save(update_fields=["password"])

    def record_login(self, user) -> None:
        update_last_login(None, user)
