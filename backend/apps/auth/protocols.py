from __future__ import annotations

from typing import Any, Optional, Protocol


class AuthUserRepositoryProtocol(Protocol):
    def identity_exists(self, *, username: str, email: str) -> bool: ...

    def get_by_email(self, email: str) -> Optional[Any]: ...

    def create_user(self, *, username: str, email: str, password: str) -> Any: ...

    def set_password(self, user: Any, raw_password: str) -> None: ...

    def record_login(self, user: Any) -> None: ...
