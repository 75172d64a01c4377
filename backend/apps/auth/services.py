from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from django.db import IntegrityError
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from apps.common import get_logger
from .commands import ChangePasswordCommand, RegisterCommand
from .dtos import AuthResultDTO, AuthUserDTO
from .protocols import AuthUserRepositoryProtocol
from .tokens import issue_tokens

logger = get_logger(__name__).bind(component="auth", layer="service")

ServiceError = Tuple[str, str, Optional[Any]]
TokenIssuer = Callable[[Any], Dict[str, str]]

DUPLICATE_IDENTITY = ("CONFLICT", "Username or email already exists.", None)
INVALID_CREDENTIALS = ("UNAUTHORIZED", "Invalid email or password", None)
INVALID_PASSWORD_CHANGE = (
    "VALIDATION_ERROR",
    "Invalid email or current password",
    None,
)


def _auth_result(user, tokens: Dict[str, str]) -> AuthResultDTO:
    return AuthResultDTO(
        token=tokens["token"],
        refresh=tokens["refresh"],
        user=AuthUserDTO(id=user.id, username=user.username, email=user.email),
    )


class RegistrationService:
    def __init__(
        self,
        users: AuthUserRepositoryProtocol,
        token_issuer: TokenIssuer = issue_tokens,
    ):
        self.users = users
        self.token_issuer = token_issuer
        self.logger = logger.bind(service="RegistrationService")

    def register(
        self, command: RegisterCommand
    ) -> Tuple[Optional[AuthResultDTO], Optional[ServiceError]]:
        self.logger.debug(
            "Received registration request",
            username=command.username,
            email=command.email,
        )
        if self.users.identity_exists(username=command.username, email=command.email):
            self.logger.info(
                "Registration rejected: identity already exists",
                username=command.username,
            )
            return None, DUPLICATE_IDENTITY
        try:
            user = self.users.create_user(
                username=command.username,
                email=command.email,
                password=command.password,
            )
        except IntegrityError as exc:
            self.logger.warning(
                "Registration lost a uniqueness race",
                username=command.username,
                error=str(exc),
            )
            return None, DUPLICATE_IDENTITY
        self.logger.info(
            "User registered successfully", user_id=user.id, username=user.username
        )
        return _auth_result(user, self.token_issuer(user)), None


class LoginService:
    def __init__(
        self,
        users: AuthUserRepositoryProtocol,
        token_issuer: TokenIssuer = issue_tokens,
    ):
        self.users = users
        self.token_issuer = token_issuer
        self.logger = logger.bind(service="LoginService")

    def login(
        self, email: str, password: str
    ) -> Tuple[Optional[AuthResultDTO], Optional[ServiceError]]:
        normalized = email.strip().lower()
        user = self.users.get_by_email(normalized)
        if user is None or not user.check_password(password) or not user.is_active:
            self.logger.warning("Login rejected", email=normalized)
            return None, INVALID_CREDENTIALS
        self.users.record_login(user)
        self.logger.info("User logged in", user_id=user.id)
        return _auth_result(user, self.token_issuer(user)), None


class PasswordService:
    def __init__(self, users: AuthUserRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="PasswordService")

    def change_password(
        self, command: ChangePasswordCommand
    ) -> Tuple[bool, Optional[ServiceError]]:
        user = self.users.get_by_email(command.email)
        if user is None or not user.check_password(command.old_password):
            self.logger.warning("Password change rejected", email=command.email)
            return False, INVALID_PASSWORD_CHANGE
        self.users.set_password(user, command.new_password)
        self.logger.info("Password changed", user_id=user.id)
        return True, None


class SessionService:
    def __init__(self):
        self.logger = logger.bind(service="SessionService")

    def logout(self, refresh_token: str, actor_id: Optional[int]) -> Optional[ServiceError]:
        if not refresh_token:
            self.logger.warning("Logout rejected: missing refresh token", actor_id=actor_id)
            return ("VALIDATION_ERROR", "Invalid token", {"refresh": None})
        try:
            token = RefreshToken(refresh_token)
            token.blacklist()
        except TokenError as exc:
            self.logger.warning(
                "Logout failed: token error",
                actor_id=actor_id,
                error=str(exc),
            )
            return ("VALIDATION_ERROR", "Invalid token", {"error": str(exc)})
        self.logger.info("User logged out", actor_id=actor_id)
        return None
