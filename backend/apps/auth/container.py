from __future__ import annotations

from .repositories import DjangoAuthUserRepository
from .services import LoginService, PasswordService, RegistrationService, SessionService


def build_registration_service() -> RegistrationService:
    return RegistrationService(users=DjangoAuthUserRepository())


def build_login_service() -> LoginService:
    return LoginService(users=DjangoAuthUserRepository())


def build_password_service() -> PasswordService:
    return PasswordService(users=DjangoAuthUserRepository())


def build_session_service() -> SessionService:
    return SessionService()
