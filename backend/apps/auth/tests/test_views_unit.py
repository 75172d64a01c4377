import types
import unittest
from unittest.mock import Mock, patch

from rest_framework import status
from rest_framework.test import APIRequestFactory, force_authenticate

from apps.auth.dtos import AuthResultDTO, AuthUserDTO
from apps.auth.views import ChangePasswordView, LoginView, LogoutView, RegisterView


def make_result(user_id=1):
    return AuthResultDTO(
        token="access",
        refresh="refresh",
        user=AuthUserDTO(id=user_id, username="glowfan", email="glow@example.com"),
    )


class AuthViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def test_register_returns_201_with_tokens(self):
        service = Mock()
        service.register.return_value = (make_result(), None)
        with patch.object(RegisterView, "service", service):
            request = self.factory.post(
                "/api/user/register",
                {"username": "glowfan", "email": "Glow@Example.com", "password": "Secret1!"},
                format="json",
            )
            response = RegisterView.as_view()(request)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["token"], "access")
        self.assertEqual(response.data["user"]["username"], "glowfan")
        command = service.register.call_args[0][0]
        self.assertEqual(command.email, "glow@example.com")

    def test_register_rejects_weak_password(self):
        service = Mock()
        with patch.object(RegisterView, "service", service):
            request = self.factory.post(
                "/api/user/register",
                {"username": "glowfan", "email": "glow@example.com", "password": "weak"},
                format="json",
            )
            response = RegisterView.as_view()(request)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password", response.data["error"]["details"])
        service.register.assert_not_called()

    def test_register_duplicate_is_conflict(self):
        service = Mock()
        service.register.return_value = (
            None,
            ("CONFLICT", "Username or email already exists.", None),
        )
        with patch.object(RegisterView, "service", service):
            request = self.factory.post(
                "/api/user/register",
                {"username": "glowfan", "email": "glow@example.com", "password": "Secret1!"},
                format="json",
            )
            response = RegisterView.as_view()(request)
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_login_failure_is_unauthorized(self):
        service = Mock()
        service.login.return_value = (
            None,
            ("UNAUTHORIZED", "Invalid email or password", None),
        )
        with patch.object(LoginView, "service", service):
            request = self.factory.post(
                "/api/user/login",
                {"email": "glow@example.com", "password": "nope"},
                format="json",
            )
            response = LoginView.as_view()(request)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"]["message"], "Invalid email or password")

    def test_login_success(self):
        service = Mock()
        service.login.return_value = (make_result(3), None)
        with patch.object(LoginView, "service", service):
            request = self.factory.post(
                "/api/user/login",
                {"email": "glow@example.com", "password": "Secret1!"},
                format="json",
            )
            response = LoginView.as_view()(request)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["user"]["id"], 3)
        service.login.assert_called_once_with("glow@example.com", "Secret1!")

    def test_logout_passes_refresh_token(self):
        service = Mock()
        service.logout.return_value = None
        user = types.SimpleNamespace(id=5, is_authenticated=True)
        with patch.object(LogoutView, "service", service):
            request = self.factory.post(
                "/api/user/logout", {"refresh": "abc"}, format="json"
            )
            force_authenticate(request, user=user)
            response = LogoutView.as_view()(request)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        service.logout.assert_called_once_with("abc", 5)

    def test_change_password_maps_camel_case(self):
        service = Mock()
        service.change_password.return_value = (True, None)
        with patch.object(ChangePasswordView, "service", service):
            request = self.factory.post(
                "/api/user/change-password",
                {
                    "email": "glow@example.com",
                    "oldPassword": "Secret1!",
                    "newPassword": "Brand2New!",
                },
                format="json",
            )
            response = ChangePasswordView.as_view()(request)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Password changed successfully")
        command = service.change_password.call_args[0][0]
        self.assertEqual(command.old_password, "Secret1!")
        self.assertEqual(command.new_password, "Brand2New!")
