from django.urls import path

from .views import (
    ChangePasswordView,
    LoginView,
    LogoutView,
    MeView,
    RefreshView,
    RegisterView,
)

urlpatterns = [
    path("user/register", RegisterView.as_view(), name="auth-register"),
    path("user/login", LoginView.as_view(), name="auth-login"),
    path("user/refresh-token", RefreshView.as_view(), name="auth-refresh"),
    path("user/logout", LogoutView.as_view(), name="auth-logout"),
    path("user/me", MeView.as_view(), name="auth-me"),
    path(
        "user/change-password",
        ChangePasswordView.as_view(),
        name="user-change-password",
    ),
]
