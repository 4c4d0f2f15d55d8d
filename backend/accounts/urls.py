"""
Accounts app URL configuration.

Included in the project-level ``urls.py`` under ``api/``.

Endpoint Map
------------
Authentication
    POST   /auth/login                  → LoginView
    POST   /auth/register               → RegisterView
    POST   /auth/forgot-password        → ForgotPasswordView
    POST   /auth/reset-password         → ResetPasswordView
    POST   /auth/logout                 → LogoutView
    GET    /auth/me                     → MeView

Current User Profile
    PUT    /profile                     → ProfileView

User Management (admin)
    GET    /users                       → UserViewSet.list
    GET    /users/{id}                  → UserViewSet.retrieve
    DELETE /users/{id}                  → UserViewSet.destroy
"""

from django.urls import include, path, re_path

from core.routers import OptionalSlashRouter

from .views import (
    ForgotPasswordView,
    LoginView,
    LogoutView,
    MeView,
    ProfileView,
    RegisterView,
    ResetPasswordView,
    UserViewSet,
)

app_name = "accounts"

router = OptionalSlashRouter()
router.register(r"users", UserViewSet, basename="user")

urlpatterns = [
    # ── Authentication ───────────────────────────────────────────────
    re_path(r"^auth/login/?$", LoginView.as_view(), name="login"),
    re_path(r"^auth/register/?$", RegisterView.as_view(), name="register"),
    re_path(r"^auth/forgot-password/?$", ForgotPasswordView.as_view(), name="forgot-password"),
    re_path(r"^auth/reset-password/?$", ResetPasswordView.as_view(), name="reset-password"),
    re_path(r"^auth/logout/?$", LogoutView.as_view(), name="logout"),
    re_path(r"^auth/me/?$", MeView.as_view(), name="me"),

    # ── Current User Profile ─────────────────────────────────────────
    re_path(r"^profile/?$", ProfileView.as_view(), name="profile"),

    # ── Router-registered viewsets (users) ───────────────────────────
    path("", include(router.urls)),
]
