"""
Accounts app views.

All views follow the **Thin View** pattern: validate input via
serializers, delegate to the service layer, and return the result
wrapped in a DRF ``Response``.  **No business logic** resides here.

View Map
--------
- ``LoginView``           — POST /auth/login
- ``RegisterView``        — POST /auth/register
- ``ForgotPasswordView``  — POST /auth/forgot-password
- ``ResetPasswordView``   — POST /auth/reset-password
- ``LogoutView``          — POST /auth/logout
- ``MeView``              — GET  /auth/me
- ``ProfileView``         — PUT  /profile
- ``UserViewSet``         — /users  (list, retrieve, destroy; admin only)

The public auth endpoints carry no authentication classes, so they work
without a session and are not subject to CSRF checks.
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAdminRole
from core.serializers import MessageSerializer
from core.views import ResourceViewSet

from .serializers import (
    ForgotPasswordSerializer,
    LoginRequestSerializer,
    ProfileUpdateSerializer,
    RegisterRequestSerializer,
    ResetPasswordSerializer,
    UserFilterSerializer,
    UserSerializer,
)
from .services import (
    AuthenticationService,
    PasswordResetService,
    ProfileService,
    UserRegistrationService,
    UserService,
)

UserEnvelopeSerializer = inline_serializer(
    name="UserEnvelope",
    fields={"user": UserSerializer()},
)


# ═══════════════════════════════════════════════════════════════════
#  Authentication Views
# ═══════════════════════════════════════════════════════════════════


class LoginView(APIView):
    """
    POST /api/auth/login

    Verifies credentials and issues the ``police.sid`` session cookie.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Log in",
        description="Authenticate with username (or e-mail) and password and start a session.",
        request=LoginRequestSerializer,
        responses={
            200: OpenApiResponse(response=UserEnvelopeSerializer, description="Logged in."),
            400: OpenApiResponse(description="Missing username or password."),
            401: OpenApiResponse(description="Invalid credentials."),
            403: OpenApiResponse(description="Account is deactivated."),
        },
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = AuthenticationService.login(
            request._request,
            serializer.validated_data["username"],
            serializer.validated_data["password"],
        )
        return Response({"user": UserSerializer(user).data}, status=status.HTTP_200_OK)


class RegisterView(APIView):
    """
    POST /api/auth/register

    Public endpoint.  Creates an account with the ``user`` role and does
    not log it in.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Register a new account",
        request=RegisterRequestSerializer,
        responses={
            201: OpenApiResponse(response=UserEnvelopeSerializer, description="Account created."),
            400: OpenApiResponse(description="Validation error."),
            409: OpenApiResponse(description="Username or e-mail already taken."),
        },
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserRegistrationService.register_user(serializer.validated_data)
        return Response({"user": UserSerializer(user).data}, status=status.HTTP_201_CREATED)


class ForgotPasswordView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Request a password reset token",
        description=(
            "Always answers with the same message.  The token is included "
            "only when the server exposes reset tokens (development)."
        ),
        request=ForgotPasswordSerializer,
        responses={
            200: inline_serializer(
                name="ForgotPasswordResponse",
                fields={
                    "message": serializers.CharField(),
                    "token": serializers.CharField(required=False),
                },
            ),
        },
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        serializer = ForgotPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payload = PasswordResetService.request_reset(serializer.validated_data["username"])
        return Response(payload, status=status.HTTP_200_OK)


class ResetPasswordView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Reset a password with a token",
        request=ResetPasswordSerializer,
        responses={
            200: OpenApiResponse(response=MessageSerializer, description="Password changed."),
            400: OpenApiResponse(description="Invalid or expired token, or weak password."),
        },
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        PasswordResetService.reset_password(
            serializer.validated_data["token"],
            serializer.validated_data["password"],
        )
        return Response(
            {"message": "Password has been reset successfully"},
            status=status.HTTP_200_OK,
        )


class LogoutView(APIView):
    """
    POST /api/auth/logout

    Destroys the session, if any.  Succeeds for anonymous callers too.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Log out",
        request=None,
        responses={200: MessageSerializer},
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        AuthenticationService.logout(request._request)
        return Response({"message": "Logged out successfully"}, status=status.HTTP_200_OK)


# ═══════════════════════════════════════════════════════════════════
#  Current User Views
# ═══════════════════════════════════════════════════════════════════


class MeView(APIView):
    """GET /api/auth/me → the session user."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Current user",
        responses={
            200: UserEnvelopeSerializer,
            401: OpenApiResponse(description="Not logged in."),
        },
        tags=["Auth"],
    )
    def get(self, request: Request) -> Response:
        user = UserService.get(request.user.pk)
        return Response({"user": UserSerializer(user).data}, status=status.HTTP_200_OK)


class ProfileView(APIView):
    """
    PUT /api/profile

    Merges the submitted profile fields into the session user's record.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Update own profile",
        request=ProfileUpdateSerializer,
        responses={
            200: UserEnvelopeSerializer,
            400: OpenApiResponse(description="Validation error."),
            401: OpenApiResponse(description="Not logged in."),
            409: OpenApiResponse(description="E-mail already taken."),
        },
        tags=["Auth"],
    )
    def put(self, request: Request) -> Response:
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserService.get(request.user.pk)
        user = ProfileService.update_profile(user, dict(serializer.validated_data))
        return Response({"user": UserSerializer(user).data}, status=status.HTTP_200_OK)


# ═══════════════════════════════════════════════════════════════════
#  User Management ViewSet
# ═══════════════════════════════════════════════════════════════════


@extend_schema_view(
    list=extend_schema(
        summary="List users",
        parameters=[
            OpenApiParameter(name="role", type=str, location=OpenApiParameter.QUERY, description="Filter by role: 'admin' or 'user'."),
            OpenApiParameter(name="isActive", type=bool, location=OpenApiParameter.QUERY, description="Filter by activation state."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Partial match on username, e-mail, name or badge number."),
        ],
        tags=["Users"],
    ),
    retrieve=extend_schema(summary="Retrieve a user", tags=["Users"]),
    destroy=extend_schema(
        summary="Delete a user",
        description="The built-in administrator (id 1) cannot be deleted.",
        responses={
            200: MessageSerializer,
            400: OpenApiResponse(description="Protected account."),
            404: OpenApiResponse(description="User not found."),
        },
        tags=["Users"],
    ),
)
class UserViewSet(ResourceViewSet):
    """
    /api/users

    Administrative user management.  Accounts are created through
    registration (or ``seed_admin``), so only list, retrieve and delete
    are exposed.
    """

    permission_classes = [IsAdminRole]
    http_method_names = ["get", "delete", "head", "options"]
    serializer_class = UserSerializer
    filter_serializer_class = UserFilterSerializer
    store = UserService
    singular = "user"
    plural = "users"
