from dataclasses import asdict

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenRefreshView

from apps.api.schemas import ErrorResponseSerializer, MessageResponseSerializer
from apps.api.utils import service_error_response
from apps.common import get_logger
from .commands import ChangePasswordCommand, RegisterCommand
from .container import (
    build_login_service,
    build_password_service,
    build_registration_service,
    build_session_service,
)
from .serializers import (
    AuthResponseSerializer,
    ChangePasswordRequestSerializer,
    LoginRequestSerializer,
    LogoutRequestSerializer,
    MeResponseSerializer,
    RegisterRequestSerializer,
)

logger = get_logger(__name__).bind(component="auth", layer="view")


@extend_schema(tags=["Auth"])
class RegisterView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_registration_service()
    log = logger.bind(view="RegisterView")

    @extend_schema(
        summary="Register user",
        request=RegisterRequestSerializer,
        responses={
            201: AuthResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = RegisterCommand.from_validated(serializer.validated_data)
        self.log.info("Processing registration request", username=command.username)
        result, error = self.service.register(command)
        if error:
            self.log.warning("Registration failed", code=error[0], detail=error[1])
            return service_error_response(error)
        self.log.info("Registration completed", user_id=result.user.id)
        return Response(
            AuthResponseSerializer(asdict(result)).data, status=status.HTTP_201_CREATED
        )


@extend_schema(tags=["Auth"])
class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_login_service()
    log = logger.bind(view="LoginView")

    @extend_schema(
        summary="Login with email and password",
        request=LoginRequestSerializer,
        responses={
            200: AuthResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result, error = self.service.login(
            serializer.validated_data["email"], serializer.validated_data["password"]
        )
        if error:
            return service_error_response(error)
        return Response(AuthResponseSerializer(asdict(result)).data)


@extend_schema(tags=["Auth"], summary="Refresh JWT")
class RefreshView(TokenRefreshView):
    permission_classes = [AllowAny]


@extend_schema(
    tags=["Auth"], summary="Get current user", responses={200: MeResponseSerializer}
)
class MeView(APIView):
    permission_classes = [IsAuthenticated]
    log = logger.bind(view="MeView")

    def get(self, request):
        self.log.debug("Returning current user profile", user_id=request.user.id)
        return Response(MeResponseSerializer(request.user).data)


@extend_schema(tags=["Auth"])
class LogoutView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_session_service()
    log = logger.bind(view="LogoutView")

    @extend_schema(
        summary="Logout (blacklist refresh)",
        request=LogoutRequestSerializer,
        responses={
            200: MessageResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        actor_id = getattr(request.user, "id", None)
        error = self.service.logout(request.data.get("refresh"), actor_id)
        if error:
            return service_error_response(error)
        return Response({"message": "Logged out"}, status=status.HTTP_200_OK)


@extend_schema(tags=["Auth"])
class ChangePasswordView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_password_service()
    log = logger.bind(view="ChangePasswordView")

    @extend_schema(
        summary="Change password with email and current password",
        request=ChangePasswordRequestSerializer,
        responses={
            200: MessageResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = ChangePasswordRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = ChangePasswordCommand.from_validated(serializer.validated_data)
        _, error = self.service.change_password(command)
        if error:
            return service_error_response(error)
        return Response({"message": "Password changed successfully"})
