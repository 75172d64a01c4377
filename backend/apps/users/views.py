from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer, MessageResponseSerializer
from apps.api.utils import service_error_response
from apps.common import get_logger
from .commands import AddressCommand, ProfileUpdateCommand
from .container import build_address_service, build_user_service
from .serializers import (
    AddressMutationResponseSerializer,
    AddressSerializer,
    AddressWriteSerializer,
    UserEnvelopeSerializer,
    UserSerializer,
    UserUpdateSerializer,
)

logger = get_logger(__name__).bind(component="users", layer="view")


@extend_schema(tags=["Users"])
class UserDetailView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_user_service()
    log = logger.bind(view="UserDetailView")

    @extend_schema(
        summary="Get own profile by ID",
        parameters=[OpenApiParameter("user_id", int, OpenApiParameter.PATH)],
        responses={
            200: UserSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, user_id: int):
        self.log.debug("Fetching user detail", user_id=user_id, actor_id=request.user.id)
        dto, error = self.service.get_profile(request.user.id, user_id)
        if error:
            return service_error_response(error)
        return Response(UserSerializer(dto).data)

    @extend_schema(
        summary="Update own username and email",
        parameters=[OpenApiParameter("user_id", int, OpenApiParameter.PATH)],
        request=UserUpdateSerializer,
        responses={
            200: UserEnvelopeSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, user_id: int):
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = ProfileUpdateCommand.from_validated(serializer.validated_data)
        self.log.info("Updating user profile", user_id=user_id, actor_id=request.user.id)
        dto, error = self.service.update_profile(request.user.id, user_id, command)
        if error:
            return service_error_response(error)
        return Response({"user": UserSerializer(dto).data})


@extend_schema(tags=["Addresses"])
class AddressListView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_address_service()
    log = logger.bind(view="AddressListView")

    @extend_schema(
        summary="List own addresses (default first, newest first)",
        responses={200: AddressSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Listing addresses", user_id=request.user.id)
        addresses = self.service.list_addresses(request.user.id)
        return Response(AddressSerializer(addresses, many=True).data)

    @extend_schema(
        summary="Create address",
        request=AddressWriteSerializer,
        responses={
            201: AddressMutationResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = AddressWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = AddressCommand.from_validated(serializer.validated_data)
        dto, error = self.service.create_address(request.user.id, command)
        if error:
            return service_error_response(error)
        return Response(
            {
                "message": "Address created successfully",
                "address": AddressSerializer(dto).data,
            },
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Addresses"])
class AddressDetailView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_address_service()
    log = logger.bind(view="AddressDetailView")

    @extend_schema(
        summary="Replace address",
        parameters=[OpenApiParameter("address_id", int, OpenApiParameter.PATH)],
        request=AddressWriteSerializer,
        responses={
            200: AddressMutationResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, address_id: int):
        serializer = AddressWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = AddressCommand.from_validated(serializer.validated_data)
        dto, error = self.service.update_address(request.user.id, address_id, command)
        if error:
            return service_error_response(error)
        return Response(
            {
                "message": "Address updated successfully",
                "address": AddressSerializer(dto).data,
            }
        )

    @extend_schema(
        summary="Delete address",
        parameters=[OpenApiParameter("address_id", int, OpenApiParameter.PATH)],
        responses={
            200: MessageResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, address_id: int):
        _, error = self.service.delete_address(request.user.id, address_id)
        if error:
            self.log.warning(
                "Address delete rejected", address_id=address_id, code=error[0]
            )
            return service_error_response(error)
        return Response({"message": "Address deleted successfully"})
