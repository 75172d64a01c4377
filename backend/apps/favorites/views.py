from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import service_error_response
from apps.catalog.images import image_base_url
from apps.common import get_logger
from .container import build_favorite_service
from .serializers import (
    BatchStatusRequestSerializer,
    FavoriteSerializer,
    FavoriteStatusSerializer,
    FavoriteToggleResponseSerializer,
)

logger = get_logger(__name__).bind(component="favorites", layer="view")

JEWELLERY_ID_PARAM = OpenApiParameter("jewellery_id", int, OpenApiParameter.PATH)


@extend_schema(tags=["Favorites"])
class FavoriteListView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_favorite_service()
    log = logger.bind(view="FavoriteListView")

    @extend_schema(
        summary="List own favorites, newest first",
        responses={200: FavoriteSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Listing favorites", user_id=request.user.id)
        data = self.service.list_favorites(request.user.id, base_url=image_base_url(request))
        return Response(FavoriteSerializer(data, many=True).data)


@extend_schema(tags=["Favorites"])
class FavoriteDetailView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_favorite_service()
    log = logger.bind(view="FavoriteDetailView")

    @extend_schema(
        summary="Add jewellery to favorites",
        parameters=[JEWELLERY_ID_PARAM],
        request=None,
        responses={
            201: FavoriteToggleResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request, jewellery_id: int):
        _, error = self.service.add_favorite(request.user.id, jewellery_id)
        if error:
            return service_error_response(error)
        return Response(
            {"message": "Item added to favorites successfully.", "isFavorited": True},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        summary="Remove jewellery from favorites",
        parameters=[JEWELLERY_ID_PARAM],
        responses={
            200: FavoriteToggleResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, jewellery_id: int):
        _, error = self.service.remove_favorite(request.user.id, jewellery_id)
        if error:
            return service_error_response(error)
        return Response(
            {"message": "Item removed from favorites successfully.", "isFavorited": False}
        )


@extend_schema(tags=["Favorites"])
class FavoriteStatusView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_favorite_service()

    @extend_schema(
        summary="Check whether a piece is favorited",
        parameters=[JEWELLERY_ID_PARAM],
        responses={200: FavoriteStatusSerializer},
    )
    def get(self, request, jewellery_id: int):
        return Response(
            {
                "jewelleryId": jewellery_id,
                "isFavorited": self.service.is_favorited(request.user.id, jewellery_id),
            }
        )


@extend_schema(tags=["Favorites"])
class FavoriteBatchStatusView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_favorite_service()
    log = logger.bind(view="FavoriteBatchStatusView")

    @extend_schema(
        summary="Favorite status for many pieces",
        description='Body is a JSON list of ids or {"jewelleryIds": [...]}.',
        request=BatchStatusRequestSerializer,
        responses={
            200: OpenApiResponse(
                response=OpenApiTypes.OBJECT,
                description="Map of jewellery id to favorite flag",
            ),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = BatchStatusRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ids = serializer.validated_data["jewelleryIds"]
        return Response(self.service.batch_status(request.user.id, ids))
