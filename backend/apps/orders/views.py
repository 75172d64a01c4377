from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import service_error_response
from apps.catalog.images import image_base_url
from apps.common import get_logger
from .commands import CreateOrderCommand
from .container import build_order_service
from .serializers import (
    CreateOrderSerializer,
    OrderCreatedResponseSerializer,
    OrderSerializer,
)

logger = get_logger(__name__).bind(component="orders", layer="view")


@extend_schema(tags=["Orders"])
class OrderCreateView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_order_service()
    log = logger.bind(view="OrderCreateView")

    @extend_schema(
        summary="Place an order from the cart",
        description=(
            "Snapshots current prices, creates the order and empties the cart "
            "in one transaction."
        ),
        request=CreateOrderSerializer,
        responses={
            201: OrderCreatedResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = CreateOrderCommand.from_validated(serializer.validated_data)
        dto, error = self.service.create_order(
            request.user.id, command, base_url=image_base_url(request)
        )
        if error:
            self.log.warning("Order creation rejected", code=error[0], user_id=request.user.id)
            return service_error_response(error)
        return Response(
            {"message": "Order created successfully", "order": OrderSerializer(dto).data},
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Orders"])
class OrderListView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_order_service()
    log = logger.bind(view="OrderListView")

    @extend_schema(
        summary="List own orders, newest first",
        responses={200: OrderSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Listing orders", user_id=request.user.id)
        data = self.service.list_orders(request.user.id, base_url=image_base_url(request))
        return Response(OrderSerializer(data, many=True).data)


@extend_schema(tags=["Orders"])
class OrderDetailView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_order_service()
    log = logger.bind(view="OrderDetailView")

    @extend_schema(
        summary="Get own order",
        parameters=[OpenApiParameter("order_id", int, OpenApiParameter.PATH)],
        responses={
            200: OrderSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, order_id: int):
        dto, error = self.service.get_order(
            request.user.id, order_id, base_url=image_base_url(request)
        )
        if error:
            return service_error_response(error)
        return Response(OrderSerializer(dto).data)
