from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import service_error_response
from apps.catalog.images import image_base_url
from apps.common import get_logger
from .commands import AddToCartCommand, UpdateCartItemCommand
from .container import build_cart_service
from .serializers import (
    AddToCartSerializer,
    CartMutationResponseSerializer,
    CartSerializer,
    UpdateCartItemSerializer,
)

logger = get_logger(__name__).bind(component="carts", layer="view")


def _cart_message(message: str, dto) -> Response:
    return Response({"message": message, "cart": CartSerializer(dto).data})


@extend_schema(tags=["Cart"])
class CartView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(summary="Get own cart", responses={200: CartSerializer})
    def get(self, request):
        self.log.debug("Fetching cart", user_id=request.user.id)
        dto = self.service.get_cart(request.user.id, base_url=image_base_url(request))
        return Response(CartSerializer(dto).data)


@extend_schema(tags=["Cart"])
class CartAddView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartAddView")

    @extend_schema(
        summary="Add jewellery to cart",
        description="Adding a piece that is already in the cart increases its quantity.",
        request=AddToCartSerializer,
        responses={
            200: CartMutationResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = AddToCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = AddToCartCommand.from_validated(serializer.validated_data)
        dto, error = self.service.add_item(
            request.user.id, command, base_url=image_base_url(request)
        )
        if error:
            return service_error_response(error)
        return _cart_message("Item added to cart successfully", dto)


@extend_schema(tags=["Cart"])
class CartItemUpdateView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartItemUpdateView")

    @extend_schema(
        summary="Set cart item quantity",
        description="A quantity of zero or less removes the item.",
        parameters=[OpenApiParameter("item_id", int, OpenApiParameter.PATH)],
        request=UpdateCartItemSerializer,
        responses={
            200: CartMutationResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, item_id: int):
        serializer = UpdateCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = UpdateCartItemCommand.from_validated(item_id, serializer.validated_data)
        dto, error = self.service.update_item(
            request.user.id, command, base_url=image_base_url(request)
        )
        if error:
            return service_error_response(error)
        return _cart_message("Cart updated successfully", dto)


@extend_schema(tags=["Cart"])
class CartItemDeleteView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartItemDeleteView")

    @extend_schema(
        summary="Remove cart item",
        parameters=[OpenApiParameter("item_id", int, OpenApiParameter.PATH)],
        responses={
            200: CartMutationResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, item_id: int):
        dto, error = self.service.remove_item(
            request.user.id, item_id, base_url=image_base_url(request)
        )
        if error:
            return service_error_response(error)
        return _cart_message("Item removed from cart", dto)


@extend_schema(tags=["Cart"])
class CartClearView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartClearView")

    @extend_schema(summary="Empty cart", responses={200: CartMutationResponseSerializer})
    def delete(self, request):
        self.log.info("Clearing cart", user_id=request.user.id)
        dto = self.service.clear_cart(request.user.id, base_url=image_base_url(request))
        return _cart_message("Cart cleared successfully", dto)
