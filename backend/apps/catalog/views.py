from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.permissions import IsStaffOrReadOnly
from apps.api.schemas import (
    ErrorResponseSerializer,
    MessageResponseSerializer,
    paginated_response,
)
from apps.api.utils import service_error_response
from apps.common import get_logger
from .commands import CategoryWriteCommand, JewelleryWriteCommand
from .container import build_category_service, build_jewellery_service
from .images import image_base_url
from .pagination import JewelleryListPagination
from .serializers import (
    CategoryMutationResponseSerializer,
    CategorySerializer,
    CategoryWriteSerializer,
    JewelleryListQuerySerializer,
    JewellerySerializer,
    JewelleryWriteSerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Jewellery"])
class JewelleryListView(APIView):
    permission_classes = [IsStaffOrReadOnly]
    service = build_jewellery_service()
    log = logger.bind(view="JewelleryListView")

    @extend_schema(
        operation_id="jewellery_list",
        summary="List jewellery",
        description=(
            "Plain list by default, served from cache. "
            "Send ?limit (and optionally ?page) for a paginated envelope."
        ),
        parameters=[
            OpenApiParameter(
                name="categoryId",
                description="Filter by category id",
                required=False,
                type=int,
            ),
            OpenApiParameter(
                name="limit", description="Page size", required=False, type=int
            ),
            OpenApiParameter(
                name="page", description="Page number", required=False, type=int
            ),
        ],
        responses={
            200: paginated_response(JewellerySerializer),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        query = JewelleryListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        category_id = query.validated_data.get("category_id")
        base_url = image_base_url(request)
        if "limit" in request.query_params:
            self.log.debug("Handling paginated jewellery list", category_id=category_id)
            return self.service.list_jewellery_paginated(
                request,
                category_id=category_id,
                base_url=base_url,
                paginator_class=JewelleryListPagination,
                serializer_class=JewellerySerializer,
                view=self,
            )
        self.log.debug("Handling jewellery list", category_id=category_id)
        items = self.service.list_jewellery(category_id, base_url=base_url)
        return Response(JewellerySerializer(items, many=True).data)

    @extend_schema(
        summary="Create jewellery (staff)",
        request=JewelleryWriteSerializer,
        responses={
            201: JewellerySerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = JewelleryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = JewelleryWriteCommand.from_validated(serializer.validated_data)
        self.log.info("Creating jewellery via API", name=command.name)
        dto, error = self.service.create_jewellery(
            command, base_url=image_base_url(request)
        )
        if error:
            return service_error_response(error)
        self.log.info("Jewellery created via API", jewellery_id=dto.id)
        return Response(JewellerySerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Jewellery"])
class JewelleryDetailView(APIView):
    permission_classes = [IsStaffOrReadOnly]
    service = build_jewellery_service()
    log = logger.bind(view="JewelleryDetailView")

    @extend_schema(
        operation_id="jewellery_retrieve",
        summary="Get jewellery",
        parameters=[OpenApiParameter("jewellery_id", int, OpenApiParameter.PATH)],
        responses={
            200: JewellerySerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, jewellery_id: int):
        self.log.debug("Fetching jewellery detail", jewellery_id=jewellery_id)
        dto, error = self.service.get_jewellery(
            jewellery_id, base_url=image_base_url(request)
        )
        if error:
            return service_error_response(error)
        return Response(JewellerySerializer(dto).data)

    @extend_schema(
        summary="Replace jewellery (staff)",
        parameters=[OpenApiParameter("jewellery_id", int, OpenApiParameter.PATH)],
        request=JewelleryWriteSerializer,
        responses={
            200: JewellerySerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, jewellery_id: int):
        serializer = JewelleryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = JewelleryWriteCommand.from_validated(serializer.validated_data)
        self.log.info("Replacing jewellery", jewellery_id=jewellery_id)
        dto, error = self.service.update_jewellery(
            jewellery_id, command, base_url=image_base_url(request)
        )
        if error:
            return service_error_response(error)
        return Response(JewellerySerializer(dto).data)

    @extend_schema(
        summary="Delete jewellery (staff)",
        parameters=[OpenApiParameter("jewellery_id", int, OpenApiParameter.PATH)],
        responses={
            204: None,
            404: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, jewellery_id: int):
        self.log.info("Deleting jewellery", jewellery_id=jewellery_id)
        _, error = self.service.delete_jewellery(jewellery_id)
        if error:
            return service_error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Categories"])
class CategoryListView(APIView):
    permission_classes = [IsStaffOrReadOnly]
    service = build_category_service()
    log = logger.bind(view="CategoryListView")

    @extend_schema(
        summary="List active categories", responses={200: CategorySerializer(many=True)}
    )
    def get(self, request):
        self.log.debug("Listing categories")
        data = self.service.list_categories()
        return Response(CategorySerializer(data, many=True).data)

    @extend_schema(
        summary="Create category (staff)",
        request=CategoryWriteSerializer,
        responses={
            201: CategorySerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = CategoryWriteCommand.from_validated(serializer.validated_data)
        dto, error = self.service.create_category(command)
        if error:
            return service_error_response(error)
        self.log.info("Category created", category_id=dto.id)
        return Response(CategorySerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Categories"])
class CategoryDetailView(APIView):
    permission_classes = [IsStaffOrReadOnly]
    service = build_category_service()
    log = logger.bind(view="CategoryDetailView")

    @extend_schema(
        summary="Get category",
        parameters=[OpenApiParameter("category_id", int, OpenApiParameter.PATH)],
        responses={
            200: CategorySerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, category_id: int):
        self.log.debug("Fetching category detail", category_id=category_id)
        dto, error = self.service.get_category(category_id)
        if error:
            return service_error_response(error)
        return Response(CategorySerializer(dto).data)

    @extend_schema(
        summary="Replace category (staff)",
        parameters=[OpenApiParameter("category_id", int, OpenApiParameter.PATH)],
        request=CategoryWriteSerializer,
        responses={
            200: CategoryMutationResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, category_id: int):
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = CategoryWriteCommand.from_validated(serializer.validated_data)
        self.log.info("Replacing category", category_id=category_id)
        dto, error = self.service.update_category(category_id, command)
        if error:
            return service_error_response(error)
        return Response(
            {
                "message": "Category updated successfully",
                "category": CategorySerializer(dto).data,
            }
        )

    @extend_schema(
        summary="Delete category (staff, soft delete)",
        parameters=[OpenApiParameter("category_id", int, OpenApiParameter.PATH)],
        responses={
            200: MessageResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, category_id: int):
        self.log.info("Deleting category", category_id=category_id)
        _, error = self.service.delete_category(category_id)
        if error:
            return service_error_response(error)
        return Response({"message": "Category deleted successfully"})


@extend_schema(tags=["Categories"])
class CategoryJewelleryView(APIView):
    permission_classes = [IsStaffOrReadOnly]
    service = build_category_service()
    log = logger.bind(view="CategoryJewelleryView")

    @extend_schema(
        summary="List jewellery in a category",
        parameters=[OpenApiParameter("category_id", int, OpenApiParameter.PATH)],
        responses={
            200: JewellerySerializer(many=True),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, category_id: int):
        self.log.debug("Listing jewellery for category", category_id=category_id)
        items, error = self.service.list_category_jewellery(
            category_id, base_url=image_base_url(request)
        )
        if error:
            return service_error_response(error)
        return Response(JewellerySerializer(items, many=True).data)
