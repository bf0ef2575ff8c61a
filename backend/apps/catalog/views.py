from django.urls import reverse
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.exceptions import ApplicationError
from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.common import get_logger
from .container import build_product_service
from .serializers import (
    ProductListQuerySerializer,
    ProductReadSerializer,
    ProductWriteSerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Products"])
class ProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description="Returns every product, optionally only those in one category.",
        parameters=[
            OpenApiParameter(
                name="categoryId",
                description="Filter by category id",
                required=False,
                type=int,
            )
        ],
        responses={
            200: ProductReadSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        query = ProductListQuerySerializer(data=request.query_params)
        if not query.is_valid():
            self.log.info("Rejected product list filter", errors=query.errors)
            raise ApplicationError(
                "VALIDATION_ERROR", "categoryId must be an integer", details=query.errors
            )
        category_id = query.validated_data.get("categoryId")
        self.log.debug("Handling product list request", category_id=category_id)
        data = self.service.list_products(category_id)
        return Response(ProductReadSerializer(data, many=True).data)


@extend_schema(tags=["Products"])
class ProductCreateView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductCreateView")

    @extend_schema(
        operation_id="products_create",
        summary="Create product",
        request=ProductWriteSerializer,
        responses={
            201: ProductReadSerializer,
            400: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Malformed body or unknown category",
            ),
        },
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Creating product via API", name=serializer.validated_data.get("name")
        )
        dto, error = self.service.create_product(serializer.validated_data)
        if error:
            code, message, details = error
            return error_response(code, message, details)
        location = request.build_absolute_uri(
            reverse("api-products-detail", args=[dto.id])
        )
        self.log.info("Product created via API", product_id=dto.id)
        return Response(
            ProductReadSerializer(dto).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )


@extend_schema(tags=["Products"])
class ProductDetailView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: int):
        self.log.debug("Fetching product detail", product_id=product_id)
        dto = self.service.get_product(product_id)
        if not dto:
            return error_response(
                "NOT_FOUND", "Product not found", {"id": str(product_id)}
            )
        return Response(ProductReadSerializer(dto).data)

    @extend_schema(
        summary="Replace product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        request=ProductWriteSerializer,
        responses={
            200: ProductReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, product_id: int):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Replacing product", product_id=product_id)
        dto, error = self.service.update_product(product_id, serializer.validated_data)
        if error:
            code, message, details = error
            return error_response(code, message, details)
        return Response(ProductReadSerializer(dto).data)

    @extend_schema(
        summary="Delete product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={204: None, 404: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def delete(self, request, product_id: int):
        self.log.info("Deleting product", product_id=product_id)
        deleted, error = self.service.delete_product(product_id)
        if error:
            code, message, details = error
            return error_response(code, message, details)
        return Response(status=status.HTTP_204_NO_CONTENT)
