"""
Catalog API v1 views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ....infrastructure.providers import ensure_loaded, get_catalog_view
from ...serializers import ProductSerializer, CategorySerializer


@extend_schema(tags=['Catalog'])
class ProductListView(APIView):
    """Published product list endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ProductSerializer(many=True)},
        summary="List published products",
    )
    def get(self, request):
        catalog = ensure_loaded(get_catalog_view())
        serializer = ProductSerializer(catalog.list_products(), many=True)
        return Response(serializer.data)


@extend_schema(tags=['Catalog'])
class ProductDetailView(APIView):
    """Product detail endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ProductSerializer},
        summary="Get product detail",
    )
    def get(self, request, product_id: str):
        catalog = ensure_loaded(get_catalog_view())
        serializer = ProductSerializer(catalog.get_product(product_id))
        return Response(serializer.data)


@extend_schema(tags=['Catalog'])
class CategoryListView(APIView):
    """Category tree endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CategorySerializer(many=True)},
        summary="List the category tree",
    )
    def get(self, request):
        catalog = ensure_loaded(get_catalog_view())
        serializer = CategorySerializer(catalog.list_categories(), many=True)
        return Response(serializer.data)


@extend_schema(tags=['Catalog'])
class CategoryProductsView(APIView):
    """Products in a category and its subcategories."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ProductSerializer(many=True)},
        summary="List products in a category",
    )
    def get(self, request, category_id: str):
        catalog = ensure_loaded(get_catalog_view())
        serializer = ProductSerializer(catalog.products_in_category(category_id), many=True)
        return Response(serializer.data)


@extend_schema(tags=['Catalog'])
class CatalogRefreshView(APIView):
    """Reload the catalog from the commerce backend."""
    permission_classes = [AllowAny]

    @extend_schema(summary="Refresh catalog data")
    def post(self, request):
        catalog = get_catalog_view()
        catalog.refresh()
        return Response(
            {'products': len(catalog.list_products()), 'categories': len(catalog.list_categories())},
            status=status.HTTP_200_OK,
        )
