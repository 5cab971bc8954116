"""
Cart API v1 views.
"""
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.catalog.infrastructure.providers import ensure_loaded, get_catalog_view
from ....application.dtos import CartDTO
from ....infrastructure.cart_state import load_cart_state, save_cart_state
from ...serializers import (
    CartSerializer,
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
    PromotionApplySerializer,
)

logger = logging.getLogger(__name__)


def _cart_response(state, status_code=status.HTTP_200_OK):
    serializer = CartSerializer(CartDTO.from_state(state))
    return Response(serializer.data, status=status_code)


@extend_schema(tags=['Cart'])
class CartView(APIView):
    """Cart endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CartSerializer},
        summary="Get the session cart",
    )
    def get(self, request):
        state = load_cart_state(request.session)
        save_cart_state(request.session, state)
        return _cart_response(state)

    @extend_schema(
        request=CartItemCreateSerializer,
        responses={200: CartSerializer},
        summary="Add item to cart",
    )
    def post(self, request):
        serializer = CartItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        catalog = ensure_loaded(get_catalog_view())
        product = catalog.get_product(serializer.validated_data['product_id'])

        state = load_cart_state(request.session)
        state.cart.add_item(product, serializer.validated_data['quantity'])
        save_cart_state(request.session, state)
        logger.info(f"Added {serializer.validated_data['quantity']} x {product.id} to cart")
        return _cart_response(state)

    @extend_schema(summary="Clear cart")
    def delete(self, request):
        state = load_cart_state(request.session)
        state.cart.clear()
        state.promotions.remove()
        save_cart_state(request.session, state)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Cart'])
class CartItemView(APIView):
    """Cart item endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CartItemUpdateSerializer,
        responses={200: CartSerializer},
        summary="Update cart item quantity",
    )
    def patch(self, request, product_id: str):
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        state = load_cart_state(request.session)
        state.cart.set_quantity(product_id, serializer.validated_data['quantity'])
        save_cart_state(request.session, state)
        return _cart_response(state)

    @extend_schema(summary="Remove item from cart")
    def delete(self, request, product_id: str):
        state = load_cart_state(request.session)
        state.cart.remove_item(product_id)
        save_cart_state(request.session, state)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Cart'])
class CartPromotionView(APIView):
    """Coupon code endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=PromotionApplySerializer,
        responses={200: CartSerializer},
        summary="Apply a coupon code",
    )
    def post(self, request):
        serializer = PromotionApplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        state = load_cart_state(request.session)
        state.promotions.apply(serializer.validated_data['code'], state.cart.subtotal_minor)
        save_cart_state(request.session, state)
        return _cart_response(state)

    @extend_schema(
        responses={200: CartSerializer},
        summary="Remove the applied coupon code",
    )
    def delete(self, request):
        state = load_cart_state(request.session)
        state.promotions.remove()
        save_cart_state(request.session, state)
        return _cart_response(state)
