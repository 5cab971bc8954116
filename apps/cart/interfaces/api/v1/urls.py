"""
Cart API v1 URLs.
"""
from django.urls import path

from .views import CartView, CartItemView, CartPromotionView

urlpatterns = [
    path('', CartView.as_view(), name='cart'),
    path('items/<str:product_id>/', CartItemView.as_view(), name='cart-item'),
    path('promotion/', CartPromotionView.as_view(), name='cart-promotion'),
]
