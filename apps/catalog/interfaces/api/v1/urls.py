"""
Catalog API v1 URLs.
"""
from django.urls import path

from .views import (
    ProductListView,
    ProductDetailView,
    CategoryListView,
    CategoryProductsView,
    CatalogRefreshView,
)

urlpatterns = [
    # Products
    path('products/', ProductListView.as_view(), name='product-list'),
    path('products/<str:product_id>/', ProductDetailView.as_view(), name='product-detail'),

    # Categories
    path('categories/', CategoryListView.as_view(), name='category-list'),
    path('categories/<str:category_id>/products/', CategoryProductsView.as_view(), name='category-products'),

    path('refresh/', CatalogRefreshView.as_view(), name='catalog-refresh'),
]
