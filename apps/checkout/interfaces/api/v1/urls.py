"""
Checkout API v1 URLs.
"""
from django.urls import path

from .views import (
    CheckoutView,
    CheckoutFieldsView,
    CheckoutAdvanceView,
    CheckoutBackView,
    CheckoutSubmitView,
    CheckoutSuccessView,
)

urlpatterns = [
    path('', CheckoutView.as_view(), name='checkout'),
    path('fields/', CheckoutFieldsView.as_view(), name='checkout-fields'),
    path('advance/', CheckoutAdvanceView.as_view(), name='checkout-advance'),
    path('back/', CheckoutBackView.as_view(), name='checkout-back'),
    path('submit/', CheckoutSubmitView.as_view(), name='checkout-submit'),
    path('success/', CheckoutSuccessView.as_view(), name='checkout-success'),
]
