"""
Checkout API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.checkout.interfaces.api.v1.urls')),
]
