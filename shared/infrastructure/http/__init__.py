# HTTP access to the commerce backend
from .commerce_client import CommerceApiClient

__all__ = ['CommerceApiClient']
