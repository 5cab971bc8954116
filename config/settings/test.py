"""
Test settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = False
ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

COMMERCE_API_BASE_URL = 'http://commerce.test'
STOREFRONT_CURRENCY = 'CNY'
STOREFRONT_TAX_RATE = '0.10'
STOREFRONT_ORDER_GATEWAY = 'tests.fakes.FakeOrderSubmissionGateway'
STOREFRONT_CATALOG_VIEW = 'tests.fakes.InMemoryCatalogView'

LOGGING = {
    **LOGGING,  # noqa: F405
    'root': {'handlers': ['console'], 'level': 'CRITICAL'},
}
