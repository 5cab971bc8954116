"""
Pytest configuration and fixtures.
"""
import pytest

from apps.cart.domain.entities import Cart
from apps.catalog.infrastructure.providers import get_catalog_view
from apps.checkout.domain.entities import CheckoutSession
from apps.checkout.domain.repositories import CART_ID_KEY, USER_TOKEN_KEY
from apps.checkout.domain.services import CheckoutStateMachine
from apps.checkout.infrastructure.providers import get_order_gateway
from apps.checkout.infrastructure.session import InMemorySessionStore
from apps.promotions.domain.services import PromotionEngine
from apps.promotions.infrastructure import ConfiguredPromotionRepository
from .fakes import FakeOrderSubmissionGateway, make_product


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture(autouse=True)
def reset_providers():
    """Fresh process-wide catalog and gateway for every test."""
    get_catalog_view.cache_clear()
    get_order_gateway.cache_clear()
    yield
    get_catalog_view.cache_clear()
    get_order_gateway.cache_clear()


@pytest.fixture
def order_gateway():
    """The gateway the API views resolve from settings."""
    return get_order_gateway()


@pytest.fixture
def catalog():
    view = get_catalog_view()
    view.refresh()
    return view


@pytest.fixture
def gateway():
    return FakeOrderSubmissionGateway()


@pytest.fixture
def session_store():
    return InMemorySessionStore({USER_TOKEN_KEY: 'token-abc', CART_ID_KEY: 'cart-1'})


@pytest.fixture
def cart():
    cart = Cart.create(currency='CNY')
    cart.add_item(make_product('p-1', price_minor=4000), quantity=2)
    cart.add_item(make_product('p-2', price_minor=2000), quantity=1)
    return cart


@pytest.fixture
def promotion_engine():
    return PromotionEngine(
        ConfiguredPromotionRepository([
            {'code': 'DISCOUNT10', 'discount_type': 'percentage', 'value': '0.10', 'discount_id': 'disc-10'},
            {'code': 'flat15', 'discount_type': 'deduct', 'value': 1500},
            {'code': 'big50', 'discount_type': 'percentage', 'value': '0.50', 'min_amount': 50000},
        ]),
        currency='CNY',
    )


@pytest.fixture
def machine(cart, gateway, session_store, promotion_engine):
    return CheckoutStateMachine(
        session=CheckoutSession.start(cart_id='cart-1'),
        cart=cart,
        gateway=gateway,
        session_store=session_store,
        promotions=promotion_engine,
    )
