"""
Commerce backend HTTP adapter tests, with the requests session mocked out.
"""
from unittest.mock import MagicMock

import pytest
import requests

from shared.domain.exceptions import GatewayUnavailableError
from shared.infrastructure.http import CommerceApiClient
from apps.catalog.infrastructure.http_catalog_view import HttpCatalogView
from apps.checkout.domain.value_objects import Address
from apps.checkout.infrastructure.gateways import HttpOrderSubmissionGateway
from apps.orders.domain.value_objects import OrderStatus


def response(status_code=200, body=None):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.ok = status_code < 400
    resp.content = b'' if body is None else b'{}'
    if body is None:
        resp.json.side_effect = ValueError('no body')
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def http():
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def client(http):
    return CommerceApiClient(base_url='http://commerce.test/', timeout=3, session=http)


class TestCommerceApiClient:
    def test_posts_json_with_bearer_token(self, client, http):
        http.request.return_value = response(body={'ok': True})

        assert client.post_json('/order/create', {'a': 1}, token='tok') == {'ok': True}
        http.request.assert_called_once_with(
            'POST',
            'http://commerce.test/order/create',
            json={'a': 1},
            headers={'Authorization': 'Bearer tok'},
            timeout=3,
        )

    def test_connection_error_becomes_gateway_error(self, client, http):
        http.request.side_effect = requests.ConnectionError('refused')

        with pytest.raises(GatewayUnavailableError) as exc_info:
            client.get_json('/product/all_products')
        assert exc_info.value.code == 'GATEWAY_UNAVAILABLE'

    def test_non_2xx_uses_backend_detail(self, client, http):
        http.request.return_value = response(400, {'detail': 'cart not found'})

        with pytest.raises(GatewayUnavailableError) as exc_info:
            client.post_json('/order/create', {})
        assert exc_info.value.status_code == 400
        assert 'cart not found' in exc_info.value.message

    def test_empty_body_is_empty_dict(self, client, http):
        http.request.return_value = response(204)
        assert client.get_json('/anything') == {}


class TestHttpOrderSubmissionGateway:
    @pytest.fixture
    def gateway(self, client):
        return HttpOrderSubmissionGateway(client=client, currency='CNY')

    def test_add_to_remote_cart(self, gateway, http):
        http.request.return_value = response(body={'cart_id': 'c-42'})

        cart_id = gateway.add_to_remote_cart(['p1', 'p2'], [2, 1], ['', ''], existing_cart_id='c-1', auth_token='tok')

        assert cart_id == 'c-42'
        body = http.request.call_args.kwargs['json']
        assert body == {
            'product_id': ['p1', 'p2'],
            'qty': [2, 1],
            'variable_id': ['', ''],
            'cart_id': 'c-1',
            'token': 'tok',
        }

    def test_create_address_returns_backend_id(self, gateway, http):
        http.request.return_value = response(body={'_id': 'a-9'})
        address = Address('Jane Citizen', '1 George St', 'Sydney', 'NSW', '0412345678')

        assert gateway.create_address(address) == 'a-9'
        body = http.request.call_args.kwargs['json']
        assert body['recipient_name'] == 'Jane Citizen'
        assert body['is_default'] is True
        assert 'token' not in body

    def test_create_address_without_id_is_a_failure(self, gateway, http):
        http.request.return_value = response(body={'message': 'ok'})
        address = Address('Jane Citizen', '1 George St', 'Sydney', 'NSW', '0412345678')

        with pytest.raises(GatewayUnavailableError):
            gateway.create_address(address)

    def test_create_order_maps_payload(self, gateway, http):
        http.request.return_value = response(body={
            'order_id': 'o-1',
            'track_number': 'TRK-1',
            'order_items': [{'product_id': 'p1', 'qty': 2, 'unit_price': 500, 'total_price': 1000}],
            'total_amount': 1000,
            'sale_amount': 900,
            'status': 'Paid',
            'placed_at': '2026-01-05T10:00:00Z',
        })

        order = gateway.create_order('c-1', 'a-1', 'PayPal', discount_id='d-1')

        body = http.request.call_args.kwargs['json']
        assert body == {'cart_id': 'c-1', 'address_id': 'a-1', 'payment_method': 'PayPal', 'discount_id': 'd-1'}
        assert order.order_id == 'o-1'
        assert order.order_number == 'TRK-1'
        assert order.status == OrderStatus.PAID
        assert order.discount.amount_minor == 100
        assert order.total.amount_minor == 900
        assert order.line_items[0].line_total.amount_minor == 1000

    def test_create_order_failure_propagates(self, gateway, http):
        http.request.return_value = response(500, {'message': 'boom'})
        with pytest.raises(GatewayUnavailableError):
            gateway.create_order('c-1', 'a-1', 'PayPal')

    @pytest.mark.parametrize('body', [
        {'order_id': 'o-1', 'total_amount': '120.00', 'sale_amount': 900},
        {'order_id': 'o-1', 'placed_at': 'yesterday'},
        {'order_id': 'o-1', 'order_items': [{'product_id': 'p1', 'qty': 'two'}]},
    ])
    def test_unreadable_order_is_a_gateway_failure(self, gateway, http, body):
        http.request.return_value = response(body=body)

        with pytest.raises(GatewayUnavailableError) as exc_info:
            gateway.create_order('c-1', 'a-1', 'PayPal')
        assert exc_info.value.operation == '/order/create'


class TestHttpCatalogView:
    def test_refresh_keeps_published_products_and_walks_categories(self, client, http):
        products = [
            {'_id': 'p1', 'name': 'Lamp', 'base_price': 5000, 'discount_price': 4500, 'qty': 3,
             'is_published': True, 'category': {'_id': 'c-2', 'name': 'Lights'}},
            {'_id': 'p2', 'name': 'Hidden', 'base_price': 100, 'qty': 1, 'is_published': False},
        ]
        categories = [
            {'_id': 'c-1', 'name': 'Home', 'childs': [{'_id': 'c-2', 'name': 'Lights', 'parent_id': 'c-1'}]},
        ]
        http.request.side_effect = [response(body=products), response(body=categories)]
        catalog = HttpCatalogView(client=client)

        assert not catalog.is_loaded
        catalog.refresh()

        assert catalog.is_loaded
        assert [p.id for p in catalog.list_products()] == ['p1']
        assert catalog.get_product('p1').discount_price_minor == 4500
        assert [p.id for p in catalog.products_in_category('c-1')] == ['p1']
        assert http.request.call_count == 2
