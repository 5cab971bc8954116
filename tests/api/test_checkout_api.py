"""
Checkout API tests.
"""
import pytest

from tests.fakes import VALID_ADDRESS, VALID_PAYMENT

CART = '/api/v1/cart/'
CHECKOUT = '/api/v1/checkout/'


@pytest.fixture
def shopper(api_client):
    """A client with two keyboards in the cart."""
    api_client.post(CART, {'product_id': 'p-keyboard', 'quantity': 2}, format='json')
    return api_client


@pytest.fixture
def started(shopper):
    response = shopper.post(CHECKOUT)
    assert response.status_code == 201
    return shopper


def fill(client, values):
    return client.patch(f'{CHECKOUT}fields/', {'updates': values}, format='json')


@pytest.fixture
def at_payment(started):
    fill(started, VALID_ADDRESS)
    response = started.post(f'{CHECKOUT}advance/')
    assert response.status_code == 200
    return started


def test_start_requires_items(api_client, order_gateway):
    response = api_client.post(CHECKOUT)

    assert response.status_code == 400
    assert response.data['code'] == 'EMPTY_CART'
    assert order_gateway.calls == []


def test_start_pushes_cart(shopper, order_gateway):
    response = shopper.post(CHECKOUT)

    assert response.data['phase'] == 'personal'
    assert response.data['cart_id'] == 'cart-1'
    assert order_gateway.calls_to('add_to_remote_cart')[0]['quantities'] == [2]


def test_start_gateway_failure_is_502(shopper, order_gateway):
    order_gateway.fail_add_to_cart = True
    response = shopper.post(CHECKOUT)

    assert response.status_code == 502
    assert response.data['code'] == 'GATEWAY_UNAVAILABLE'


def test_checkout_not_started(api_client):
    response = api_client.get(CHECKOUT)
    assert response.data['code'] == 'CHECKOUT_NOT_STARTED'


def test_field_edits_are_kept(started):
    response = fill(started, {'first_name': 'Jane', 'state': 'VIC'})

    assert response.status_code == 200
    assert started.get(CHECKOUT).data['address']['state'] == 'VIC'


def test_unknown_field_is_rejected(started):
    response = fill(started, {'shoe_size': '9'})
    assert response.status_code == 400


def test_invalid_address_stays_put(started, order_gateway):
    fill(started, {**VALID_ADDRESS, 'email': 'not-an-email'})
    response = started.post(f'{CHECKOUT}advance/')

    assert response.status_code == 422
    assert response.data['phase'] == 'personal'
    assert list(response.data['field_errors']) == ['email']
    assert order_gateway.calls_to('create_address') == []


def test_address_failure_shows_banner(started, order_gateway):
    order_gateway.fail_create_address = True
    fill(started, VALID_ADDRESS)
    response = started.post(f'{CHECKOUT}advance/')

    assert response.status_code == 502
    assert response.data['banner_error'] == 'Failed to save address info'
    assert response.data['address']['email'] == VALID_ADDRESS['email']


def test_back_keeps_address(at_payment):
    response = at_payment.post(f'{CHECKOUT}back/')

    assert response.data['phase'] == 'personal'
    assert response.data['address_id'] == 'addr-1'
    assert response.data['address']['first_name'] == 'Jane'


def test_card_number_is_masked_in_output(at_payment):
    response = fill(at_payment, VALID_PAYMENT)
    assert response.data['payment']['card_number'] == '**** **** **** 1111'
    assert 'cvv' not in response.data['payment']


def test_full_checkout(at_payment, order_gateway):
    at_payment.post(f'{CART}promotion/', {'code': 'discount10'}, format='json')
    fill(at_payment, VALID_PAYMENT)

    response = at_payment.post(f'{CHECKOUT}submit/')

    assert response.status_code == 201
    assert response.data['subtotal_minor'] == 20000
    assert response.data['discount_minor'] == 2000
    assert response.data['total_minor'] == 18000
    assert response.data['tax_minor'] == 2000
    assert response.data['grand_total_minor'] == 20000
    assert response.data['payment_status'] == 'Paid'
    assert response.data['order_number'].startswith('ORD-')
    assert [line['quantity'] for line in response.data['line_items']] == [2]

    order = order_gateway.calls_to('create_order')[0]
    assert order['cart_id'] == 'cart-1'
    assert order['address_id'] == 'addr-1'

    success = at_payment.get(f'{CHECKOUT}success/')
    assert success.status_code == 200
    assert success.data['order_number'] == response.data['order_number']

    cart = at_payment.get(CART).data
    assert cart['total_items'] == 0
    assert cart['promotion'] is None


def test_order_failure_keeps_cart(at_payment, order_gateway):
    order_gateway.fail_create_order = True
    fill(at_payment, VALID_PAYMENT)

    response = at_payment.post(f'{CHECKOUT}submit/')

    assert response.status_code == 502
    assert response.data['phase'] == 'payment'
    assert response.data['banner_error'] == 'Payment failed'
    assert response.data['address_id'] == 'addr-1'
    assert at_payment.get(CART).data['total_items'] == 2


def test_invalid_payment(at_payment):
    fill(at_payment, {**VALID_PAYMENT, 'expiry_date': '13/99'})
    response = at_payment.post(f'{CHECKOUT}submit/')

    assert response.status_code == 422
    assert list(response.data['field_errors']) == ['expiry_date']


def test_submit_before_address_is_conflict(started):
    response = started.post(f'{CHECKOUT}submit/')

    assert response.status_code == 409
    assert response.data['code'] == 'INVALID_OPERATION'


def test_success_without_order_is_404(api_client):
    response = api_client.get(f'{CHECKOUT}success/')
    assert response.status_code == 404


def test_abandon_discards_checkout(started):
    assert started.delete(CHECKOUT).status_code == 204
    assert started.get(CHECKOUT).data['code'] == 'CHECKOUT_NOT_STARTED'


def test_second_submit_while_order_is_pending(at_payment, order_gateway):
    fill(at_payment, VALID_PAYMENT)
    nested = []
    order_gateway.on_create_order = lambda: nested.append(at_payment.post(f'{CHECKOUT}submit/'))

    response = at_payment.post(f'{CHECKOUT}submit/')

    assert response.status_code == 201
    assert nested[0].status_code == 409
    assert nested[0].data['code'] == 'SUBMISSION_IN_PROGRESS'
    assert len(order_gateway.calls_to('create_order')) == 1


def test_second_advance_while_address_is_pending(started, order_gateway):
    fill(started, VALID_ADDRESS)
    nested = []
    order_gateway.on_create_address = lambda: nested.append(started.post(f'{CHECKOUT}advance/'))

    response = started.post(f'{CHECKOUT}advance/')

    assert response.data['phase'] == 'payment'
    assert nested[0].data['code'] == 'SUBMISSION_IN_PROGRESS'
    assert len(order_gateway.calls_to('create_address')) == 1
    assert started.get(CHECKOUT).data['is_submitting'] is False


def test_abandon_while_address_is_pending(started, order_gateway):
    fill(started, VALID_ADDRESS)
    nested = []
    order_gateway.on_create_address = lambda: nested.append(started.delete(CHECKOUT))

    response = started.post(f'{CHECKOUT}advance/')

    assert nested[0].status_code == 204
    assert response.status_code == 409
    assert response.data['code'] == 'CHECKOUT_ABANDONED'
    assert started.get(CHECKOUT).data['code'] == 'CHECKOUT_NOT_STARTED'


def test_abandon_while_order_is_pending(at_payment, order_gateway):
    fill(at_payment, VALID_PAYMENT)
    order_gateway.on_create_order = lambda: at_payment.delete(CHECKOUT)

    response = at_payment.post(f'{CHECKOUT}submit/')

    assert response.status_code == 409
    assert response.data['code'] == 'CHECKOUT_ABANDONED'
    assert at_payment.get(CART).data['total_items'] == 2
    assert at_payment.get(f'{CHECKOUT}success/').status_code == 404
