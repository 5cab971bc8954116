"""
Session-backed checkout persistence tests.
"""
from apps.checkout.domain.entities import CheckoutSession
from apps.checkout.domain.value_objects import CheckoutPhase, SetCardNumber, SetEmail
from apps.checkout.infrastructure.repositories import SessionCheckoutRepository
from apps.checkout.infrastructure.session import DjangoSessionStore


def test_checkout_survives_a_round_trip():
    session = {}
    checkout = CheckoutSession.start(cart_id='cart-1')
    checkout.apply_update(SetEmail('jane@example.com'))
    checkout.apply_update(SetCardNumber('4111'))
    checkout.record_address('addr-1')
    checkout.move_to(CheckoutPhase.PAYMENT)
    SessionCheckoutRepository(session).save(checkout)

    restored = SessionCheckoutRepository(session).load()

    assert restored.phase == CheckoutPhase.PAYMENT
    assert restored.address.email == 'jane@example.com'
    assert restored.payment.card_number == '4111'
    assert restored.address_id == 'addr-1'
    assert restored.address_is_confirmed
    assert not restored.is_submitting


def test_missing_checkout_loads_as_none():
    assert SessionCheckoutRepository({}).load() is None


def test_delete_discards_checkout():
    session = {}
    repository = SessionCheckoutRepository(session)
    repository.save(CheckoutSession.start())
    repository.delete()
    assert repository.load() is None


def test_django_session_store_uses_fixed_keys():
    session = {}
    store = DjangoSessionStore(session)
    store.set('cartId', 'cart-1')
    store.set('userToken', 'tok')
    store.remove('addressId')

    assert session == {'cartId': 'cart-1', 'userToken': 'tok'}
    assert store.auth_token == 'tok'


def test_identity_and_submitting_flag_are_stored():
    session = {}
    checkout = CheckoutSession.start()
    checkout.begin_submitting()
    repository = SessionCheckoutRepository(session)
    repository.publish(checkout)

    restored = repository.reload()

    assert restored.id == checkout.id
    assert restored.is_submitting
