# Value objects
from .address import Address, AddressDraft, AUSTRALIAN_STATES, DEFAULT_STATE
from .checkout_phase import CheckoutPhase
from .field_updates import (
    ADDRESS_FORM,
    PAYMENT_FORM,
    FIELD_UPDATES,
    FieldUpdate,
    SetFirstName,
    SetLastName,
    SetEmail,
    SetPhone,
    SetStreet,
    SetCity,
    SetState,
    SetPostcode,
    SetCardNumber,
    SetCardName,
    SetExpiryDate,
    SetCvv,
    SetPaymentMethod,
    field_update_for,
)
from .payment_draft import PaymentDraft, PAYMENT_METHODS, DEFAULT_PAYMENT_METHOD

__all__ = [
    'Address',
    'AddressDraft',
    'AUSTRALIAN_STATES',
    'DEFAULT_STATE',
    'CheckoutPhase',
    'ADDRESS_FORM',
    'PAYMENT_FORM',
    'FIELD_UPDATES',
    'FieldUpdate',
    'SetFirstName',
    'SetLastName',
    'SetEmail',
    'SetPhone',
    'SetStreet',
    'SetCity',
    'SetState',
    'SetPostcode',
    'SetCardNumber',
    'SetCardName',
    'SetExpiryDate',
    'SetCvv',
    'SetPaymentMethod',
    'field_update_for',
    'PaymentDraft',
    'PAYMENT_METHODS',
    'DEFAULT_PAYMENT_METHOD',
]
