"""
Checkout form validation.

Each function returns a ``{field_name: message}`` map; an empty map means the
form is valid. Nothing here touches the network.
"""
import re
from typing import Dict

from .value_objects.address import AddressDraft, AUSTRALIAN_STATES
from .value_objects.payment_draft import PaymentDraft, PAYMENT_METHODS

EMAIL_PATTERN = re.compile(r'\S+@\S+\.\S+')
PHONE_PATTERN = re.compile(r'\d{10}')
POSTCODE_PATTERN = re.compile(r'\d{4}')
CARD_NUMBER_PATTERN = re.compile(r'\d{16}')
EXPIRY_PATTERN = re.compile(r'(0[1-9]|1[0-2])/\d{2}')
CVV_PATTERN = re.compile(r'\d{3,4}')


def _strip_whitespace(value: str) -> str:
    return re.sub(r'\s', '', value)


def validate_address(draft: AddressDraft) -> Dict[str, str]:
    """Validate personal details and shipping address."""
    errors = {}

    if not draft.first_name.strip():
        errors['first_name'] = "Please enter first name"
    if not draft.last_name.strip():
        errors['last_name'] = "Please enter last name"

    if not draft.email.strip():
        errors['email'] = "Please enter email"
    elif not EMAIL_PATTERN.fullmatch(draft.email.strip()):
        errors['email'] = "Please enter a valid email address"

    if not draft.phone.strip():
        errors['phone'] = "Please enter phone number"
    elif not PHONE_PATTERN.fullmatch(_strip_whitespace(draft.phone)):
        errors['phone'] = "Please enter a valid Australian phone number"

    if not draft.street.strip():
        errors['street'] = "Please enter street address"
    if not draft.city.strip():
        errors['city'] = "Please enter city"
    if draft.state not in AUSTRALIAN_STATES:
        errors['state'] = "Please select a state or territory"

    if not draft.postcode.strip():
        errors['postcode'] = "Please enter postcode"
    elif not POSTCODE_PATTERN.fullmatch(draft.postcode.strip()):
        errors['postcode'] = "Please enter a valid Australian postcode"

    return errors


def validate_payment(draft: PaymentDraft) -> Dict[str, str]:
    """Validate card details. Syntax only; no payment processing."""
    errors = {}

    if not draft.card_number.strip():
        errors['card_number'] = "Please enter card number"
    elif not CARD_NUMBER_PATTERN.fullmatch(_strip_whitespace(draft.card_number)):
        errors['card_number'] = "Please enter a valid 16-digit card number"

    if not draft.card_name.strip():
        errors['card_name'] = "Please enter cardholder name"

    if not draft.expiry_date.strip():
        errors['expiry_date'] = "Please enter expiry date"
    elif not EXPIRY_PATTERN.fullmatch(draft.expiry_date.strip()):
        errors['expiry_date'] = "Please use MM/YY format"

    if not draft.cvv.strip():
        errors['cvv'] = "Please enter CVV"
    elif not CVV_PATTERN.fullmatch(draft.cvv.strip()):
        errors['cvv'] = "Please enter a valid CVV"

    if not draft.payment_method.strip():
        errors['payment_method'] = "Please select payment method"
    elif draft.payment_method not in PAYMENT_METHODS:
        errors['payment_method'] = "Please select a supported payment method"

    return errors
