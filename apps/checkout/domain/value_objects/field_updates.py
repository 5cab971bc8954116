"""
Typed checkout form edits.

One command class per form field, all handled by a single
``CheckoutStateMachine.update`` entry point.
"""
from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple, Type

from shared.domain import ValueObject
from shared.domain.exceptions import ValidationError
from .address import AddressDraft
from .payment_draft import PaymentDraft

ADDRESS_FORM = "address"
PAYMENT_FORM = "payment"


@dataclass(frozen=True)
class FieldUpdate(ValueObject):
    """Sets one form field to ``value``."""
    value: str
    field_name: ClassVar[str] = ""
    form: ClassVar[str] = ADDRESS_FORM

    def apply_to(
        self, address: AddressDraft, payment: PaymentDraft
    ) -> Tuple[AddressDraft, PaymentDraft]:
        if self.form == ADDRESS_FORM:
            return address.evolve(**{self.field_name: self.value}), payment
        return address, payment.evolve(**{self.field_name: self.value})


@dataclass(frozen=True)
class SetFirstName(FieldUpdate):
    field_name: ClassVar[str] = "first_name"


@dataclass(frozen=True)
class SetLastName(FieldUpdate):
    field_name: ClassVar[str] = "last_name"


@dataclass(frozen=True)
class SetEmail(FieldUpdate):
    field_name: ClassVar[str] = "email"


@dataclass(frozen=True)
class SetPhone(FieldUpdate):
    field_name: ClassVar[str] = "phone"


@dataclass(frozen=True)
class SetStreet(FieldUpdate):
    field_name: ClassVar[str] = "street"


@dataclass(frozen=True)
class SetCity(FieldUpdate):
    field_name: ClassVar[str] = "city"


@dataclass(frozen=True)
class SetState(FieldUpdate):
    field_name: ClassVar[str] = "state"


@dataclass(frozen=True)
class SetPostcode(FieldUpdate):
    field_name: ClassVar[str] = "postcode"


@dataclass(frozen=True)
class SetCardNumber(FieldUpdate):
    field_name: ClassVar[str] = "card_number"
    form: ClassVar[str] = PAYMENT_FORM


@dataclass(frozen=True)
class SetCardName(FieldUpdate):
    field_name: ClassVar[str] = "card_name"
    form: ClassVar[str] = PAYMENT_FORM


@dataclass(frozen=True)
class SetExpiryDate(FieldUpdate):
    field_name: ClassVar[str] = "expiry_date"
    form: ClassVar[str] = PAYMENT_FORM


@dataclass(frozen=True)
class SetCvv(FieldUpdate):
    field_name: ClassVar[str] = "cvv"
    form: ClassVar[str] = PAYMENT_FORM


@dataclass(frozen=True)
class SetPaymentMethod(FieldUpdate):
    field_name: ClassVar[str] = "payment_method"
    form: ClassVar[str] = PAYMENT_FORM


FIELD_UPDATES: Dict[str, Type[FieldUpdate]] = {
    command.field_name: command
    for command in (
        SetFirstName, SetLastName, SetEmail, SetPhone,
        SetStreet, SetCity, SetState, SetPostcode,
        SetCardNumber, SetCardName, SetExpiryDate, SetCvv, SetPaymentMethod,
    )
}


def field_update_for(field_name: str, value: str) -> FieldUpdate:
    """Build the command for a field name coming from an untyped source (JSON)."""
    try:
        command = FIELD_UPDATES[field_name]
    except KeyError:
        raise ValidationError(message=f"Unknown checkout field '{field_name}'", field=field_name)
    return command(value="" if value is None else str(value))
