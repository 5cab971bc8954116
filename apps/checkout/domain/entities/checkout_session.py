"""
Checkout session entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from shared.domain import AggregateRoot
from ..exceptions import InvalidCheckoutStateError
from ..value_objects.address import AddressDraft
from ..value_objects.checkout_phase import CheckoutPhase
from ..value_objects.field_updates import FieldUpdate
from ..value_objects.payment_draft import PaymentDraft

ALLOWED_TRANSITIONS = {
    CheckoutPhase.PERSONAL_ADDRESS: {CheckoutPhase.PAYMENT},
    CheckoutPhase.PAYMENT: {CheckoutPhase.PERSONAL_ADDRESS, CheckoutPhase.SUBMITTED},
    CheckoutPhase.SUBMITTED: set(),
}


@dataclass
class CheckoutSession(AggregateRoot):
    """State of one in-progress checkout: phase, form drafts, errors and remote ids."""
    phase: CheckoutPhase = CheckoutPhase.PERSONAL_ADDRESS
    address: AddressDraft = field(default_factory=AddressDraft)
    payment: PaymentDraft = field(default_factory=PaymentDraft)
    field_errors: Dict[str, str] = field(default_factory=dict)
    banner_error: Optional[str] = None
    cart_id: Optional[str] = None
    address_id: Optional[str] = None
    confirmed_address: Optional[AddressDraft] = None
    is_submitting: bool = False
    is_abandoned: bool = False

    @classmethod
    def start(cls, cart_id: Optional[str] = None) -> 'CheckoutSession':
        """Create a fresh checkout at the personal/address phase."""
        return cls(cart_id=cart_id)

    @property
    def is_submitted(self) -> bool:
        return self.phase == CheckoutPhase.SUBMITTED

    def apply_update(self, command: FieldUpdate) -> None:
        """Apply a form edit and clear that field's error."""
        if self.is_submitted:
            raise InvalidCheckoutStateError("edit", self.phase.value)
        self.address, self.payment = command.apply_to(self.address, self.payment)
        self.field_errors.pop(command.field_name, None)
        self.touch()

    def replace_errors(self, errors: Dict[str, str]) -> None:
        self.field_errors = dict(errors)
        self.touch()

    def move_to(self, phase: CheckoutPhase) -> None:
        if phase not in ALLOWED_TRANSITIONS[self.phase]:
            raise InvalidCheckoutStateError(f"move to '{phase.value}'", self.phase.value)
        self.phase = phase
        self.banner_error = None
        self.touch()

    def begin_submitting(self) -> None:
        self.is_submitting = True
        self.banner_error = None

    def end_submitting(self) -> None:
        self.is_submitting = False

    def record_address(self, address_id: str) -> None:
        """Remember the backend address id and the draft it was created from."""
        self.address_id = address_id
        self.confirmed_address = self.address
        self.touch()

    @property
    def address_is_confirmed(self) -> bool:
        """True when the current draft is exactly the one the backend already stored."""
        return self.address_id is not None and self.confirmed_address == self.address

    def forget_remote_ids(self) -> None:
        self.cart_id = None
        self.address_id = None
        self.confirmed_address = None

    def abandon(self) -> None:
        """Mark the session as left by the shopper; late results are ignored."""
        self.is_abandoned = True
        self.touch()
