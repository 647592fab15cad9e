"""
Checkout steps, their transition table and the order draft.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from apps.orders.domain.exceptions import InvalidDeliveryDateError
from apps.orders.domain.value_objects.payment_method import PaymentMethod
from apps.users.domain.value_objects import Email, PhoneNumber
from shared.domain import ValidationError
from .cart import CartLine
from .exceptions import InvalidCheckoutTransitionError


class CheckoutStep(str, Enum):
    REVIEW = 'review'
    DETAILS = 'details'
    PAYMENT = 'payment'
    CONFIRMATION = 'confirmation'


class CheckoutEvent(str, Enum):
    PROCEED = 'proceed'
    BACK = 'back'
    ORDER_PLACED = 'order_placed'


TRANSITIONS: Dict[Tuple[CheckoutStep, CheckoutEvent], CheckoutStep] = {
    (CheckoutStep.REVIEW, CheckoutEvent.PROCEED): CheckoutStep.DETAILS,
    (CheckoutStep.DETAILS, CheckoutEvent.PROCEED): CheckoutStep.PAYMENT,
    (CheckoutStep.DETAILS, CheckoutEvent.BACK): CheckoutStep.REVIEW,
    (CheckoutStep.PAYMENT, CheckoutEvent.BACK): CheckoutStep.DETAILS,
    (CheckoutStep.PAYMENT, CheckoutEvent.ORDER_PLACED): CheckoutStep.CONFIRMATION,
}


def next_step(step: CheckoutStep, event: CheckoutEvent) -> CheckoutStep:
    """Return the step reached from ``step`` on ``event``."""
    try:
        return TRANSITIONS[(step, event)]
    except KeyError:
        raise InvalidCheckoutTransitionError(step, event) from None


@dataclass
class OrderDraft:
    """Customer-entered checkout fields. Never persisted as such."""
    contact_name: str = ''
    email: str = ''
    phone: str = ''
    address: str = ''
    city: str = 'Trichy'
    pincode: str = ''
    delivery_date: Optional[date] = None
    delivery_notes: str = ''
    payment_method: PaymentMethod = PaymentMethod.COD

    REQUIRED_TEXT_FIELDS = (
        ('contact_name', 'contactName', 'Contact name'),
        ('email', 'email', 'Email'),
        ('phone', 'phone', 'Phone'),
        ('address', 'address', 'Address'),
        ('city', 'city', 'City'),
        ('pincode', 'pincode', 'Pincode'),
    )

    def validate(self, today: date) -> None:
        """Raise ValidationError for the first missing or invalid field."""
        for attr, field, label in self.REQUIRED_TEXT_FIELDS:
            if not (getattr(self, attr) or '').strip():
                raise ValidationError(f"{label} is required", field=field)

        Email(self.email)
        PhoneNumber(self.phone)

        if self.delivery_date is None:
            raise ValidationError("Delivery date is required", field='deliveryDate')
        if self.delivery_date <= today:
            raise InvalidDeliveryDateError(self.delivery_date, today)

    def to_submission(self, lines: Sequence[CartLine]) -> dict:
        """Build the order request body. Carries no prices."""
        customer_details = {
            'contactName': self.contact_name.strip(),
            'email': self.email.strip(),
            'phone': self.phone.strip(),
            'address': self.address.strip(),
            'city': self.city.strip(),
            'pincode': self.pincode.strip(),
            'deliveryDate': self.delivery_date.isoformat() if self.delivery_date else None,
        }
        if self.delivery_notes:
            customer_details['deliveryNotes'] = self.delivery_notes
        return {
            'items': [
                {'productId': line.product_id, 'quantity': line.quantity}
                for line in lines
            ],
            'customerDetails': customer_details,
            'paymentMethod': self.payment_method.value,
        }


@dataclass(frozen=True)
class OrderConfirmation:
    """What the server returned for a placed order."""
    order_id: str
    total: Decimal
