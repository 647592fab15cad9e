"""
Customer details value object.
"""
from dataclasses import dataclass

from apps.users.domain.value_objects import Email, PhoneNumber
from shared.domain import ValueObject, ValidationError

REQUIRED_FIELDS = ('contact_name', 'address', 'city', 'pincode')


@dataclass(frozen=True)
class CustomerDetails(ValueObject):
    """Contact and delivery address captured at checkout."""
    contact_name: str
    email: Email
    phone: PhoneNumber
    address: str
    city: str
    pincode: str
    delivery_notes: str = ""

    def __post_init__(self):
        for name in REQUIRED_FIELDS:
            value = (getattr(self, name) or '').strip()
            if not value:
                raise ValidationError(f"{name.replace('_', ' ').capitalize()} is required", field=name)
            object.__setattr__(self, name, value)

    @classmethod
    def create(
        cls,
        contact_name: str,
        email: str,
        phone: str,
        address: str,
        city: str,
        pincode: str,
        delivery_notes: str = "",
    ) -> 'CustomerDetails':
        """Build from raw strings, validating email and phone."""
        return cls(
            contact_name=contact_name,
            email=Email(email),
            phone=PhoneNumber(phone),
            address=address,
            city=city,
            pincode=pincode,
            delivery_notes=delivery_notes or "",
        )
