"""
User domain exceptions.
"""
from shared.domain.exceptions import ValidationError


class InvalidEmailError(ValidationError):
    """Raised when an email is invalid."""

    def __init__(self, email: str, field: str = "email"):
        super().__init__(message=f"Invalid email format: '{email}'", field=field)
        self.email = email


class InvalidPhoneNumberError(ValidationError):
    """Raised when a phone number is invalid."""

    def __init__(self, phone: str, field: str = "phone"):
        super().__init__(message=f"Invalid phone number: '{phone}'", field=field)
        self.phone = phone
