"""
Phone number value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidPhoneNumberError

MIN_DIGITS = 10
MAX_DIGITS = 15


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """
    Mobile or landline number.

    Spaces, dots, dashes and brackets are dropped; a leading ``+`` is kept.
    """
    value: str

    def __post_init__(self):
        raw = (self.value or '').strip()
        if not re.match(r'^\+?[0-9 ().-]+$', raw):
            raise InvalidPhoneNumberError(self.value)
        digits = re.sub(r'[^0-9]', '', raw)
        if not MIN_DIGITS <= len(digits) <= MAX_DIGITS:
            raise InvalidPhoneNumberError(self.value)
        # Use object.__setattr__ for frozen dataclass
        object.__setattr__(self, 'value', ('+' if raw.startswith('+') else '') + digits)
