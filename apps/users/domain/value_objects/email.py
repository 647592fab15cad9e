"""
Email value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation."""
    value: str

    def __post_init__(self):
        normalized = (self.value or '').strip()
        if not self._is_valid(normalized):
            raise InvalidEmailError(self.value)
        object.__setattr__(self, 'value', normalized)

    @staticmethod
    def _is_valid(email: str) -> bool:
        """Validate email format."""
        pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
        return bool(re.match(pattern, email))
