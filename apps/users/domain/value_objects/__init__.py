# Value objects
from .email import Email
from .phone_number import PhoneNumber

__all__ = ['Email', 'PhoneNumber']
