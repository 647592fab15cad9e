# Shared interfaces module
from .exception_handlers import custom_exception_handler, error_payload, status_for
from .pagination import StandardPagination
from .permissions import TrustedOriginPermission

__all__ = [
    'custom_exception_handler',
    'error_payload',
    'status_for',
    'StandardPagination',
    'TrustedOriginPermission',
]
