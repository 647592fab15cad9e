# Storefront application
from .cart_store import CartStore
from .checkout_flow import CheckoutFlowController, GENERIC_FAILURE_MESSAGE, Navigator
from .order_poller import OrderStatusPoller

__all__ = [
    'CartStore',
    'CheckoutFlowController',
    'GENERIC_FAILURE_MESSAGE',
    'Navigator',
    'OrderStatusPoller',
]
