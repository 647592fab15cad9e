# Storefront domain
from .cart import (
    AddItem,
    CartLine,
    CartState,
    ClearCart,
    LoadCart,
    RemoveItem,
    SetQuantity,
    reduce,
)
from .checkout import (
    CheckoutEvent,
    CheckoutStep,
    OrderConfirmation,
    OrderDraft,
    next_step,
)
from .exceptions import InvalidCheckoutTransitionError, OrderGatewayError

__all__ = [
    'AddItem',
    'CartLine',
    'CartState',
    'ClearCart',
    'LoadCart',
    'RemoveItem',
    'SetQuantity',
    'reduce',
    'CheckoutEvent',
    'CheckoutStep',
    'OrderConfirmation',
    'OrderDraft',
    'next_step',
    'InvalidCheckoutTransitionError',
    'OrderGatewayError',
]
