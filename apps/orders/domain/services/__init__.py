# Domain services
from .pricing import (
    DeliveryChargePolicy,
    DEFAULT_DELIVERY_POLICY,
    LineRequest,
    PricedLine,
    PricedOrder,
    PricingOracle,
    calculate_delivery_charge,
)

__all__ = [
    'DeliveryChargePolicy',
    'DEFAULT_DELIVERY_POLICY',
    'LineRequest',
    'PricedLine',
    'PricedOrder',
    'PricingOracle',
    'calculate_delivery_charge',
]
