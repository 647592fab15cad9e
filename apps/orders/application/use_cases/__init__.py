from .place_order import PlaceOrderUseCase
from .get_order import GetOrderQuery, GetOrderUseCase
from .update_order_status import UpdateOrderStatusUseCase

__all__ = [
    'PlaceOrderUseCase',
    'GetOrderQuery',
    'GetOrderUseCase',
    'UpdateOrderStatusUseCase',
]
