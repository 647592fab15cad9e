from .order_dto import OrderDTO, OrderLineDTO, PlaceOrderDTO, UpdateOrderStatusDTO

__all__ = ['OrderDTO', 'OrderLineDTO', 'PlaceOrderDTO', 'UpdateOrderStatusDTO']
