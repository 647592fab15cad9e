# Django models
from .order_model import OrderModel, OrderLineModel

__all__ = ['OrderModel', 'OrderLineModel']
