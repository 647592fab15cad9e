# Django discovers models through this module
from .infrastructure.models import OrderModel, OrderLineModel  # noqa: F401
