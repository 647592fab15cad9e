from .django_order_repository import DjangoOrderRepository
from .django_inventory_ledger import DjangoInventoryLedger

__all__ = ['DjangoOrderRepository', 'DjangoInventoryLedger']
