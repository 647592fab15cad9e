# Repository interfaces
from .order_repository import OrderRepository
from .inventory_ledger import InventoryLedger

__all__ = ['OrderRepository', 'InventoryLedger']
