"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from datetime import date
from typing import List
from uuid import UUID

from apps.products.domain.value_objects.money import Money
from shared.domain import AggregateRoot
from ..value_objects.order_status import OrderStatus
from ..value_objects.customer_details import CustomerDetails
from ..value_objects.order_number import OrderNumber
from ..value_objects.payment_method import PaymentMethod
from ..events.order_placed import OrderPlaced
from ..events.order_status_changed import OrderStatusChanged
from ..exceptions import InvalidOrderStateError
from ..services.pricing import PricedOrder
from .order_line import OrderLine


@dataclass(kw_only=True, eq=False)
class Order(AggregateRoot):
    """
    Order entity representing a customer order.

    ``subtotal`` and ``total`` are derived from the lines and the delivery
    charge whenever the aggregate is built, so
    ``total == subtotal + delivery_charge`` and ``subtotal == sum(line totals)``
    hold for every instance.
    """
    order_number: OrderNumber
    customer_id: UUID
    lines: List[OrderLine]
    customer: CustomerDetails
    delivery_date: date
    payment_method: PaymentMethod
    delivery_charge: Money
    status: OrderStatus = OrderStatus.PENDING
    subtotal: Money = field(init=False)
    total: Money = field(init=False)

    def __post_init__(self):
        self._calculate_totals()

    def _calculate_totals(self) -> None:
        """Calculate the subtotal and total order amount."""
        subtotal = Money.zero(self.delivery_charge.currency)
        for line in self.lines:
            subtotal = subtotal.add(line.line_total)
        self.subtotal = subtotal
        self.total = subtotal.add(self.delivery_charge)

    @classmethod
    def place(
        cls,
        customer_id: UUID,
        priced: PricedOrder,
        customer: CustomerDetails,
        delivery_date: date,
        payment_method: PaymentMethod,
    ) -> 'Order':
        """Factory method to create a pending order from priced lines."""
        order = cls(
            order_number=OrderNumber.generate(),
            customer_id=customer_id,
            lines=[],
            customer=customer,
            delivery_date=delivery_date,
            payment_method=payment_method,
            delivery_charge=priced.delivery_charge,
        )
        order.lines = [
            OrderLine(
                order_id=order.id,
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity,
                unit_price=line.unit_price,
            )
            for line in priced.lines
        ]
        order._calculate_totals()
        order.add_domain_event(
            OrderPlaced(
                order_id=order.id,
                order_number=order.order_number.value,
                customer_id=customer_id,
                total=order.total.amount,
            )
        )
        return order

    def transition_to(self, new_status: OrderStatus) -> None:
        """Move along the lifecycle; cancelled is reachable from any non-terminal state."""
        if not self.status.can_become(new_status):
            raise InvalidOrderStateError(f"move to '{new_status.value}'", self.status.value)
        old_status = self.status
        self.status = new_status
        self.touch()
        self.add_domain_event(
            OrderStatusChanged(
                order_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
            )
        )

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(line.quantity for line in self.lines)
