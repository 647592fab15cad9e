"""
Order DTOs.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.services.pricing import LineRequest


@dataclass
class PlaceOrderDTO:
    """DTO for placing an order. Carries no prices."""
    customer_id: UUID
    lines: List[LineRequest]
    contact_name: str
    email: str
    phone: str
    address: str
    city: str
    pincode: str
    delivery_date: date
    payment_method: str
    delivery_notes: str = ""


@dataclass
class UpdateOrderStatusDTO:
    """DTO for a producer moving an order along its lifecycle."""
    order_id: UUID
    producer_id: UUID
    status: str


@dataclass
class OrderLineDTO:
    """DTO for order line output."""
    id: UUID
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass
class OrderDTO:
    """DTO for order output."""
    id: UUID
    order_number: str
    customer_id: UUID
    status: str
    subtotal: Decimal
    delivery_charge: Decimal
    total: Decimal
    payment_method: str
    delivery_date: date
    contact_name: str
    email: str
    phone: str
    address: str
    city: str
    pincode: str
    delivery_notes: str
    item_count: int
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    lines: List[OrderLineDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        customer = order.customer
        return cls(
            id=order.id,
            order_number=order.order_number.value,
            customer_id=order.customer_id,
            status=order.status.value,
            subtotal=order.subtotal.amount,
            delivery_charge=order.delivery_charge.amount,
            total=order.total.amount,
            payment_method=order.payment_method.value,
            delivery_date=order.delivery_date,
            contact_name=customer.contact_name,
            email=customer.email.value,
            phone=customer.phone.value,
            address=customer.address,
            city=customer.city,
            pincode=customer.pincode,
            delivery_notes=customer.delivery_notes,
            item_count=order.item_count,
            created_at=order.created_at,
            updated_at=order.updated_at,
            lines=[
                OrderLineDTO(
                    id=line.id,
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price.amount,
                    line_total=line.line_total.amount,
                )
                for line in order.lines
            ],
        )
