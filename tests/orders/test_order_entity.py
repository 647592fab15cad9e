"""Tests for the Order aggregate and its status lifecycle."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.orders.domain.entities import Order
from apps.orders.domain.events import OrderPlaced, OrderStatusChanged
from apps.orders.domain.exceptions import InvalidOrderStateError
from apps.orders.domain.services.pricing import PricedLine, PricedOrder
from apps.orders.domain.value_objects import CustomerDetails, OrderStatus, PaymentMethod
from apps.products.domain.value_objects import Money
from shared.domain import ValidationError


def customer_details(**overrides):
    values = dict(
        contact_name='Asha Kumar',
        email='asha@example.com',
        phone='+91 98765 43210',
        address='12 Market Road',
        city='Trichy',
        pincode='620001',
    )
    values.update(overrides)
    return CustomerDetails.create(**values)


def place_order(lines, delivery_charge='30.00'):
    priced = PricedOrder(
        lines=tuple(
            PricedLine(product_id=uuid4(), product_name=name, quantity=qty, unit_price=Money(Decimal(price)))
            for name, qty, price in lines
        ),
        delivery_charge=Money(Decimal(delivery_charge)),
    )
    return Order.place(
        customer_id=uuid4(),
        priced=priced,
        customer=customer_details(),
        delivery_date=date(2030, 1, 2),
        payment_method=PaymentMethod.COD,
    )


class TestOrderPlacement:
    """Tests for Order.place."""

    def test_totals_follow_lines(self):
        order = place_order([('Tomatoes', 2, '45.00'), ('Okra', 3, '12.50')])

        assert order.subtotal.amount == Decimal('127.50')
        assert order.total.amount == Decimal('157.50')
        assert order.subtotal.amount == sum(line.line_total.amount for line in order.lines)
        assert order.total.amount == order.subtotal.amount + order.delivery_charge.amount

    def test_new_order_is_pending_with_event(self):
        order = place_order([('Tomatoes', 2, '45.00')])

        assert order.status == OrderStatus.PENDING
        assert order.item_count == 2
        events = order.clear_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], OrderPlaced)
        assert events[0].total == Decimal('120.00')

    def test_lines_reference_order(self):
        order = place_order([('Tomatoes', 1, '45.00')])

        assert all(line.order_id == order.id for line in order.lines)

    def test_order_number_format(self):
        order = place_order([('Tomatoes', 1, '45.00')])

        assert order.order_number.value.startswith('FM-')
        assert len(order.order_number.value) == len('FM-20300102-ABCDEFGH')


class TestOrderStatusLifecycle:
    """Tests for Order.transition_to."""

    def test_forward_path(self):
        order = place_order([('Tomatoes', 1, '45.00')])
        order.clear_domain_events()

        for status in (OrderStatus.CONFIRMED, OrderStatus.PROCESSING,
                       OrderStatus.SHIPPED, OrderStatus.DELIVERED):
            order.transition_to(status)

        assert order.status == OrderStatus.DELIVERED
        events = order.clear_domain_events()
        assert [e.new_status for e in events] == ['confirmed', 'processing', 'shipped', 'delivered']
        assert all(isinstance(e, OrderStatusChanged) for e in events)

    @pytest.mark.parametrize('start', [
        OrderStatus.PENDING, OrderStatus.CONFIRMED, OrderStatus.PROCESSING, OrderStatus.SHIPPED,
    ])
    def test_cancel_from_non_terminal(self, start):
        assert start.can_become(OrderStatus.CANCELLED)

    @pytest.mark.parametrize('terminal', [OrderStatus.DELIVERED, OrderStatus.CANCELLED])
    def test_terminal_states_have_no_exit(self, terminal):
        assert terminal.is_terminal
        assert terminal.allowed_next() == frozenset()

    def test_skipping_ahead_rejected(self):
        order = place_order([('Tomatoes', 1, '45.00')])

        with pytest.raises(InvalidOrderStateError) as exc_info:
            order.transition_to(OrderStatus.SHIPPED)

        assert exc_info.value.state == 'pending'
        assert order.status == OrderStatus.PENDING


class TestCustomerDetails:
    """Tests for the CustomerDetails value object."""

    def test_phone_normalised(self):
        assert customer_details().phone.value == '+919876543210'

    def test_landline_accepted(self):
        assert customer_details(phone='0431 2345678').phone.value == '04312345678'

    def test_blank_address_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            customer_details(address='   ')

        assert exc_info.value.field == 'address'

    def test_bad_email_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            customer_details(email='not-an-email')

        assert exc_info.value.field == 'email'

    @pytest.mark.parametrize('phone', ['12345', '98765-abc-43210', '+91 98765 43210 12345 6'])
    def test_bad_phone_rejected(self, phone):
        with pytest.raises(ValidationError) as exc_info:
            customer_details(phone=phone)

        assert exc_info.value.field == 'phone'
