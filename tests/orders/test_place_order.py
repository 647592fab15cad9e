"""Tests for order placement, the inventory ledger and the unit of work."""

from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest
from django.db import DatabaseError
from django.utils import timezone

from apps.orders.application.dtos import PlaceOrderDTO
from apps.orders.application.use_cases import PlaceOrderUseCase
from apps.orders.domain.repositories import InventoryLedger, OrderRepository
from apps.orders.domain.services.pricing import LineRequest, PricingOracle
from apps.orders.infrastructure.repositories import DjangoInventoryLedger, DjangoOrderRepository
from apps.orders.models import OrderLineModel, OrderModel
from apps.products.domain.entities import Product
from apps.products.domain.exceptions import StockConflictError
from apps.products.domain.repositories import ProductRepository
from apps.products.domain.value_objects import Money, Stock
from apps.products.infrastructure.repositories import DjangoProductRepository
from apps.products.models import ProductModel
from shared.application import UnitOfWork, UseCaseResult
from shared.infrastructure.persistence import DjangoUnitOfWork


def build_use_case(**overrides):
    values = dict(
        pricing_oracle=PricingOracle(DjangoProductRepository()),
        order_repository=DjangoOrderRepository(),
        inventory_ledger=DjangoInventoryLedger(),
        unit_of_work=DjangoUnitOfWork,
    )
    values.update(overrides)
    return PlaceOrderUseCase(**values)


def order_dto(customer, lines, city='Trichy', **overrides):
    values = dict(
        customer_id=customer.id,
        lines=lines,
        contact_name='Asha Kumar',
        email='asha@example.com',
        phone='9876543210',
        address='12 Market Road',
        city=city,
        pincode='620001',
        delivery_date=timezone.localdate() + timedelta(days=1),
        payment_method='cod',
    )
    values.update(overrides)
    return PlaceOrderDTO(**values)


def stock_of(product):
    return ProductModel.objects.get(id=product.id).available_quantity


@pytest.mark.django_db
class TestInventoryLedger:
    """Tests for DjangoInventoryLedger.decrement."""

    def test_decrement_when_enough_stock(self, make_product):
        product = make_product(available_quantity=5)

        result = DjangoInventoryLedger().decrement(product.id, 3)

        assert result.success
        assert stock_of(product) == 2

    def test_decrement_to_zero(self, make_product):
        product = make_product(available_quantity=2)

        assert DjangoInventoryLedger().decrement(product.id, 2).success
        assert stock_of(product) == 0

    def test_conflict_leaves_stock_untouched(self, make_product):
        product = make_product(available_quantity=1)

        result = DjangoInventoryLedger().decrement(product.id, 2, product_name='Tomatoes')

        assert not result.success
        assert result.error_code == 'STOCK_CONFLICT'
        assert result.exception.available == 1
        assert result.exception.product_name == 'Tomatoes'
        assert stock_of(product) == 1

    def test_status_not_changed_at_zero(self, make_product):
        product = make_product(available_quantity=1)

        DjangoInventoryLedger().decrement(product.id, 1)

        assert ProductModel.objects.get(id=product.id).status == 'active'


@pytest.mark.django_db
class TestPlaceOrder:
    """Tests for PlaceOrderUseCase."""

    def test_trichy_order(self, customer, make_product):
        product = make_product(price_per_unit=Decimal('45.00'), available_quantity=10)

        result = build_use_case().execute(order_dto(customer, [LineRequest(product.id, 2)]))

        assert result.success
        order = result.data
        assert order.subtotal == Decimal('90.00')
        assert order.delivery_charge == Decimal('30.00')
        assert order.total == Decimal('120.00')
        assert order.status == 'pending'
        assert stock_of(product) == 8

    def test_chennai_order(self, customer, make_product):
        product = make_product(price_per_unit=Decimal('45.00'))

        result = build_use_case().execute(
            order_dto(customer, [LineRequest(product.id, 2)], city='Chennai')
        )

        assert result.data.total == Decimal('140.00')

    def test_persisted_totals_are_consistent(self, customer, make_product):
        tomatoes = make_product(price_per_unit=Decimal('45.00'))
        okra = make_product(name='Okra', price_per_unit=Decimal('12.50'))

        result = build_use_case().execute(order_dto(
            customer,
            [LineRequest(tomatoes.id, 2), LineRequest(okra.id, 3)],
        ))

        row = OrderModel.objects.get(id=result.data.id)
        lines = list(row.lines.all())
        assert row.subtotal == sum(line.line_total for line in lines)
        assert row.total == row.subtotal + row.delivery_charge
        assert [line.product_name for line in lines] == ['Tomatoes', 'Okra']
        assert lines[0].unit_price_at_purchase == Decimal('45.00')

    def test_price_frozen_at_purchase(self, customer, make_product):
        product = make_product(price_per_unit=Decimal('45.00'))
        result = build_use_case().execute(order_dto(customer, [LineRequest(product.id, 1)]))

        ProductModel.objects.filter(id=product.id).update(price_per_unit=Decimal('99.00'))

        line = OrderLineModel.objects.get(order_id=result.data.id)
        assert line.unit_price_at_purchase == Decimal('45.00')

    def test_rejected_before_any_write(self, customer, make_product):
        product = make_product(available_quantity=1)

        result = build_use_case().execute(order_dto(customer, [LineRequest(product.id, 2)]))

        assert not result.success
        assert result.error_code == 'INSUFFICIENT_STOCK'
        assert stock_of(product) == 1
        assert not OrderModel.objects.exists()

    def test_unsupported_payment_method(self, customer, make_product):
        product = make_product()

        result = build_use_case().execute(
            order_dto(customer, [LineRequest(product.id, 1)], payment_method='online')
        )

        assert result.exception.field == 'paymentMethod'
        assert not OrderModel.objects.exists()

    def test_delivery_date_must_be_in_future(self, customer, make_product):
        product = make_product()

        result = build_use_case().execute(
            order_dto(customer, [LineRequest(product.id, 1)], delivery_date=timezone.localdate())
        )

        assert result.exception.field == 'deliveryDate'

    def test_stock_conflict_rolls_back_everything(self, customer, make_product):
        """Another order takes the last units between pricing and decrement."""
        plenty = make_product(name='Okra', available_quantity=10)
        scarce = make_product(name='Mangoes', available_quantity=1)

        class ConcurrentBuyerOracle(PricingOracle):
            def price(self, lines, city, pincode=None):
                result = super().price(lines, city, pincode)
                ProductModel.objects.filter(id=scarce.id).update(available_quantity=0)
                return result

        use_case = build_use_case(pricing_oracle=ConcurrentBuyerOracle(DjangoProductRepository()))
        result = use_case.execute(order_dto(
            customer,
            [LineRequest(plenty.id, 3), LineRequest(scarce.id, 1)],
        ))

        assert not result.success
        assert result.error_code == 'STOCK_CONFLICT'
        assert 'Mangoes' in result.error
        assert not OrderModel.objects.exists()
        assert not OrderLineModel.objects.exists()
        assert stock_of(plenty) == 10
        assert stock_of(scarce) == 0

    def test_exactly_one_winner_for_last_unit(self, customer, django_user_model, make_product):
        product = make_product(available_quantity=1)
        rival = django_user_model.objects.create_user(
            username='rival', email='rival@example.com', password='x',
        )
        outcomes = {}

        class InterleavedOracle(PricingOracle):
            """Lets the rival's whole order run after this one has been priced."""

            def price(self, lines, city, pincode=None):
                result = super().price(lines, city, pincode)
                outcomes['rival'] = build_use_case().execute(
                    order_dto(rival, [LineRequest(product.id, 1)])
                )
                return result

        outcomes['first'] = build_use_case(
            pricing_oracle=InterleavedOracle(DjangoProductRepository())
        ).execute(order_dto(customer, [LineRequest(product.id, 1)]))

        assert outcomes['rival'].success
        assert not outcomes['first'].success
        assert outcomes['first'].error_code == 'STOCK_CONFLICT'
        assert stock_of(product) == 0
        assert OrderModel.objects.count() == 1

    def test_sequential_orders_for_last_unit(self, customer, make_product):
        product = make_product(available_quantity=1)
        use_case = build_use_case()

        first = use_case.execute(order_dto(customer, [LineRequest(product.id, 1)]))
        second = use_case.execute(order_dto(customer, [LineRequest(product.id, 1)]))

        assert first.success
        assert not second.success
        assert stock_of(product) == 0

    def test_database_error_becomes_persistence_error(self, customer, make_product):
        product = make_product(available_quantity=5)

        class BrokenOrderRepository(DjangoOrderRepository):
            def add(self, order):
                super().add(order)
                raise DatabaseError("connection lost")

        result = build_use_case(order_repository=BrokenOrderRepository()).execute(
            order_dto(customer, [LineRequest(product.id, 1)])
        )

        assert result.error_code == 'PERSISTENCE_ERROR'
        assert not OrderModel.objects.exists()
        assert stock_of(product) == 5


class RecordingUnitOfWork(UnitOfWork):
    def __init__(self):
        self.entered = False
        self.rolled_back = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def rollback(self):
        self.rolled_back = True


class MemoryOrderRepository(OrderRepository):
    def __init__(self):
        self.added = []

    def add(self, order):
        self.added.append(order)
        return order

    def find_by_id(self, order_id):
        return None

    def find_for_customer(self, order_id, customer_id):
        return None

    def save_status(self, order, expected_status):
        return True

    def contains_product_of(self, order_id, producer_id):
        return False


class ShelfProductRepository(ProductRepository):
    def __init__(self, *products):
        self.products = {product.id: product for product in products}

    def find_by_ids(self, product_ids):
        return [self.products[pid] for pid in product_ids if pid in self.products]


class EmptyShelfLedger(InventoryLedger):
    def decrement(self, product_id, quantity, product_name=None):
        return UseCaseResult.fail_with(
            StockConflictError(str(product_id), quantity, 0, product_name)
        )


class RecordingLedger(InventoryLedger):
    def __init__(self):
        self.decremented = []

    def decrement(self, product_id, quantity, product_name=None):
        self.decremented.append(product_id)
        return UseCaseResult.ok(0)


def produce(name):
    return Product(
        producer_id=uuid4(),
        name=name,
        unit='kg',
        price=Money(Decimal('80.00')),
        stock=Stock(5),
    )


def memory_use_case(products, ledger, uow=None, orders=None):
    return PlaceOrderUseCase(
        pricing_oracle=PricingOracle(ShelfProductRepository(*products)),
        order_repository=orders if orders is not None else MemoryOrderRepository(),
        inventory_ledger=ledger,
        unit_of_work=lambda: uow if uow is not None else RecordingUnitOfWork(),
        today=lambda: date(2030, 1, 1),
    )


def memory_dto(lines):
    return PlaceOrderDTO(
        customer_id=uuid4(),
        lines=lines,
        contact_name='Asha Kumar',
        email='asha@example.com',
        phone='9876543210',
        address='12 Market Road',
        city='Trichy',
        pincode='620001',
        delivery_date=date(2030, 1, 2),
        payment_method='cod',
    )


class TestPlaceOrderRollbackSignal:
    """A failed decrement triggers an explicit rollback on the unit of work."""

    def test_rollback_requested_on_conflict(self):
        product = produce('Mangoes')
        uow = RecordingUnitOfWork()
        orders = MemoryOrderRepository()

        result = memory_use_case([product], EmptyShelfLedger(), uow=uow, orders=orders).execute(
            memory_dto([LineRequest(product.id, 1)])
        )

        assert uow.entered
        assert uow.rolled_back
        assert len(orders.added) == 1
        assert result.error_code == 'STOCK_CONFLICT'
        assert 'Mangoes' in result.error


class TestDecrementOrder:
    """Stock rows are decremented in product id order, whatever the cart order."""

    def test_lines_decremented_by_product_id(self):
        products = [produce(name) for name in ('Mangoes', 'Bananas', 'Guavas')]
        ledger = RecordingLedger()
        by_id = sorted(products, key=lambda p: str(p.id))

        result = memory_use_case(products, ledger).execute(
            memory_dto([LineRequest(p.id, 1) for p in reversed(by_id)])
        )

        assert result.success
        assert ledger.decremented == [p.id for p in by_id]
        assert [line.product_id for line in result.data.lines] == [p.id for p in reversed(by_id)]
