"""Tests for the pricing oracle and delivery charge rule."""

from decimal import Decimal
from uuid import uuid4

import pytest

from apps.orders.domain.services.pricing import (
    DeliveryChargePolicy,
    LineRequest,
    PricingOracle,
    calculate_delivery_charge,
    merge_line_requests,
)
from apps.products.domain.entities.product import Product
from apps.products.domain.repositories.product_repository import ProductRepository
from apps.products.domain.value_objects import Money, ProductStatus, Stock


class InMemoryProductRepository(ProductRepository):
    def __init__(self, *products):
        self.products = {product.id: product for product in products}

    def find_by_ids(self, product_ids):
        return [self.products[pid] for pid in product_ids if pid in self.products]


def make_product(price='45.00', quantity=10, status=ProductStatus.ACTIVE, name='Tomatoes'):
    return Product(
        producer_id=uuid4(),
        name=name,
        unit='kg',
        price=Money(Decimal(price)),
        stock=Stock(quantity),
        status=status,
    )


class TestDeliveryCharge:
    """Tests for the city based delivery fee."""

    @pytest.mark.parametrize('city', ['Trichy', 'TRICHY', 'trichy cantonment', 'Tiruchirappalli'])
    def test_local_cities_pay_local_rate(self, city):
        assert calculate_delivery_charge(city).amount == Decimal('30.00')

    @pytest.mark.parametrize('city', ['Chennai', 'Madurai', ''])
    def test_other_cities_pay_standard_rate(self, city):
        assert calculate_delivery_charge(city, '600001').amount == Decimal('50.00')

    def test_policy_from_settings_mapping(self):
        policy = DeliveryChargePolicy.from_mapping({
            'LOCAL_CITIES': ['Madurai'],
            'LOCAL_CHARGE': '20',
            'STANDARD_CHARGE': 75,
        })

        assert policy.charge_for('madurai').amount == Decimal('20.00')
        assert policy.charge_for('Trichy').amount == Decimal('75.00')

    def test_empty_mapping_uses_defaults(self):
        assert DeliveryChargePolicy.from_mapping(None) == DeliveryChargePolicy()


class TestPricingOracle:
    """Tests for PricingOracle.price."""

    def test_prices_from_product_record(self):
        product = make_product(price='45.00')
        oracle = PricingOracle(InMemoryProductRepository(product))

        result = oracle.price([LineRequest(product.id, 2)], city='Trichy')

        assert result.success
        priced = result.data
        assert priced.lines[0].unit_price.amount == Decimal('45.00')
        assert priced.subtotal.amount == Decimal('90.00')
        assert priced.delivery_charge.amount == Decimal('30.00')
        assert priced.total.amount == Decimal('120.00')

    def test_chennai_total(self):
        product = make_product(price='45.00')
        oracle = PricingOracle(InMemoryProductRepository(product))

        result = oracle.price([LineRequest(product.id, 2)], city='Chennai')

        assert result.data.total.amount == Decimal('140.00')

    def test_empty_order_rejected(self):
        result = PricingOracle(InMemoryProductRepository()).price([], city='Trichy')

        assert not result.success
        assert result.error_code == 'EMPTY_ORDER'

    @pytest.mark.parametrize('quantity', [0, -1, 1.5, True])
    def test_invalid_quantity_rejected(self, quantity):
        product = make_product()
        oracle = PricingOracle(InMemoryProductRepository(product))

        result = oracle.price([LineRequest(product.id, quantity)], city='Trichy')

        assert not result.success
        assert result.error_code == 'VALIDATION_ERROR'
        assert result.exception.field == 'quantity'

    def test_unknown_product_rejected(self):
        result = PricingOracle(InMemoryProductRepository()).price(
            [LineRequest(uuid4(), 1)], city='Trichy'
        )

        assert result.error_code == 'PRODUCT_NOT_FOUND'

    @pytest.mark.parametrize('status', [ProductStatus.INACTIVE, ProductStatus.OUT_OF_STOCK])
    def test_inactive_product_rejected(self, status):
        product = make_product(status=status)
        oracle = PricingOracle(InMemoryProductRepository(product))

        result = oracle.price([LineRequest(product.id, 1)], city='Trichy')

        assert result.error_code == 'PRODUCT_UNAVAILABLE'

    def test_quantity_above_stock_rejected(self):
        product = make_product(quantity=1)
        oracle = PricingOracle(InMemoryProductRepository(product))

        result = oracle.price([LineRequest(product.id, 2)], city='Trichy')

        assert result.error_code == 'INSUFFICIENT_STOCK'
        assert result.exception.available == 1
        assert result.exception.shortfall == 1
        assert 'Tomatoes' in result.error

    def test_duplicate_lines_merged_before_stock_check(self):
        product = make_product(quantity=3)
        oracle = PricingOracle(InMemoryProductRepository(product))

        result = oracle.price(
            [LineRequest(product.id, 2), LineRequest(product.id, 2)],
            city='Trichy',
        )

        assert result.error_code == 'INSUFFICIENT_STOCK'
        assert result.exception.requested == 4

    def test_merge_keeps_first_seen_order(self):
        a, b = uuid4(), uuid4()

        merged = merge_line_requests([LineRequest(a, 1), LineRequest(b, 2), LineRequest(a, 3)])

        assert merged == [LineRequest(a, 4), LineRequest(b, 2)]
