"""
Pricing oracle.

Derives the authoritative price of an order from product records. Prices
submitted by clients never reach this module.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence, Tuple
from uuid import UUID

from apps.products.domain.entities.product import Product
from apps.products.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ProductUnavailableError,
)
from apps.products.domain.repositories.product_repository import ProductRepository
from apps.products.domain.value_objects.money import Money
from shared.application import UseCaseResult
from ..exceptions import EmptyOrderError, InvalidQuantityError


@dataclass(frozen=True)
class LineRequest:
    """A product and quantity as requested by the customer."""
    product_id: UUID
    quantity: int


@dataclass(frozen=True)
class PricedLine:
    """A validated line carrying the price read from the product record."""
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price.multiply(self.quantity)


@dataclass(frozen=True)
class PricedOrder:
    """Validated lines plus the delivery charge for the destination."""
    lines: Tuple[PricedLine, ...]
    delivery_charge: Money

    @property
    def subtotal(self) -> Money:
        subtotal = Money.zero()
        for line in self.lines:
            subtotal = subtotal.add(line.line_total)
        return subtotal

    @property
    def total(self) -> Money:
        return self.subtotal.add(self.delivery_charge)


@dataclass(frozen=True)
class DeliveryChargePolicy:
    """
    Flat two-tier delivery fee keyed on the destination city.

    Cities containing one of ``local_cities`` (case-insensitive) pay the local
    rate; everything else pays the standard rate. The pincode is accepted so
    callers do not change when a pincode-based rate table replaces this rule.
    """
    local_cities: Tuple[str, ...] = ('trichy', 'tiruchirappalli')
    local_charge: Decimal = Decimal('30.00')
    standard_charge: Decimal = Decimal('50.00')

    def charge_for(self, city: str, pincode: Optional[str] = None) -> Money:
        normalized = (city or '').lower()
        if any(local in normalized for local in self.local_cities):
            return Money(self.local_charge)
        return Money(self.standard_charge)

    @classmethod
    def from_mapping(cls, config: Optional[Mapping]) -> 'DeliveryChargePolicy':
        """Build a policy from a settings dict, falling back to defaults."""
        if not config:
            return cls()
        default = cls()
        return cls(
            local_cities=tuple(
                city.lower() for city in config.get('LOCAL_CITIES', default.local_cities)
            ),
            local_charge=Decimal(str(config.get('LOCAL_CHARGE', default.local_charge))),
            standard_charge=Decimal(str(config.get('STANDARD_CHARGE', default.standard_charge))),
        )


DEFAULT_DELIVERY_POLICY = DeliveryChargePolicy()


def calculate_delivery_charge(city: str, pincode: Optional[str] = None) -> Money:
    """Delivery charge under the default policy."""
    return DEFAULT_DELIVERY_POLICY.charge_for(city, pincode)


def merge_line_requests(lines: Sequence[LineRequest]) -> List[LineRequest]:
    """Combine repeated products into one line, keeping first-seen order."""
    merged: Dict[UUID, int] = {}
    for line in lines:
        merged[line.product_id] = merged.get(line.product_id, 0) + line.quantity
    return [LineRequest(product_id=pid, quantity=qty) for pid, qty in merged.items()]


@dataclass
class PricingOracle:
    """Authoritative source of unit prices and delivery fees at order time."""
    product_repository: ProductRepository
    delivery_policy: DeliveryChargePolicy = field(default=DEFAULT_DELIVERY_POLICY)

    def price(
        self,
        lines: Sequence[LineRequest],
        city: str,
        pincode: Optional[str] = None,
    ) -> UseCaseResult[PricedOrder]:
        """
        Validate the requested lines and price them.

        Rejections, in the order they are checked:
            - EmptyOrderError: no lines
            - InvalidQuantityError: quantity is not a positive integer
            - ProductNotFoundError: an ID does not resolve to a product
            - ProductUnavailableError: the product is not active
            - InsufficientStockError: more requested than currently available

        The stock check here only avoids pointless transactions. Stock is
        enforced by the inventory ledger's conditional decrement.
        """
        if not lines:
            return UseCaseResult.fail_with(EmptyOrderError())

        for line in lines:
            if isinstance(line.quantity, bool) or not isinstance(line.quantity, int) or line.quantity < 1:
                return UseCaseResult.fail_with(
                    InvalidQuantityError(str(line.product_id), line.quantity)
                )

        requested = merge_line_requests(lines)
        products = {
            product.id: product
            for product in self.product_repository.find_by_ids(line.product_id for line in requested)
        }

        priced: List[PricedLine] = []
        for line in requested:
            product: Optional[Product] = products.get(line.product_id)
            if product is None:
                return UseCaseResult.fail_with(ProductNotFoundError(str(line.product_id)))

            if not product.is_purchasable:
                return UseCaseResult.fail_with(
                    ProductUnavailableError(
                        product_id=str(product.id),
                        product_name=product.name,
                        status=product.status.value,
                    )
                )

            if not product.can_supply(line.quantity):
                return UseCaseResult.fail_with(
                    InsufficientStockError(
                        product_id=str(product.id),
                        requested=line.quantity,
                        available=product.stock.quantity,
                        product_name=product.name,
                    )
                )

            priced.append(
                PricedLine(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=line.quantity,
                    unit_price=product.price,
                )
            )

        return UseCaseResult.ok(
            PricedOrder(
                lines=tuple(priced),
                delivery_charge=self.delivery_policy.charge_for(city, pincode),
            )
        )
