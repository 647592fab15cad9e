"""
Place order use case.
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from django.db import DatabaseError
from django.utils import timezone

from shared.application import UseCase, UseCaseResult, UnitOfWork
from shared.domain import PersistenceError, ValidationError
from ...domain.entities.order import Order
from ...domain.exceptions import InvalidDeliveryDateError, UnsupportedPaymentMethodError
from ...domain.repositories.inventory_ledger import InventoryLedger
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.pricing import PricingOracle
from ...domain.value_objects.customer_details import CustomerDetails
from ...domain.value_objects.payment_method import PaymentMethod
from ..dtos.order_dto import OrderDTO, PlaceOrderDTO

logger = logging.getLogger(__name__)


@dataclass
class PlaceOrderUseCase(UseCase[PlaceOrderDTO, OrderDTO]):
    """
    Turn a cart submission into a durable order.

    Steps:
        1. Validate the submission and price it through the pricing oracle.
           A rejection returns before anything is written.
        2. Inside one unit of work, write the header and lines, then
           conditionally decrement stock for every line in product id order.
        3. If any decrement affects no row, roll the unit of work back and
           return the stock conflict. Header, lines and earlier decrements
           are all discarded.
        4. Otherwise commit and return the order.
    """

    pricing_oracle: PricingOracle
    order_repository: OrderRepository
    inventory_ledger: InventoryLedger
    unit_of_work: Callable[[], UnitOfWork]
    today: Callable[[], date] = field(default=timezone.localdate)

    def execute(self, input_dto: PlaceOrderDTO) -> UseCaseResult[OrderDTO]:
        try:
            payment_method = PaymentMethod(input_dto.payment_method)
        except ValueError:
            return UseCaseResult.fail_with(UnsupportedPaymentMethodError(input_dto.payment_method))
        if not payment_method.is_accepted:
            return UseCaseResult.fail_with(UnsupportedPaymentMethodError(payment_method.value))

        today = self.today()
        if input_dto.delivery_date <= today:
            return UseCaseResult.fail_with(InvalidDeliveryDateError(input_dto.delivery_date, today))

        try:
            customer = CustomerDetails.create(
                contact_name=input_dto.contact_name,
                email=input_dto.email,
                phone=input_dto.phone,
                address=input_dto.address,
                city=input_dto.city,
                pincode=input_dto.pincode,
                delivery_notes=input_dto.delivery_notes,
            )
        except ValidationError as e:
            return UseCaseResult.fail_with(e)

        pricing = self.pricing_oracle.price(input_dto.lines, customer.city, customer.pincode)
        if not pricing.success:
            logger.info(f"Order rejected for customer {input_dto.customer_id}: {pricing.error}")
            return UseCaseResult.fail_with(pricing.exception)

        order = Order.place(
            customer_id=input_dto.customer_id,
            priced=pricing.data,
            customer=customer,
            delivery_date=input_dto.delivery_date,
            payment_method=payment_method,
        )

        try:
            with self.unit_of_work() as uow:
                self.order_repository.add(order)
                # Fixed row-lock order so two orders sharing products cannot deadlock
                for line in sorted(order.lines, key=lambda l: str(l.product_id)):
                    outcome = self.inventory_ledger.decrement(
                        line.product_id,
                        line.quantity,
                        product_name=line.product_name,
                    )
                    if not outcome.success:
                        uow.rollback()
                        logger.warning(
                            f"Order {order.order_number.value} rolled back: {outcome.error}"
                        )
                        return UseCaseResult.fail_with(outcome.exception)
        except DatabaseError:
            logger.error(
                f"Order {order.order_number.value} could not be committed",
                exc_info=True,
            )
            return UseCaseResult.fail_with(PersistenceError())

        for event in order.clear_domain_events():
            logger.info(f"{event.event_type}: order {order.id} total {order.total.amount}")

        return UseCaseResult.ok(OrderDTO.from_entity(order))
