"""
Update order status use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from shared.domain import ValidationError
from ...domain.exceptions import InvalidOrderStateError, OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.order_status import OrderStatus
from ..dtos.order_dto import OrderDTO, UpdateOrderStatusDTO

logger = logging.getLogger(__name__)


@dataclass
class UpdateOrderStatusUseCase(UseCase[UpdateOrderStatusDTO, OrderDTO]):
    """
    Move an order along its lifecycle on behalf of a producer.

    A producer may only touch orders that contain at least one of their
    products. Orders outside that set are reported as not found.
    """

    order_repository: OrderRepository

    def execute(self, input_dto: UpdateOrderStatusDTO) -> UseCaseResult[OrderDTO]:
        try:
            new_status = OrderStatus(input_dto.status)
        except ValueError:
            return UseCaseResult.fail_with(
                ValidationError(f"Unknown order status '{input_dto.status}'", field="status")
            )

        if not self.order_repository.contains_product_of(input_dto.order_id, input_dto.producer_id):
            return UseCaseResult.fail_with(OrderNotFoundError(str(input_dto.order_id)))

        order = self.order_repository.find_by_id(input_dto.order_id)
        if order is None:
            return UseCaseResult.fail_with(OrderNotFoundError(str(input_dto.order_id)))

        previous_status = order.status
        try:
            order.transition_to(new_status)
        except InvalidOrderStateError as e:
            return UseCaseResult.fail_with(e)

        if not self.order_repository.save_status(order, previous_status):
            current = self.order_repository.find_by_id(order.id)
            if current is None:
                return UseCaseResult.fail_with(OrderNotFoundError(str(order.id)))
            current_state = current.status.value
            logger.warning(
                f"Order {order.id} changed to '{current_state}' before "
                f"'{previous_status.value}' -> '{new_status.value}' was saved"
            )
            return UseCaseResult.fail_with(
                InvalidOrderStateError(f"move to '{new_status.value}'", current_state)
            )

        for event in order.clear_domain_events():
            logger.info(
                f"{event.event_type}: order {order.id} {event.old_status} -> {event.new_status}"
            )
        return UseCaseResult.ok(OrderDTO.from_entity(order))
