"""
Get order use case.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import OrderDTO


@dataclass
class GetOrderQuery:
    order_id: UUID
    customer_id: UUID


@dataclass
class GetOrderUseCase(UseCase[GetOrderQuery, OrderDTO]):
    """Read back one of the customer's own orders."""

    order_repository: OrderRepository

    def execute(self, input_dto: GetOrderQuery) -> UseCaseResult[OrderDTO]:
        order = self.order_repository.find_for_customer(input_dto.order_id, input_dto.customer_id)
        if order is None:
            return UseCaseResult.fail_with(OrderNotFoundError(str(input_dto.order_id)))
        return UseCaseResult.ok(OrderDTO.from_entity(order))
