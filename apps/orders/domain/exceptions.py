"""
Order domain exceptions.
"""
from shared.domain.exceptions import (
    EntityNotFoundError,
    InvalidOperationError,
    ValidationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="Order", entity_id=identifier, code="ORDER_NOT_FOUND")
        self.identifier = identifier


class EmptyOrderError(ValidationError):
    """Raised when an order is submitted without items."""

    def __init__(self):
        super().__init__(message="No items in order", field="items")
        self.code = "EMPTY_ORDER"


class InvalidQuantityError(ValidationError):
    """Raised when a requested quantity is not a positive whole number."""

    def __init__(self, product_id: str, quantity):
        super().__init__(
            message=f"Quantity for product {product_id} must be a positive whole number, got {quantity}",
            field="quantity",
        )
        self.product_id = product_id
        self.quantity = quantity


class UnsupportedPaymentMethodError(ValidationError):
    """Raised when the payment method is not accepted."""

    def __init__(self, payment_method: str):
        super().__init__(
            message=f"Payment method '{payment_method}' is not supported",
            field="paymentMethod",
        )
        self.payment_method = payment_method


class InvalidDeliveryDateError(ValidationError):
    """Raised when the delivery date is not in the future."""

    def __init__(self, delivery_date, today):
        super().__init__(
            message=f"Delivery date {delivery_date} must be after {today}",
            field="deliveryDate",
        )
        self.delivery_date = delivery_date


class InvalidOrderStateError(InvalidOperationError):
    """Raised when an order operation is invalid for the current state."""

    def __init__(self, operation: str, current_state: str):
        super().__init__(
            message=f"Cannot {operation} order in '{current_state}' state",
            operation=operation,
            state=current_state,
        )
