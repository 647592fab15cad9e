"""
Storefront domain exceptions.
"""
from typing import Optional

from shared.domain.exceptions import DomainException, InvalidOperationError


class InvalidCheckoutTransitionError(InvalidOperationError):
    """Raised when a checkout event is not allowed in the current step."""

    def __init__(self, step, event):
        super().__init__(
            message=f"Cannot {event.value} from the {step.value} step",
            operation=event.value,
            state=step.value,
        )
        self.step = step
        self.event = event


class OrderGatewayError(DomainException):
    """
    Raised when the order service rejects a call or cannot be reached.

    ``details`` holds the decoded error body, if any.
    """

    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    STOCK_CONFLICT_CODES = frozenset({"INSUFFICIENT_STOCK", "STOCK_CONFLICT"})

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message=message, code=code or "ORDER_GATEWAY_ERROR")
        self.status_code = status_code
        self.details = details or {}

    @property
    def is_stock_conflict(self) -> bool:
        return self.code in self.STOCK_CONFLICT_CODES

    @property
    def is_transport_error(self) -> bool:
        return self.code == self.TRANSPORT_ERROR
