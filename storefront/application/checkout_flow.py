"""
Checkout flow controller.

Drives a customer from cart review to a placed order:
``review -> details -> payment -> confirmation``, with explicit back steps
from details and payment.
"""
import logging
import threading
from dataclasses import fields
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, Protocol, Union

from apps.orders.domain.exceptions import EmptyOrderError, UnsupportedPaymentMethodError
from apps.orders.domain.value_objects.payment_method import PaymentMethod
from shared.application import UseCaseResult
from shared.domain import DomainException, InsufficientStockError, ValidationError
from ..domain.checkout import (
    CheckoutEvent,
    CheckoutStep,
    OrderConfirmation,
    OrderDraft,
    next_step,
)
from ..domain.exceptions import InvalidCheckoutTransitionError, OrderGatewayError
from ..domain.repositories.order_gateway import OrderGateway
from .cart_store import CartStore

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = 'Failed to place order. Please try again.'


class Navigator(Protocol):
    """Page navigation collaborator."""

    def redirect_to_catalog(self) -> None:
        ...


class CheckoutFlowController:
    """
    Checkout state machine for one client session.

    Only one submission may be in flight; attempts made while one is
    pending return None and change nothing.
    """

    def __init__(
        self,
        cart_store: CartStore,
        gateway: OrderGateway,
        navigator: Navigator,
        today: Callable[[], date] = date.today,
        contact_name: str = '',
        email: str = '',
    ):
        self.cart_store = cart_store
        self.gateway = gateway
        self.navigator = navigator
        self.today = today
        self._prefill = {'contact_name': contact_name, 'email': email}
        self._submitting = threading.Lock()
        self.step = CheckoutStep.REVIEW
        self.draft = OrderDraft(**self._prefill)
        self.confirmation: Optional[OrderConfirmation] = None
        self.last_failure: Optional[DomainException] = None

    # Guards

    def can_render(self) -> bool:
        """Redirect to the catalog instead of showing an empty checkout."""
        if self.cart_store.is_empty and self.step is not CheckoutStep.CONFIRMATION:
            self.navigator.redirect_to_catalog()
            return False
        return True

    @property
    def is_submitting(self) -> bool:
        return self._submitting.locked()

    # Navigation

    def proceed_to_details(self) -> CheckoutStep:
        return self._apply(CheckoutEvent.PROCEED, expected=CheckoutStep.REVIEW)

    def proceed_to_payment(self) -> CheckoutStep:
        """Move on from the details form once every required field is valid."""
        if self.step is not CheckoutStep.DETAILS:
            raise InvalidCheckoutTransitionError(self.step, CheckoutEvent.PROCEED)
        self.draft.validate(self.today())
        return self._apply(CheckoutEvent.PROCEED)

    def back(self) -> CheckoutStep:
        return self._apply(CheckoutEvent.BACK)

    def _apply(self, event: CheckoutEvent, expected: Optional[CheckoutStep] = None) -> CheckoutStep:
        if expected is not None and self.step is not expected:
            raise InvalidCheckoutTransitionError(self.step, event)
        self.step = next_step(self.step, event)
        return self.step

    # Draft

    def update_draft(self, **values) -> OrderDraft:
        known = {f.name for f in fields(OrderDraft)}
        unknown = set(values) - known
        if unknown:
            raise TypeError(f"Unknown checkout fields: {', '.join(sorted(unknown))}")
        if 'payment_method' in values:
            values['payment_method'] = self._parse_payment_method(values['payment_method'])
        for name, value in values.items():
            setattr(self.draft, name, value)
        return self.draft

    def choose_payment_method(self, method: Union[str, PaymentMethod]) -> PaymentMethod:
        self.draft.payment_method = self._parse_payment_method(method)
        return self.draft.payment_method

    @staticmethod
    def _parse_payment_method(method: Union[str, PaymentMethod]) -> PaymentMethod:
        try:
            return PaymentMethod(method)
        except ValueError:
            raise UnsupportedPaymentMethodError(str(method)) from None

    # Submission

    def submit(self) -> Optional[UseCaseResult[OrderConfirmation]]:
        """
        Place the order.

        Returns None when another submission is already pending. On failure
        the step stays at payment and the cart is untouched.
        """
        if not self._submitting.acquire(blocking=False):
            logger.debug("Ignoring checkout submission while another is pending")
            return None
        try:
            return self._submit()
        finally:
            self._submitting.release()

    def _submit(self) -> UseCaseResult[OrderConfirmation]:
        if self.step is not CheckoutStep.PAYMENT:
            raise InvalidCheckoutTransitionError(self.step, CheckoutEvent.ORDER_PLACED)

        if not self.draft.payment_method.is_accepted:
            return self._fail(UnsupportedPaymentMethodError(self.draft.payment_method.value))
        if self.cart_store.is_empty:
            return self._fail(EmptyOrderError())
        try:
            self.draft.validate(self.today())
        except ValidationError as e:
            return self._fail(e)

        payload = self.draft.to_submission(self.cart_store.lines)
        try:
            response = self.gateway.place_order(payload)
            confirmation = OrderConfirmation(
                order_id=str(response['orderId']),
                total=Decimal(str(response['total'])),
            )
        except OrderGatewayError as e:
            logger.warning(f"Order submission failed ({e.code}): {e.message}")
            return self._fail(self._failure_from(e))
        except (KeyError, TypeError, InvalidOperation):
            logger.warning("Order service returned an unreadable confirmation", exc_info=True)
            return self._fail(OrderGatewayError(
                GENERIC_FAILURE_MESSAGE,
                code=OrderGatewayError.INVALID_RESPONSE,
            ))

        self.cart_store.clear()
        self.confirmation = confirmation
        self.last_failure = None
        self.step = next_step(self.step, CheckoutEvent.ORDER_PLACED)
        logger.info(f"Order {confirmation.order_id} placed, total {confirmation.total}")
        return UseCaseResult.ok(confirmation)

    def _fail(self, error: DomainException) -> UseCaseResult[OrderConfirmation]:
        self.last_failure = error
        return UseCaseResult.fail_with(error)

    @staticmethod
    def _failure_from(error: OrderGatewayError) -> DomainException:
        if not error.is_stock_conflict:
            return error
        details = error.details
        return InsufficientStockError(
            product_id=details.get('product_id'),
            requested=details.get('requested') or 0,
            available=details.get('available') or 0,
            product_name=details.get('product_name'),
        )

    @property
    def should_reduce_quantity(self) -> bool:
        """Whether the last failure calls for a smaller quantity rather than a retry."""
        return isinstance(self.last_failure, InsufficientStockError)

    @property
    def failure_message(self) -> Optional[str]:
        """Text to show for the last failure."""
        failure = self.last_failure
        if failure is None:
            return None
        if isinstance(failure, InsufficientStockError):
            label = failure.product_name or failure.product_id
            return (
                f"Only {failure.available} left of {label}. "
                f"Reduce the quantity by {failure.shortfall} and try again."
            )
        if isinstance(failure, ValidationError):
            return failure.message
        return GENERIC_FAILURE_MESSAGE

    # Session

    def start_new_session(self) -> CheckoutStep:
        """Leave the confirmation and begin a fresh checkout."""
        self.step = CheckoutStep.REVIEW
        self.draft = OrderDraft(**self._prefill)
        self.confirmation = None
        self.last_failure = None
        return self.step
