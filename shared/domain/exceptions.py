"""
Domain exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code=code
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class StateConflictError(DomainException):
    """
    Raised when the current state of a resource prevents the operation.

    The caller may retry after adjusting its request (e.g. a smaller quantity).
    """

    def __init__(self, message: str, code: str = "STATE_CONFLICT"):
        super().__init__(message=message, code=code)


class InsufficientStockError(StateConflictError):
    """Raised when stock is insufficient."""

    def __init__(
        self,
        product_id: str,
        requested: int,
        available: int,
        product_name: str = None,
    ):
        label = product_name or product_id
        super().__init__(
            message=(
                f"Insufficient stock for {label}. "
                f"Available: {available}, Requested: {requested}"
            ),
            code="INSUFFICIENT_STOCK"
        )
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available

    @property
    def shortfall(self) -> int:
        return max(self.requested - self.available, 0)


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None):
        super().__init__(message=message, code="INVALID_OPERATION")
        self.operation = operation
        self.state = state


class PermissionDeniedError(DomainException):
    """Raised when the caller may not act on a resource."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message=message, code="PERMISSION_DENIED")


class PersistenceError(DomainException):
    """Raised when a unit of work could not be committed."""

    def __init__(self, message: str = "Order could not be processed. Please try again."):
        super().__init__(message=message, code="PERSISTENCE_ERROR")
