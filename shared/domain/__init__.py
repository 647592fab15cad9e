# Shared domain module
from .base_entity import BaseEntity, AggregateRoot
from .base_value_object import ValueObject
from .domain_event import DomainEvent
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    StateConflictError,
    InsufficientStockError,
    InvalidOperationError,
    PermissionDeniedError,
    PersistenceError,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'ValueObject',
    'DomainEvent',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'StateConflictError',
    'InsufficientStockError',
    'InvalidOperationError',
    'PermissionDeniedError',
    'PersistenceError',
]
