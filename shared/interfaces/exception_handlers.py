"""
Custom exception handlers for DRF.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError as RequestValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    InsufficientStockError,
    StateConflictError,
    InvalidOperationError,
    PermissionDeniedError,
    PersistenceError,
)

logger = logging.getLogger(__name__)


def error_payload(exc: DomainException) -> dict:
    """Build the JSON body describing a domain exception."""
    payload = {
        'error': exc.message,
        'code': exc.code,
    }

    if isinstance(exc, EntityNotFoundError):
        payload['entity'] = exc.entity_name
        payload['entity_id'] = exc.entity_id
    elif isinstance(exc, ValidationError):
        payload['field'] = exc.field
    elif isinstance(exc, InsufficientStockError):
        payload['product_id'] = exc.product_id
        payload['product_name'] = exc.product_name
        payload['requested'] = exc.requested
        payload['available'] = exc.available
        payload['shortfall'] = exc.shortfall
    elif isinstance(exc, StateConflictError) and getattr(exc, 'product_id', None):
        payload['product_id'] = exc.product_id
        payload['product_name'] = getattr(exc, 'product_name', None)
    elif isinstance(exc, InvalidOperationError):
        payload['operation'] = exc.operation
        payload['state'] = exc.state

    return payload


def status_for(exc: DomainException) -> int:
    """Map a domain exception to its HTTP status code."""
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, PermissionDeniedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, InvalidOperationError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, PersistenceError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, DomainException):
        if isinstance(exc, PersistenceError):
            logger.error(f"Persistence failure: {exc.message}", exc_info=exc)
        return Response(error_payload(exc), status=status_for(exc))

    if isinstance(exc, RequestValidationError) and response is not None:
        response.data = {
            'error': 'Invalid request data',
            'code': 'VALIDATION_ERROR',
            'details': response.data,
        }

    return response
