"""
Custom exception handlers for DRF.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    BusinessRuleViolationError,
    InsufficientStockError,
    InvalidOperationError,
    GatewayUnavailableError,
)

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    # Handle domain exceptions
    if isinstance(exc, EntityNotFoundError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'entity': exc.entity_name,
                'entity_id': exc.entity_id,
            },
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, ValidationError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'field': exc.field,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, InsufficientStockError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'product_id': exc.product_id,
                'requested': exc.requested,
                'available': exc.available,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, GatewayUnavailableError):
        logger.warning(f"Unhandled gateway failure: {exc.message}")
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'operation': exc.operation,
            },
            status=status.HTTP_502_BAD_GATEWAY,
        )

    if isinstance(exc, BusinessRuleViolationError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'rule': exc.rule,
            },
            status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    if isinstance(exc, InvalidOperationError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'operation': exc.operation,
                'state': exc.state,
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, DomainException):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if response is None:
        view = context.get('view')
        logger.error(
            f"Unexpected failure in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
            exc_info=exc,
        )

    return response
