from .success_projection import ConfirmationLine, OrderConfirmation, SuccessProjection

__all__ = ['ConfirmationLine', 'OrderConfirmation', 'SuccessProjection']
