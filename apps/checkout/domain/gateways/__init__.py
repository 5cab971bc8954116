from .order_submission_gateway import OrderSubmissionGateway

__all__ = ['OrderSubmissionGateway']
