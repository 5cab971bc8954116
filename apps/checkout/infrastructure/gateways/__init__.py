from .http_order_submission_gateway import HttpOrderSubmissionGateway

__all__ = ['HttpOrderSubmissionGateway']
