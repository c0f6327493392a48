"""Errors raised by the transaction service and its storage layer."""

from rest_framework import status


class TransactionServiceError(Exception):
    """Base error; carries the HTTP status it maps to."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TransactionServiceError):
    """Malformed, missing or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid data"


class NotFoundError(TransactionServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Transaction not found"


class PersistenceError(TransactionServiceError):
    """Any storage failure other than a missing row."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Storage failure"
