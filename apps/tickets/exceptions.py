"""
Domain exceptions for tickets app.

Plain ``TicketServiceError`` subclasses are caught in views; the
``APIException`` ones map straight onto an HTTP status.
"""
from rest_framework.exceptions import APIException


class TicketServiceError(Exception):
    """Base exception for ticket service errors."""
    pass


class InvalidTicketReferenceError(TicketServiceError):
    """Raised when a store or product belongs to another workspace."""
    pass


class InvalidInstallmentError(TicketServiceError):
    """Raised when current_installment exceeds installments."""
    pass


class TicketNotFoundError(APIException):
    """Ticket not found in this workspace."""
    status_code = 404
    default_detail = 'Ticket not found.'
    default_code = 'ticket_not_found'
