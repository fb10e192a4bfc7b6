"""
Domain exceptions for reports app.

Usage:
    try:
        summary = get_report_summary(...)
    except ReportsServiceError as e:
        return Response({'error': str(e)}, status=400)
"""


class ReportsServiceError(Exception):
    """Base exception for all reports service errors."""
    pass


class InvalidDateRangeError(ReportsServiceError):
    """Raised when start_date is after end_date."""
    pass
