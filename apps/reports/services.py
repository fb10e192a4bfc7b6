"""
Report services.

The workspace and the date range are always explicit arguments; nothing is
read from the request or the current user here.
"""

import logging
from datetime import date, timedelta

from django.conf import settings
from django.utils import timezone

from .aggregation import build_report_summary
from .exceptions import InvalidDateRangeError
from .queries import fetch_report_tickets

logger = logging.getLogger(__name__)


def current_month_range(today=None):
    """First and last day of the month containing ``today``."""
    today = today or timezone.localdate()
    start = today.replace(day=1)
    next_month = (start + timedelta(days=32)).replace(day=1)
    return start, next_month - timedelta(days=1)


def get_report_summary(*, workspace_id, start_date: date, end_date: date):
    """
    Build the ReportSummary of a workspace for [start_date, end_date].

    Raises:
        InvalidDateRangeError: If start_date is after end_date.
    """
    if start_date > end_date:
        raise InvalidDateRangeError("Start date must be before end date")

    tickets = fetch_report_tickets(workspace_id, start_date, end_date)
    summary = build_report_summary(tickets, recent_limit=settings.REPORT_RECENT_TICKETS)

    logger.debug(
        "Report for workspace %s (%s..%s): %s tickets, total %s",
        workspace_id, start_date, end_date, summary.ticket_count, summary.total_amount
    )
    return summary
