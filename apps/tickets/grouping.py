"""Grouping of tickets by calendar day."""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List

from .dates import date_to_iso_string, get_today_normalized


def _ticket_date(ticket: Any):
    if isinstance(ticket, Mapping):
        return ticket.get('date')
    return getattr(ticket, 'date', None)


def group_tickets_by_date(tickets: Iterable[Any]) -> Dict[str, List[Any]]:
    """
    Partition tickets into ``{'YYYY-MM-DD': [ticket, ...]}``.

    Works on model instances and on plain mappings (serialized tickets).
    Buckets appear in first-seen order and keep the input order inside
    each bucket. A record without a date lands in today's bucket.

    Example::

        groups = group_tickets_by_date(Ticket.objects.filter(workspace=ws))
        for day, day_tickets in groups.items():
            print(day, len(day_tickets))
    """
    groups: Dict[str, List[Any]] = {}

    for ticket in tickets:
        value = _ticket_date(ticket) or get_today_normalized()
        groups.setdefault(date_to_iso_string(value), []).append(ticket)

    return groups
