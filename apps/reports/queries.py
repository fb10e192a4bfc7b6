from apps.tickets.models import Ticket


def fetch_report_tickets(workspace_id, start_date, end_date):
    """
    Tickets of a workspace between two days (inclusive), newest first.

    Store, store category and items are loaded up front so aggregation
    and serialization run without further queries.
    """
    return list(
        Ticket.objects.filter(
            workspace_id=workspace_id,
            date__gte=start_date,
            date__lte=end_date,
        ).select_related(
            'store',
            'store__category',
        ).prefetch_related(
            'items',
            'items__product',
        ).order_by('-date', '-created_at')
    )
