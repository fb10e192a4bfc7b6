"""
Report Aggregation
==================

Pure summarization of an already-fetched ticket list. Nothing here touches
the database: callers pass tickets joined with their store and store
category (see ``apps.reports.queries``).

Classes:
    StoreTotal: Spend at one store.
    CategoryTotal: Spend in one store category.
    ReportSummary: Totals, breakdowns and the most recent tickets.

Example::

    from apps.reports.aggregation import build_report_summary

    summary = build_report_summary(tickets)
    summary.total_amount            # Decimal('180.00')
    summary.by_payment_method       # {'Debito': Decimal('130.00'), 'Credito': Decimal('50.00')}
    [s.store_name for s in summary.by_store]
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Sequence

from apps.tickets.models import PaymentMethod

ZERO = Decimal('0')
CENT = Decimal('0.01')
DEFAULT_RECENT_LIMIT = 5


def empty_payment_buckets() -> Dict[str, Decimal]:
    """Both stored payment methods, zeroed."""
    return {method: ZERO for method in PaymentMethod.values}


@dataclass
class StoreTotal:
    store_id: Any
    store_name: str
    category_name: Optional[str]
    total: Decimal = ZERO
    ticket_count: int = 0


@dataclass
class CategoryTotal:
    category_id: Any
    category_name: str
    total: Decimal = ZERO
    ticket_count: int = 0


@dataclass
class ReportSummary:
    total_amount: Decimal = ZERO
    ticket_count: int = 0
    store_count: int = 0
    average_ticket_amount: Decimal = ZERO
    by_payment_method: Dict[str, Decimal] = field(default_factory=empty_payment_buckets)
    by_store: List[StoreTotal] = field(default_factory=list)
    by_category: List[CategoryTotal] = field(default_factory=list)
    recent_tickets: List[Any] = field(default_factory=list)


def _average(total: Decimal, count: int) -> Decimal:
    if not count:
        return ZERO
    return (total / count).quantize(CENT, rounding=ROUND_HALF_UP)


def build_report_summary(
    tickets: Sequence[Any],
    recent_limit: int = DEFAULT_RECENT_LIMIT
) -> ReportSummary:
    """
    Summarize tickets.

    Each ticket needs ``total_amount``, ``payment_method`` and ``store``
    (``None`` or an object with ``id``, ``name`` and ``category``; the
    category is ``None`` or has ``id`` and ``name``).

    Rules:
        - Tickets without a store count in the totals only.
        - Tickets whose store has no category are left out of ``by_category``.
        - ``by_store`` and ``by_category`` are sorted by total descending;
          equal totals keep the order in which they first appeared.
        - ``recent_tickets`` is the first ``recent_limit`` tickets as given,
          callers pass them newest first.

    Args:
        tickets: Tickets of the report period, newest first.
        recent_limit: How many tickets to keep in ``recent_tickets``.

    Returns:
        ReportSummary: Zeroed summary for an empty list.
    """
    tickets = list(tickets)
    summary = ReportSummary()

    stores: Dict[Any, StoreTotal] = {}
    categories: Dict[Any, CategoryTotal] = {}

    for ticket in tickets:
        amount = Decimal(ticket.total_amount)
        summary.total_amount += amount

        method = ticket.payment_method
        summary.by_payment_method[method] = summary.by_payment_method.get(method, ZERO) + amount

        store = ticket.store
        if store is None:
            continue

        category = getattr(store, 'category', None)

        store_total = stores.get(store.id)
        if store_total is None:
            store_total = stores[store.id] = StoreTotal(
                store_id=store.id,
                store_name=store.name,
                category_name=category.name if category is not None else None,
            )
        store_total.total += amount
        store_total.ticket_count += 1

        if category is None:
            continue

        category_total = categories.get(category.id)
        if category_total is None:
            category_total = categories[category.id] = CategoryTotal(
                category_id=category.id,
                category_name=category.name,
            )
        category_total.total += amount
        category_total.ticket_count += 1

    summary.ticket_count = len(tickets)
    summary.store_count = len(stores)
    summary.average_ticket_amount = _average(summary.total_amount, summary.ticket_count)

    # sorted() is stable, ties keep first appearance
    summary.by_store = sorted(stores.values(), key=lambda s: s.total, reverse=True)
    summary.by_category = sorted(categories.values(), key=lambda c: c.total, reverse=True)
    summary.recent_tickets = tickets[:recent_limit]

    return summary
