"""
Product price history.

Prices are recorded per (product, store) and never edited. The newest row
is the current price, except that a discount about to expire gives way to
the price recorded before it.
"""

import logging
from datetime import timedelta
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from ..models import Product, ProductPrice, Store
from .exceptions import ForeignWorkspaceReferenceError

logger = logging.getLogger(__name__)

# Default lifetime of a discount price
DISCOUNT_DURATION = timedelta(days=15)

# A discount ending within this window no longer counts as current
DISCOUNT_GRACE = timedelta(hours=24)


def record_price(
    *,
    workspace_id: UUID,
    product: Product,
    store: Store,
    price: Decimal,
    recorded_by: Optional[User] = None,
    previous_price: Optional[Decimal] = None,
    is_discount: Optional[bool] = None,
    discount_end_date=None,
    date=None,
) -> ProductPrice:
    """
    Append a price for a product at a store.

    Args:
        workspace_id: Workspace of the product and the store
        product: Priced product
        store: Store where the price applies
        price: Unit price
        recorded_by: User recording the price
        previous_price: Price known before this one; when ``is_discount``
            is not given, a lower price than this one is a discount
        is_discount: Explicit discount flag
        discount_end_date: End of the discount, defaults to 15 days ahead
        date: Moment of the price, defaults to now

    Raises:
        ForeignWorkspaceReferenceError: If product or store belong to another workspace
    """
    for obj, label in ((product, 'Product'), (store, 'Store')):
        if str(obj.workspace_id) != str(workspace_id):
            raise ForeignWorkspaceReferenceError(f"{label} belongs to another workspace")

    now = timezone.now()
    if is_discount is None:
        is_discount = previous_price is not None and Decimal(price) < Decimal(previous_price)
    if is_discount and discount_end_date is None:
        discount_end_date = now + DISCOUNT_DURATION

    return ProductPrice.objects.create(
        workspace_id=workspace_id,
        product=product,
        store=store,
        price=price,
        date=date or now,
        recorded_by=recorded_by,
        is_discount=is_discount,
        discount_end_date=discount_end_date if is_discount else None,
    )


def get_price_history(*, product_id: UUID, store_id: Optional[UUID] = None) -> List[ProductPrice]:
    """Prices of a product, newest first, optionally for one store."""
    queryset = ProductPrice.objects.filter(product_id=product_id).select_related('store')
    if store_id is not None:
        queryset = queryset.filter(store_id=store_id)
    return list(queryset)


def get_reference_price(*, product_id: UUID, store_id: UUID, now=None) -> Optional[Decimal]:
    """
    Price to expect for a product at a store.

    Returns the newest price, or the one before it when the newest is a
    discount that has ended or ends within the next 24 hours. ``None``
    when the product was never priced at that store.
    """
    now = now or timezone.now()
    latest = list(
        ProductPrice.objects
        .filter(product_id=product_id, store_id=store_id)
        .order_by('-date', '-created_at')[:2]
    )
    if not latest:
        return None

    current = latest[0]
    expiring = (
        current.is_discount
        and current.discount_end_date is not None
        and current.discount_end_date - now < DISCOUNT_GRACE
    )
    if expiring and len(latest) > 1:
        return latest[1].price
    return current.price


def get_latest_prices(*, product_ids: Iterable[UUID]) -> Dict[UUID, Dict[UUID, Decimal]]:
    """
    Newest price of each product at each store.

    Returns:
        ``{product_id: {store_id: price}}``; products never priced are absent.
    """
    latest: Dict[UUID, Dict[UUID, Decimal]] = {}
    prices = (
        ProductPrice.objects
        .filter(product_id__in=list(product_ids))
        .order_by('-date', '-created_at')
        .values_list('product_id', 'store_id', 'price')
    )
    for product_id, store_id, price in prices:
        latest.setdefault(product_id, {}).setdefault(store_id, price)
    return latest


@transaction.atomic
def record_ticket_prices(*, ticket, recorded_by: Optional[User] = None) -> List[ProductPrice]:
    """
    Record the unit prices of a ticket's products at the ticket's store.

    Only items linked to a product, not marked temporary, and whose price
    differs from the reference price are recorded. A product appearing
    twice on the ticket is recorded once, from its first item.
    """
    if ticket.store is None:
        return []

    recorded = []
    seen = set()
    for item in ticket.items.all():
        if item.product_id is None or item.temporary_item or item.product_id in seen:
            continue
        seen.add(item.product_id)

        previous = get_reference_price(product_id=item.product_id, store_id=ticket.store_id)
        if previous is not None and previous == item.unit_price:
            continue

        recorded.append(record_price(
            workspace_id=ticket.workspace_id,
            product=item.product,
            store=ticket.store,
            price=item.unit_price,
            recorded_by=recorded_by,
            previous_price=previous,
        ))

    if recorded:
        logger.info("Recorded %d prices from ticket %s", len(recorded), ticket.id)
    return recorded
