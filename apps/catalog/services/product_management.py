"""Product creation and updates with duplicate-name protection."""

import logging
import re
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from ..models import Brand, Product, ProductCategory, Store
from .exceptions import DuplicateProductError, ForeignWorkspaceReferenceError
from .price_history import record_price

logger = logging.getLogger(__name__)

TRAILING_PUNCTUATION = re.compile(r'[.,:;]+$')


def normalize_product_name(name: str) -> str:
    """
    Normalize a product name for comparison.

    Strips surrounding whitespace and trailing punctuation (``.,:;``)
    and lower-cases the result.

    Args:
        name: Product name to normalize

    Returns:
        Normalized name ('' for empty input)
    """
    if not name:
        return ''
    normalized = TRAILING_PUNCTUATION.sub('', name.strip())
    return normalized.lower()


def find_similar_products(*, workspace_id: UUID, name: str) -> List[Product]:
    """
    Return products of the workspace whose name contains the given name.

    Comparison is case-insensitive and uses the normalized form.
    """
    normalized = normalize_product_name(name)
    if not normalized:
        return []
    return list(
        Product.objects.filter(workspace_id=workspace_id, name__icontains=normalized)
    )


def _check_same_workspace(workspace_id: UUID, **related) -> None:
    for label, obj in related.items():
        if obj is not None and str(obj.workspace_id) != str(workspace_id):
            raise ForeignWorkspaceReferenceError(f"{label.capitalize()} belongs to another workspace")


def _check_duplicate(*, workspace_id: UUID, name: str, exclude_id: Optional[UUID] = None) -> List[Product]:
    normalized = normalize_product_name(name)
    similar = [
        p for p in find_similar_products(workspace_id=workspace_id, name=name)
        if exclude_id is None or str(p.id) != str(exclude_id)
    ]

    if any(normalize_product_name(p.name) == normalized for p in similar):
        raise DuplicateProductError(
            f'A product named "{name.strip()}" already exists. Please use a different name.'
        )
    return similar


@transaction.atomic
def create_product(
    *,
    workspace_id: UUID,
    name: str,
    created_by: Optional[User] = None,
    description: Optional[str] = None,
    barcode: Optional[str] = None,
    category: Optional[ProductCategory] = None,
    brand: Optional[Brand] = None,
    store: Optional[Store] = None,
    price: Optional[Decimal] = None,
) -> Product:
    """
    Create a product, refusing exact duplicates within the workspace.

    When both ``store`` and ``price`` are given, the price is recorded as
    the product's first price at that store.

    Args:
        workspace_id: Workspace owning the product
        name: Product name (stored as given, trimmed)
        created_by: Author of the product
        description: Optional description
        barcode: Optional barcode
        category: Optional product category of the same workspace
        brand: Optional brand of the same workspace
        store: Store of the initial price
        price: Initial price

    Returns:
        Created Product instance

    Raises:
        DuplicateProductError: If a product with the same normalized name exists
        ForeignWorkspaceReferenceError: If a related object belongs to another workspace
    """
    _check_same_workspace(workspace_id, category=category, brand=brand, store=store)
    similar = _check_duplicate(workspace_id=workspace_id, name=name)

    if similar:
        logger.warning(
            "Found %d products with names similar to %r in workspace %s",
            len(similar), name, workspace_id
        )

    product = Product.objects.create(
        workspace_id=workspace_id,
        name=name.strip(),
        description=description,
        barcode=barcode,
        category=category,
        brand=brand,
        created_by=created_by,
    )

    if store is not None and price is not None:
        record_price(
            workspace_id=workspace_id,
            product=product,
            store=store,
            price=price,
            recorded_by=created_by,
        )

    return product


@transaction.atomic
def update_product(*, product: Product, **changes) -> Product:
    """
    Apply field changes to a product.

    A new name goes through the same duplicate rule as on create,
    ignoring the product itself.

    Args:
        product: Product to update
        **changes: Model fields to set (name, description, barcode,
            category, brand, enabled, metadata)

    Returns:
        Updated Product instance

    Raises:
        DuplicateProductError: If the new name collides with another product
        ForeignWorkspaceReferenceError: If a related object belongs to another workspace
    """
    _check_same_workspace(
        product.workspace_id,
        category=changes.get('category'),
        brand=changes.get('brand'),
    )

    if 'name' in changes:
        _check_duplicate(
            workspace_id=product.workspace_id,
            name=changes['name'],
            exclude_id=product.id,
        )
        changes['name'] = changes['name'].strip()

    for field, value in changes.items():
        setattr(product, field, value)
    product.save()

    logger.info("Product %s updated (%s)", product.id, ', '.join(sorted(changes)))
    return product
