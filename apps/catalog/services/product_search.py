"""Product search and ranking service."""

from typing import List, Optional
from uuid import UUID

from ..models import Product


def search_products(
    *,
    workspace_id: UUID,
    search: Optional[str] = None,
    only_enabled: bool = False
) -> List[Product]:
    """
    Search products of a workspace by name.

    Names starting with the search term come first; within each group
    products are ordered alphabetically (case-insensitive).

    Args:
        workspace_id: Workspace to search in
        search: Case-insensitive substring to match against the name
        only_enabled: Exclude disabled products

    Returns:
        Ranked list of Product
    """
    queryset = Product.objects.filter(workspace_id=workspace_id).select_related('category', 'brand')

    if only_enabled:
        queryset = queryset.filter(enabled=True)

    if search:
        queryset = queryset.filter(name__icontains=search)

    term = (search or '').lower()

    def rank(product):
        name = product.name.lower()
        starts = bool(term) and name.startswith(term)
        return (not starts, name)

    return sorted(queryset, key=rank)
