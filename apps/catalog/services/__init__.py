"""
Catalog app services layer.

Store and category CRUD is plain ModelViewSet work; products carry the
duplicate-name rule, the ranked search and the per-store price history.
"""

from .exceptions import (
    CatalogServiceError,
    DuplicateProductError,
    ForeignWorkspaceReferenceError,
)

from .product_management import (
    normalize_product_name,
    find_similar_products,
    create_product,
    update_product,
)

from .product_search import (
    search_products,
)

from .price_history import (
    record_price,
    get_price_history,
    get_reference_price,
    get_latest_prices,
    record_ticket_prices,
)


__all__ = [
    'CatalogServiceError',
    'DuplicateProductError',
    'ForeignWorkspaceReferenceError',
    'normalize_product_name',
    'find_similar_products',
    'create_product',
    'update_product',
    'search_products',
    'record_price',
    'get_price_history',
    'get_reference_price',
    'get_latest_prices',
    'record_ticket_prices',
]
