"""
Service layer unit tests for catalog app.

Tests cover:
- Product name normalization
- Duplicate detection on create
- Ranked product search
"""

import pytest
from unittest.mock import patch

from apps.catalog.models import Product
from apps.catalog.services import (
    normalize_product_name,
    find_similar_products,
    create_product,
    search_products,
)
from apps.catalog.services.exceptions import (
    DuplicateProductError,
    ForeignWorkspaceReferenceError,
)


class TestNormalizeProductName:
    """Tests for normalize_product_name (no database)."""

    @pytest.mark.parametrize('raw, expected', [
        ('Milk', 'milk'),
        ('  Milk  ', 'milk'),
        ('Milk.', 'milk'),
        ('Milk.,;:', 'milk'),
        ('Dr. Pepper', 'dr. pepper'),
        ('', ''),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_product_name(raw) == expected


@pytest.mark.django_db
class TestCreateProduct:
    """Tests for create_product."""

    def test_create_product(self, workspace, user, dairy):
        product = create_product(
            workspace_id=workspace.id,
            name='  Yogurt ',
            created_by=user,
            category=dairy,
        )

        assert product.name == 'Yogurt'
        assert product.created_by == user
        assert product.category == dairy
        assert product.enabled is True

    def test_duplicate_after_normalization(self, workspace, products):
        with pytest.raises(DuplicateProductError):
            create_product(workspace_id=workspace.id, name='MILK.')

        assert Product.objects.filter(workspace=workspace, name__iexact='milk').count() == 1

    def test_same_name_in_other_workspace_allowed(self, other_workspace, products):
        product = create_product(workspace_id=other_workspace.id, name='Milk')
        assert product.workspace == other_workspace

    def test_similar_name_logs_warning(self, workspace, products):
        with patch('apps.catalog.services.product_management.logger') as mock_logger:
            product = create_product(workspace_id=workspace.id, name='Oat')

        assert product.pk is not None
        mock_logger.warning.assert_called_once()

    def test_foreign_category_rejected(self, other_workspace, dairy):
        with pytest.raises(ForeignWorkspaceReferenceError):
            create_product(workspace_id=other_workspace.id, name='Cheese', category=dairy)

    def test_find_similar_products(self, workspace, products):
        names = {p.name for p in find_similar_products(workspace_id=workspace.id, name='milk')}
        assert names == {'Oat milk', 'Milk', 'Milky Way'}


@pytest.mark.django_db
class TestSearchProducts:
    """Tests for search_products ranking."""

    def test_prefix_matches_first(self, workspace, products):
        result = search_products(workspace_id=workspace.id, search='milk')
        assert [p.name for p in result] == ['Milk', 'Milky Way', 'Oat milk']

    def test_only_enabled(self, workspace, products):
        result = search_products(workspace_id=workspace.id, search='milk', only_enabled=True)
        assert [p.name for p in result] == ['Milk', 'Oat milk']

    def test_no_search_is_alphabetical(self, workspace, products):
        result = search_products(workspace_id=workspace.id)
        assert [p.name for p in result] == ['Bread', 'Milk', 'Milky Way', 'Oat milk']

    def test_scoped_to_workspace(self, other_workspace, products):
        assert search_products(workspace_id=other_workspace.id, search='milk') == []
