from rest_framework import serializers
from .models import StoreCategory, Store, ProductCategory, Brand, Product, ProductPrice
from .services import get_latest_prices


class WorkspaceScopedSerializer(serializers.ModelSerializer):
    """Rejects related objects that belong to a different workspace."""

    def _check_workspace(self, obj, field):
        workspace_id = self.context.get('workspace_id')
        if obj is not None and workspace_id and str(obj.workspace_id) != str(workspace_id):
            raise serializers.ValidationError(
                f'{field} must belong to the same workspace'
            )
        return obj


class StoreCategorySerializer(serializers.ModelSerializer):
    """Serializer for store categories."""

    class Meta:
        model = StoreCategory
        fields = ['id', 'name', 'metadata']
        read_only_fields = ['id']


class StoreCategoryMinimalSerializer(serializers.ModelSerializer):
    """Minimal category info for nested serialization."""

    class Meta:
        model = StoreCategory
        fields = ['id', 'name']
        read_only_fields = fields


class StoreSerializer(WorkspaceScopedSerializer):
    """Serializer for stores, with the category expanded on output."""

    category_detail = StoreCategoryMinimalSerializer(source='category', read_only=True)

    class Meta:
        model = Store
        fields = [
            'id',
            'name',
            'location',
            'category',
            'category_detail',
            'is_main',
            'is_hidden',
            'metadata',
        ]
        read_only_fields = ['id']

    def validate_category(self, value):
        return self._check_workspace(value, 'Category')


class StoreMinimalSerializer(serializers.ModelSerializer):
    """Minimal store info for nested serialization."""

    category = StoreCategoryMinimalSerializer(read_only=True)

    class Meta:
        model = Store
        fields = ['id', 'name', 'category']
        read_only_fields = fields


class ProductCategorySerializer(serializers.ModelSerializer):
    """Serializer for product categories."""

    class Meta:
        model = ProductCategory
        fields = ['id', 'name', 'metadata']
        read_only_fields = ['id']


class BrandSerializer(serializers.ModelSerializer):
    """Serializer for brands."""

    class Meta:
        model = Brand
        fields = ['id', 'name', 'description', 'website', 'logo_url', 'metadata']
        read_only_fields = ['id']


class BrandMinimalSerializer(serializers.ModelSerializer):
    """Minimal brand info for nested serialization."""

    class Meta:
        model = Brand
        fields = ['id', 'name']
        read_only_fields = fields


class ProductSerializer(WorkspaceScopedSerializer):
    """
    Serializer for products.

    ``prices_by_store`` maps store ids to the newest price recorded there;
    ``latest_price`` is the entry for the ``store_id`` in the context.
    List views pass precomputed prices as ``latest_prices`` in the context.
    """

    category_detail = ProductCategorySerializer(source='category', read_only=True)
    brand_detail = BrandMinimalSerializer(source='brand', read_only=True)
    latest_price = serializers.SerializerMethodField()
    prices_by_store = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'description',
            'barcode',
            'category',
            'category_detail',
            'brand',
            'brand_detail',
            'enabled',
            'latest_price',
            'prices_by_store',
            'created_by',
            'created_at',
            'metadata',
        ]
        read_only_fields = ['id', 'created_by', 'created_at']

    def validate_category(self, value):
        return self._check_workspace(value, 'Category')

    def validate_brand(self, value):
        return self._check_workspace(value, 'Brand')

    def _store_prices(self, obj):
        latest = self.context.get('latest_prices')
        if latest is None:
            latest = get_latest_prices(product_ids=[obj.id])
        return latest.get(obj.id, {})

    def get_latest_price(self, obj):
        store_id = self.context.get('store_id')
        if store_id is None:
            return None
        price = self._store_prices(obj).get(store_id)
        return str(price) if price is not None else None

    def get_prices_by_store(self, obj):
        return {str(store_id): str(price) for store_id, price in self._store_prices(obj).items()}


class ProductCreateSerializer(ProductSerializer):
    """Product input with an optional initial price at a store."""

    store = serializers.PrimaryKeyRelatedField(
        queryset=Store.objects.all(),
        required=False,
        allow_null=True,
        write_only=True
    )
    price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True,
        write_only=True
    )

    class Meta(ProductSerializer.Meta):
        fields = ProductSerializer.Meta.fields + ['store', 'price']

    def validate_store(self, value):
        return self._check_workspace(value, 'Store')


class ProductMinimalSerializer(serializers.ModelSerializer):
    """Minimal product info for nested serialization."""

    class Meta:
        model = Product
        fields = ['id', 'name', 'description']
        read_only_fields = fields


class ProductSearchSerializer(serializers.Serializer):
    """
    Validate query parameters for product listing.

    Query Parameters:
        search (str): Case-insensitive substring of the product name
        enabled (bool): Only enabled products
        store (uuid): Store whose newest price fills ``latest_price``
    """

    search = serializers.CharField(required=False, allow_blank=True, max_length=200)
    enabled = serializers.BooleanField(required=False, default=False)
    store = serializers.UUIDField(required=False)


class ProductPriceSerializer(serializers.ModelSerializer):
    """Serializer for price history entries."""

    store_detail = StoreMinimalSerializer(source='store', read_only=True)

    class Meta:
        model = ProductPrice
        fields = [
            'id',
            'store',
            'store_detail',
            'price',
            'date',
            'is_discount',
            'discount_end_date',
            'recorded_by',
            'created_at',
        ]
        read_only_fields = fields


class PriceHistoryQuerySerializer(serializers.Serializer):
    """Optional store filter for a product's price history."""

    store = serializers.UUIDField(required=False)


class RecordPriceSerializer(WorkspaceScopedSerializer):
    """
    Validate a manually recorded price.

    ``is_discount`` defaults to whether the price is below the current
    price at that store.
    """

    store = serializers.PrimaryKeyRelatedField(queryset=Store.objects.all())
    is_discount = serializers.BooleanField(required=False, allow_null=True, default=None)

    class Meta:
        model = ProductPrice
        fields = ['store', 'price', 'date', 'is_discount', 'discount_end_date']
        extra_kwargs = {
            'date': {'required': False},
        }

    def validate_store(self, value):
        return self._check_workspace(value, 'Store')
