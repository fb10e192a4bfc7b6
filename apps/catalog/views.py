from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.workspaces.mixins import WorkspaceScopedMixin
from .models import StoreCategory, Store, ProductCategory, Brand, Product
from .serializers import (
    StoreCategorySerializer,
    StoreSerializer,
    ProductCategorySerializer,
    BrandSerializer,
    ProductSerializer,
    ProductCreateSerializer,
    ProductSearchSerializer,
    ProductPriceSerializer,
    PriceHistoryQuerySerializer,
    RecordPriceSerializer,
)
from .services import (
    create_product,
    update_product,
    search_products,
    record_price,
    get_price_history,
    get_reference_price,
    get_latest_prices,
    DuplicateProductError,
    ForeignWorkspaceReferenceError,
)


class StoreCategoryViewSet(WorkspaceScopedMixin, viewsets.ModelViewSet):
    """
    CRUD for the store categories of a workspace.

    Deleting a category leaves its stores uncategorized.
    """

    queryset = StoreCategory.objects.all()
    serializer_class = StoreCategorySerializer


class StoreViewSet(WorkspaceScopedMixin, viewsets.ModelViewSet):
    """
    CRUD for the stores of a workspace.

    Deleting a store keeps its tickets (their store becomes empty).
    """

    queryset = Store.objects.select_related('category')
    serializer_class = StoreSerializer


class ProductCategoryViewSet(WorkspaceScopedMixin, viewsets.ModelViewSet):
    """CRUD for the product categories of a workspace."""

    queryset = ProductCategory.objects.all()
    serializer_class = ProductCategorySerializer


class BrandViewSet(WorkspaceScopedMixin, viewsets.ModelViewSet):
    """
    CRUD for the brands of a workspace.

    Deleting a brand leaves its products without one.
    """

    queryset = Brand.objects.all()
    serializer_class = BrandSerializer


class ProductViewSet(WorkspaceScopedMixin, viewsets.ModelViewSet):
    """
    ViewSet for products.

    list: Ranked search (``?search=``, ``?enabled=true``), with the newest
        price per store (``?store=`` fills ``latest_price``)
    create: Create a product, rejecting duplicate names (400); an initial
        ``store`` and ``price`` are recorded in the price history
    update/partial_update: Edit a product, rejecting duplicate names (400)
    prices: Price history (GET) or record a new price (POST)
    """

    queryset = Product.objects.select_related('category', 'brand')
    serializer_class = ProductSerializer

    def get_serializer_class(self):
        if self.action == 'create':
            return ProductCreateSerializer
        return ProductSerializer

    @extend_schema(parameters=[ProductSearchSerializer])
    def list(self, request, *args, **kwargs):
        query_serializer = ProductSearchSerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        products = search_products(
            workspace_id=self.kwargs['workspace_id'],
            search=params.get('search'),
            only_enabled=params.get('enabled', False),
        )
        context = self.get_serializer_context()
        context['latest_prices'] = get_latest_prices(product_ids=[p.id for p in products])
        context['store_id'] = params.get('store')

        serializer = ProductSerializer(products, many=True, context=context)
        return Response(serializer.data)

    @extend_schema(request=ProductCreateSerializer, responses={201: ProductSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            product = create_product(
                workspace_id=self.get_workspace().id,
                name=data['name'],
                created_by=request.user,
                description=data.get('description'),
                barcode=data.get('barcode'),
                category=data.get('category'),
                brand=data.get('brand'),
                store=data.get('store'),
                price=data.get('price'),
            )
        except (DuplicateProductError, ForeignWorkspaceReferenceError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        context = self.get_serializer_context()
        if data.get('store') is not None:
            context['store_id'] = data['store'].id
        output_serializer = ProductSerializer(product, context=context)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        product = self.get_object()
        serializer = self.get_serializer(product, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            product = update_product(product=product, **serializer.validated_data)
        except (DuplicateProductError, ForeignWorkspaceReferenceError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(self.get_serializer(product).data)

    @extend_schema(
        methods=['GET'],
        parameters=[OpenApiParameter('store', str, description='Only prices at this store')],
        responses={200: ProductPriceSerializer(many=True)},
    )
    @extend_schema(
        methods=['POST'],
        request=RecordPriceSerializer,
        responses={201: ProductPriceSerializer},
    )
    @action(detail=True, methods=['get', 'post'])
    def prices(self, request, workspace_id=None, pk=None):
        """Price history of a product, newest first, or record a new price."""
        product = self.get_object()

        if request.method == 'GET':
            query_serializer = PriceHistoryQuerySerializer(data=request.query_params)
            query_serializer.is_valid(raise_exception=True)
            history = get_price_history(
                product_id=product.id,
                store_id=query_serializer.validated_data.get('store'),
            )
            return Response(ProductPriceSerializer(history, many=True).data)

        serializer = RecordPriceSerializer(data=request.data, context=self.get_serializer_context())
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        store = data['store']

        try:
            price = record_price(
                workspace_id=product.workspace_id,
                product=product,
                store=store,
                price=data['price'],
                recorded_by=request.user,
                previous_price=get_reference_price(product_id=product.id, store_id=store.id),
                is_discount=data.get('is_discount'),
                discount_end_date=data.get('discount_end_date'),
                date=data.get('date'),
            )
        except ForeignWorkspaceReferenceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ProductPriceSerializer(price).data, status=status.HTTP_201_CREATED)
