from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'catalog'

router = SimpleRouter()
router.register(r'store-categories', views.StoreCategoryViewSet, basename='store-category')
router.register(r'stores', views.StoreViewSet, basename='store')
router.register(r'product-categories', views.ProductCategoryViewSet, basename='product-category')
router.register(r'brands', views.BrandViewSet, basename='brand')
router.register(r'products', views.ProductViewSet, basename='product')

urlpatterns = [
    # Mounted under /api/workspaces/{workspace_id}/
    # GET/POST           store-categories/        - List / create store categories
    # GET/PATCH/DELETE   store-categories/{id}/
    # GET/POST           stores/                  - List / create stores
    # GET/PATCH/DELETE   stores/{id}/
    # GET/POST           product-categories/
    # GET/PATCH/DELETE   product-categories/{id}/
    # GET/POST           brands/
    # GET/PATCH/DELETE   brands/{id}/
    # GET/POST           products/                - Ranked search with latest prices / create (duplicate check)
    # GET/PATCH/DELETE   products/{id}/           - PATCH/PUT re-check duplicate names
    # GET/POST           products/{id}/prices/    - Price history / record a price
    path('', include(router.urls)),
]
