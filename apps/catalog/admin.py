from django.contrib import admin
from .models import StoreCategory, Store, ProductCategory, Brand, Product, ProductPrice


@admin.register(StoreCategory)
class StoreCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'workspace']
    list_filter = ['workspace']
    search_fields = ['name']


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'location', 'workspace', 'is_main', 'is_hidden']
    list_filter = ['workspace', 'category', 'is_hidden']
    search_fields = ['name', 'location']


@admin.register(ProductCategory)
class ProductCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'workspace']
    list_filter = ['workspace']
    search_fields = ['name']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'brand', 'barcode', 'workspace', 'enabled', 'created_at']
    list_filter = ['workspace', 'enabled', 'category']
    search_fields = ['name', 'barcode', 'description']
    readonly_fields = ['created_at']


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    list_display = ['name', 'website', 'workspace']
    list_filter = ['workspace']
    search_fields = ['name']


@admin.register(ProductPrice)
class ProductPriceAdmin(admin.ModelAdmin):
    list_display = ['product', 'store', 'price', 'date', 'is_discount', 'recorded_by']
    list_filter = ['workspace', 'is_discount', 'store']
    search_fields = ['product__name', 'store__name']
    readonly_fields = ['created_at']
