from django.contrib import admin
from .models import Ticket, TicketItem


class TicketItemInline(admin.TabularInline):
    model = TicketItem
    extra = 0
    readonly_fields = ['total_price']


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ['date', 'store', 'total_amount', 'payment_method', 'installments', 'workspace', 'user']
    list_filter = ['payment_method', 'date']
    search_fields = ['store__name', 'workspace__name', 'user__email']
    date_hierarchy = 'date'
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [TicketItemInline]
