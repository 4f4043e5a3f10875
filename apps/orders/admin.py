"""
Django admin configuration for orders.

Orders are append-only, so the admin is read-only.
"""

from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    """Inline admin for OrderItem model."""

    model = OrderItem
    extra = 0
    fields = ["product", "quantity", "price_per_item", "selected_options"]
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Read-only admin interface for Order model."""

    list_display = ["id", "store", "total_amount", "created_at"]
    list_filter = ["store", "created_at"]
    readonly_fields = ["store", "total_amount", "created_at"]
    date_hierarchy = "created_at"
    inlines = [OrderItemInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
