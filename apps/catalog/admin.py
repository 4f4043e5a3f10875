"""
Admin configuration for catalog models.
"""

from django.contrib import admin

from .models import Category, Option, OptionGroup, Product, ProductOptionGroup


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """Admin interface for Category."""

    list_display = ["name", "store"]
    list_filter = ["store"]
    search_fields = ["name", "store__name"]


class OptionInline(admin.TabularInline):
    """Inline admin for Option model."""

    model = Option
    extra = 0
    fields = ["name", "price"]


@admin.register(OptionGroup)
class OptionGroupAdmin(admin.ModelAdmin):
    """Admin interface for OptionGroup."""

    list_display = ["name", "store"]
    list_filter = ["store"]
    search_fields = ["name", "store__name"]
    inlines = [OptionInline]


class ProductOptionGroupInline(admin.TabularInline):
    """Inline admin for the product/option group association."""

    model = ProductOptionGroup
    extra = 0
    raw_id_fields = ["option_group"]


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product."""

    list_display = ["name", "store", "category", "price", "stock", "created_at"]
    list_filter = ["store", "category", "created_at"]
    search_fields = ["name", "description"]
    readonly_fields = ["created_at", "updated_at"]
    inlines = [ProductOptionGroupInline]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("store", "category", "name", "description", "image_url"),
            },
        ),
        (
            "Pricing and Stock",
            {
                "fields": ("price", "stock"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )
