"""
Catalog models for kiosk stores.

Products are sold at the kiosk and may be customised through option groups
(e.g. "Size" with "Large +1000"). Every entity is store-scoped. Categories and
option groups that are still referenced cannot be deleted.
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import Store


class Category(models.Model):
    """
    Product category shown as a tab on the kiosk.
    """

    store = models.ForeignKey(
        Store,
        on_delete=models.CASCADE,
        related_name="categories",
        help_text="Store that owns this category",
    )

    name = models.CharField(max_length=100, help_text="Category name (e.g., Drinks, Burgers)")

    class Meta:
        db_table = "catalog_categories"
        ordering = ["name"]
        verbose_name = "Category"
        verbose_name_plural = "Categories"
        indexes = [
            models.Index(fields=["store", "name"], name="cat_store_name_idx"),
        ]

    def __str__(self):
        return self.name


class OptionGroup(models.Model):
    """
    A customisation axis for products (e.g. Size, Extra toppings).
    """

    store = models.ForeignKey(
        Store,
        on_delete=models.CASCADE,
        related_name="option_groups",
        help_text="Store that owns this option group",
    )

    name = models.CharField(max_length=100, help_text="Option group name (e.g., Size)")

    class Meta:
        db_table = "catalog_option_groups"
        ordering = ["name"]
        verbose_name = "Option Group"
        verbose_name_plural = "Option Groups"
        indexes = [
            models.Index(fields=["store", "name"], name="optgroup_store_name_idx"),
        ]

    def __str__(self):
        return self.name


class Option(models.Model):
    """
    One choice inside an option group, with its surcharge.
    """

    option_group = models.ForeignKey(
        OptionGroup,
        on_delete=models.CASCADE,
        related_name="options",
        help_text="Option group this choice belongs to",
    )

    name = models.CharField(max_length=100, help_text="Option name (e.g., Large)")

    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Amount added to the product price when selected",
    )

    class Meta:
        db_table = "catalog_options"
        ordering = ["id"]
        verbose_name = "Option"
        verbose_name_plural = "Options"

    def __str__(self):
        return f"{self.option_group.name}: {self.name} (+{self.price})"


class Product(models.Model):
    """
    Sellable product with stock tracking.

    Stock is never negative: enforced by the validator, a database check
    constraint and the conditional decrement used when orders are placed.
    """

    store = models.ForeignKey(
        Store,
        on_delete=models.CASCADE,
        related_name="products",
        help_text="Store that owns this product",
    )

    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="products",
        help_text="Optional product category",
    )

    name = models.CharField(max_length=255, help_text="Product name")

    description = models.TextField(blank=True, default="", help_text="Product description")

    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Base unit price before options",
    )

    stock = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Units currently available",
    )

    image_url = models.CharField(
        max_length=500,
        blank=True,
        default="",
        help_text="URL of the product image (see the upload endpoint)",
    )

    option_groups = models.ManyToManyField(
        OptionGroup,
        through="ProductOptionGroup",
        related_name="products",
        blank=True,
        help_text="Option groups offered with this product",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "catalog_products"
        ordering = ["-created_at", "-id"]
        verbose_name = "Product"
        verbose_name_plural = "Products"
        indexes = [
            models.Index(fields=["store", "category"], name="product_store_category_idx"),
            models.Index(fields=["store", "stock"], name="product_store_stock_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(stock__gte=0), name="product_stock_non_negative"
            ),
        ]

    def __str__(self):
        return self.name


class ProductOptionGroup(models.Model):
    """
    Association between a product and an option group it offers.

    Option groups are protected: a group attached to any product cannot be
    deleted until it is detached.
    """

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="product_option_groups",
    )

    option_group = models.ForeignKey(
        OptionGroup,
        on_delete=models.PROTECT,
        related_name="product_option_groups",
    )

    class Meta:
        db_table = "catalog_product_option_groups"
        verbose_name = "Product Option Group"
        verbose_name_plural = "Product Option Groups"
        unique_together = [["product", "option_group"]]

    def __str__(self):
        return f"{self.product.name} - {self.option_group.name}"
