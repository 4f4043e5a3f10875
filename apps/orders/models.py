"""
Order models.

Orders are written only by the order processor (apps.orders.services) and
are never changed afterwards. Each OrderItem snapshots the unit price and
the selected options as they were when the order was placed, so later
catalog edits do not rewrite history.
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.catalog.models import Product
from apps.core.models import Store


class Order(models.Model):
    """
    A kiosk order.

    total_amount equals the sum of quantity x price_per_item over its items.
    """

    store = models.ForeignKey(
        Store,
        on_delete=models.CASCADE,
        related_name="orders",
        help_text="Store the order was placed at",
    )

    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Order total including option surcharges",
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When the order was placed",
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]
        verbose_name = "Order"
        verbose_name_plural = "Orders"
        indexes = [
            models.Index(fields=["store", "-created_at"], name="order_store_created_idx"),
        ]

    def __str__(self):
        return f"Order #{self.pk} - {self.total_amount}"


class OrderItem(models.Model):
    """
    One line of an order.
    """

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="items",
        help_text="Order this line belongs to",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="order_items",
        help_text="Product that was ordered",
    )

    quantity = models.IntegerField(
        validators=[MinValueValidator(1)],
        help_text="Units ordered",
    )

    price_per_item = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Unit price at time of order, including selected options",
    )

    selected_options = models.JSONField(
        default=dict,
        blank=True,
        help_text="Options selected for this line, as submitted by the kiosk",
    )

    class Meta:
        db_table = "order_items"
        ordering = ["id"]
        verbose_name = "Order Item"
        verbose_name_plural = "Order Items"
        indexes = [
            models.Index(fields=["product"], name="orderitem_product_idx"),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.product_id} @ {self.price_per_item}"

    @property
    def line_total(self):
        return self.price_per_item * self.quantity
