"""
Sales analytics for the admin dashboard.

All figures are computed from the requesting store's orders only.
"""

from decimal import Decimal

from django.conf import settings
from django.db.models import Count, Sum

from apps.catalog.models import Product

from .models import Order, OrderItem


class SalesReportGenerator:
    """Generate sales and stock reports for a store."""

    def __init__(self, store_id):
        """
        Initialize report generator for a specific store.

        Args:
            store_id: Id of the store to report on
        """
        self.store_id = store_id

    def get_orders(self, date_from=None, date_to=None):
        """
        The store's orders, optionally limited to a date range (inclusive).
        """
        queryset = Order.objects.filter(store_id=self.store_id)
        if date_from:
            queryset = queryset.filter(created_at__date__gte=date_from)
        if date_to:
            queryset = queryset.filter(created_at__date__lte=date_to)
        return queryset

    def get_sales_summary(self, date_from=None, date_to=None):
        """
        Total sales and order count.

        Returns:
            dict: {"total_sales": Decimal, "order_count": int}; zero when the
            store has no orders
        """
        totals = self.get_orders(date_from, date_to).aggregate(
            total_sales=Sum("total_amount"),
            order_count=Count("id"),
        )
        return {
            "total_sales": totals["total_sales"] or Decimal("0.00"),
            "order_count": totals["order_count"] or 0,
        }

    def get_top_products(self, limit=None):
        """
        Best sellers by units sold, descending.

        Returns:
            list: [{"product_id", "name", "quantity"}, ...] of at most
            ``limit`` entries (TOP_PRODUCTS_LIMIT by default)
        """
        limit = limit or settings.TOP_PRODUCTS_LIMIT
        rows = (
            OrderItem.objects.filter(order__store_id=self.store_id)
            .values("product_id", "product__name")
            .annotate(quantity=Sum("quantity"))
            .order_by("-quantity", "product_id")[:limit]
        )
        return [
            {
                "product_id": row["product_id"],
                "name": row["product__name"],
                "quantity": row["quantity"],
            }
            for row in rows
        ]

    def get_low_stock_products(self, threshold=None):
        """
        Products at or below the low-stock threshold, lowest stock first.

        Returns:
            list: [{"id", "name", "stock"}, ...]
        """
        if threshold is None:
            threshold = settings.LOW_STOCK_THRESHOLD
        return list(
            Product.objects.filter(store_id=self.store_id, stock__lte=threshold)
            .order_by("stock", "name")
            .values("id", "name", "stock")
        )
