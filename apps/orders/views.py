"""
Views for orders and sales analytics.

POST /orders/ is public (the kiosk places orders without logging in); every
other endpoint requires a bearer token and is scoped to the user's store.
"""

from django.utils.dateparse import parse_date

from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from apps.core.permissions import HasStoreAccess

from .models import Order
from .reports import SalesReportGenerator
from .serializers import OrderCreateSerializer, OrderSerializer


def _date_param(request, name):
    value = request.query_params.get(name)
    if not value:
        return None
    try:
        parsed = parse_date(value)
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValidationError({name: ["Enter a valid date in YYYY-MM-DD format."]})
    return parsed


class OrderListCreateView(generics.ListCreateAPIView):
    """
    GET: order history for the user's store, newest first.

    Supports:
    - date_from: Filter by date (YYYY-MM-DD)
    - date_to: Filter by date (YYYY-MM-DD)

    POST: place a kiosk order (no authentication).
    """

    serializer_class = OrderSerializer

    def get_permissions(self):
        if self.request.method == "POST":
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated(), HasStoreAccess()]

    def get_serializer_class(self):
        if self.request.method == "POST":
            return OrderCreateSerializer
        return OrderSerializer

    def get_queryset(self):
        report = SalesReportGenerator(self.request.user.store_id)
        queryset = report.get_orders(
            date_from=_date_param(self.request, "date_from"),
            date_to=_date_param(self.request, "date_to"),
        )
        return queryset.prefetch_related("items__product")

    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data, context=self.get_serializer_context())
        serializer.is_valid(raise_exception=True)
        order = serializer.save()
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


class OrderDetailView(generics.RetrieveAPIView):
    """
    API endpoint for a single order with its items and products.
    """

    queryset = Order.objects.prefetch_related("items__product")
    serializer_class = OrderSerializer
    permission_classes = [permissions.IsAuthenticated, HasStoreAccess]


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated, HasStoreAccess])
def sales_summary(request):
    """
    Total sales and order count for the user's store.

    Query params date_from / date_to (YYYY-MM-DD) limit the range.
    """
    report = SalesReportGenerator(request.user.store_id)
    summary = report.get_sales_summary(
        date_from=_date_param(request, "date_from"),
        date_to=_date_param(request, "date_to"),
    )
    return Response(summary)


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated, HasStoreAccess])
def top_products(request):
    """Top selling products by quantity."""
    return Response(SalesReportGenerator(request.user.store_id).get_top_products())


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated, HasStoreAccess])
def low_stock_products(request):
    """Products at or below the low-stock threshold, lowest stock first."""
    return Response(SalesReportGenerator(request.user.store_id).get_low_stock_products())
