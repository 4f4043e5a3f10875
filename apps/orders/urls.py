"""
URL configuration for orders and analytics.
"""

from django.urls import path

from . import views

app_name = "orders"

urlpatterns = [
    path("orders/", views.OrderListCreateView.as_view(), name="order_list"),
    path("orders/<int:pk>/", views.OrderDetailView.as_view(), name="order_detail"),
    path("sales/summary/", views.sales_summary, name="sales_summary"),
    path("analytics/top-products/", views.top_products, name="top_products"),
    path("analytics/low-stock/", views.low_stock_products, name="low_stock"),
]
