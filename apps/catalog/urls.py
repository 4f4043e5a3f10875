"""
URL configuration for catalog management.

Store ids are UUIDs and entity ids are integers, so the path converters keep
the kiosk routes and the admin detail routes apart.
"""

from django.urls import path

from . import views

app_name = "catalog"

urlpatterns = [
    # Products
    path("products/", views.ProductListCreateView.as_view(), name="product_list"),
    path("products/<int:pk>/", views.ProductDetailView.as_view(), name="product_detail"),
    path(
        "products/detail/<int:pk>/",
        views.ProductDetailView.as_view(http_method_names=["get", "head", "options"]),
        name="product_full_detail",
    ),
    path(
        "products/<uuid:store_id>/",
        views.KioskProductListView.as_view(),
        name="kiosk_product_list",
    ),
    # Categories
    path("categories/", views.CategoryListCreateView.as_view(), name="category_list"),
    path("categories/<int:pk>/", views.CategoryDetailView.as_view(), name="category_detail"),
    path(
        "categories/<uuid:store_id>/",
        views.KioskCategoryListView.as_view(),
        name="kiosk_category_list",
    ),
    # Option groups
    path("option-groups/", views.OptionGroupListCreateView.as_view(), name="option_group_list"),
    path(
        "option-groups/<int:pk>/",
        views.OptionGroupDetailView.as_view(),
        name="option_group_detail",
    ),
    # Upload
    path("upload/", views.upload_image, name="upload_image"),
]
