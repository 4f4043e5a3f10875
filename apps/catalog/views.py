"""
Views for catalog management.

Admin endpoints (bearer token) manage the requesting store's categories,
option groups and products. Objects are looked up across all stores so that
touching another store's object is refused with 403 by HasStoreAccess rather
than reported as missing.

Kiosk endpoints are public and scoped by the store id in the URL.
"""

import logging

from django.db.models import Prefetch
from django.shortcuts import get_object_or_404

from rest_framework import generics, permissions, serializers, status
from rest_framework.decorators import api_view, parser_classes, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response

from apps.core.models import Store
from apps.core.permissions import HasStoreAccess

from .image_utils import ImageProcessor
from .models import Category, Option, OptionGroup, Product
from .serializers import (
    CategorySerializer,
    KioskProductSerializer,
    OptionGroupSerializer,
    ProductSerializer,
)
from .storage import ProductImageStorage

logger = logging.getLogger(__name__)


def _option_groups_prefetch():
    return Prefetch(
        "option_groups",
        queryset=OptionGroup.objects.prefetch_related(
            Prefetch("options", queryset=Option.objects.order_by("id"))
        ),
    )


class StoreScopedMixin:
    """
    List/create scoped to the user's store; detail lookups unscoped.
    """

    permission_classes = [permissions.IsAuthenticated, HasStoreAccess]

    def get_queryset(self):
        queryset = super().get_queryset()
        if "pk" not in self.kwargs:
            return queryset.filter(store_id=self.request.user.store_id)
        return queryset

    def perform_create(self, serializer):
        serializer.save(store_id=self.request.user.store_id)


# Categories


class CategoryListCreateView(StoreScopedMixin, generics.ListCreateAPIView):
    """
    API endpoint for listing and creating categories.
    """

    queryset = Category.objects.all()
    serializer_class = CategorySerializer


class CategoryDetailView(StoreScopedMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for a single category.

    Deleting a category that products still use fails with 409.
    """

    queryset = Category.objects.all()
    serializer_class = CategorySerializer

    def perform_destroy(self, instance):
        category_id = instance.pk
        instance.delete()
        logger.info("Deleted category %s for store %s", category_id, self.request.user.store_id)


# Option groups


class OptionGroupListCreateView(StoreScopedMixin, generics.ListCreateAPIView):
    """
    API endpoint for listing option groups and creating one with its options.
    """

    queryset = OptionGroup.objects.prefetch_related("options")
    serializer_class = OptionGroupSerializer


class OptionGroupDetailView(StoreScopedMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for a single option group.

    Updates rename the group only. Deleting a group attached to a product
    fails with 409.
    """

    queryset = OptionGroup.objects.prefetch_related("options")
    serializer_class = OptionGroupSerializer


# Products


class ProductListCreateView(StoreScopedMixin, generics.ListCreateAPIView):
    """
    API endpoint for listing and creating products.

    Supports:
    - Filter by category (?category=<id>)
    - Search by name (?search=<text>)
    """

    serializer_class = ProductSerializer

    def get_queryset(self):
        queryset = Product.objects.filter(store_id=self.request.user.store_id).select_related(
            "category"
        )
        queryset = queryset.prefetch_related(_option_groups_prefetch())

        category_id = self.request.query_params.get("category")
        if category_id:
            try:
                category_id = serializers.IntegerField(min_value=1).run_validation(category_id)
            except ValidationError as e:
                raise ValidationError({"category": e.detail})
            queryset = queryset.filter(category_id=category_id)

        search = self.request.query_params.get("search")
        if search:
            queryset = queryset.filter(name__icontains=search)

        return queryset


class ProductDetailView(StoreScopedMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for a single product, including its option groups.

    Deleting a product that appears in order history fails with 409.
    """

    serializer_class = ProductSerializer

    def get_queryset(self):
        return Product.objects.select_related("category").prefetch_related(
            _option_groups_prefetch()
        )

    def perform_destroy(self, instance):
        product_id = instance.pk
        instance.delete()
        logger.info("Deleted product %s for store %s", product_id, self.request.user.store_id)


# Kiosk (public)


class KioskProductListView(generics.ListAPIView):
    """
    Public product listing for a store's kiosk, with nested category and
    option groups.
    """

    serializer_class = KioskProductSerializer
    permission_classes = [permissions.AllowAny]

    def get_queryset(self):
        store = get_object_or_404(Store, pk=self.kwargs["store_id"])
        return (
            Product.objects.filter(store=store)
            .select_related("category")
            .prefetch_related(_option_groups_prefetch())
            .order_by("category__name", "name", "id")
        )


class KioskCategoryListView(generics.ListAPIView):
    """
    Public category listing for a store's kiosk.
    """

    serializer_class = CategorySerializer
    permission_classes = [permissions.AllowAny]

    def get_queryset(self):
        store = get_object_or_404(Store, pk=self.kwargs["store_id"])
        return Category.objects.filter(store=store)


# Upload


@api_view(["POST"])
@permission_classes([permissions.AllowAny])
@parser_classes([MultiPartParser, FormParser])
def upload_image(request):
    """
    Upload a product image.

    Expects a multipart ``image`` field. The image is validated, resized and
    stored under MEDIA_ROOT; the response carries its public URL.
    """
    image_file = request.FILES.get("image")
    if image_file is None:
        raise ValidationError({"image": ["No image file was provided."]})

    try:
        image_bytes, image_format = ImageProcessor.process_product_image(image_file)
    except ValueError as e:
        raise ValidationError({"image": [str(e)]})

    upload_path = ProductImageStorage.save_image(image_bytes, image_file.name, image_format)
    image_url = ProductImageStorage.get_url(upload_path)
    logger.info("Stored uploaded image at %s", upload_path)

    return Response({"image_url": image_url}, status=status.HTTP_201_CREATED)
