"""
Serializers for catalog models.

Admin serializers validate that every referenced category and option group
belongs to the requesting user's store. Kiosk serializers are read-only and
nest everything the ordering screen needs.
"""

from django.db import transaction

from rest_framework import serializers

from .models import Category, Option, OptionGroup, Product, ProductOptionGroup


def _request_store_id(serializer):
    request = serializer.context.get("request")
    return request.user.store_id if request else None


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for Category model."""

    class Meta:
        model = Category
        fields = ["id", "name"]
        read_only_fields = ["id"]


class OptionSerializer(serializers.ModelSerializer):
    """Serializer for Option model."""

    class Meta:
        model = Option
        fields = ["id", "name", "price"]
        read_only_fields = ["id"]


class OptionGroupSerializer(serializers.ModelSerializer):
    """
    Serializer for OptionGroup with its options.

    Options are accepted on create only. Updates change the group name and
    leave existing options untouched.
    """

    options = OptionSerializer(many=True, required=False)

    class Meta:
        model = OptionGroup
        fields = ["id", "name", "options"]
        read_only_fields = ["id"]

    @transaction.atomic
    def create(self, validated_data):
        options_data = validated_data.pop("options", [])
        option_group = OptionGroup.objects.create(**validated_data)
        Option.objects.bulk_create(
            [Option(option_group=option_group, **option) for option in options_data]
        )
        return option_group

    def update(self, instance, validated_data):
        validated_data.pop("options", None)
        instance.name = validated_data.get("name", instance.name)
        instance.save(update_fields=["name"])
        return instance


class ProductSerializer(serializers.ModelSerializer):
    """
    Admin serializer for products.

    Writes take ``category`` (id or null) and ``option_group_ids``; reads
    return the attached option groups with their options.
    """

    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )
    category_name = serializers.CharField(source="category.name", read_only=True, default=None)
    option_group_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        required=False,
        write_only=True,
    )
    option_groups = OptionGroupSerializer(many=True, read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "stock",
            "image_url",
            "category",
            "category_name",
            "option_group_ids",
            "option_groups",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_category(self, value):
        """Validate category belongs to the requesting store."""
        if value is not None and value.store_id != _request_store_id(self):
            raise serializers.ValidationError("Category must belong to your store.")
        return value

    def validate_option_group_ids(self, value):
        """Validate every option group exists and belongs to the requesting store."""
        unique_ids = list(dict.fromkeys(value))
        found = set(
            OptionGroup.objects.filter(
                id__in=unique_ids, store_id=_request_store_id(self)
            ).values_list("id", flat=True)
        )
        missing = [group_id for group_id in unique_ids if group_id not in found]
        if missing:
            raise serializers.ValidationError(
                f"Option groups not found in your store: {', '.join(str(i) for i in missing)}."
            )
        return unique_ids

    @transaction.atomic
    def create(self, validated_data):
        option_group_ids = validated_data.pop("option_group_ids", [])
        product = Product.objects.create(**validated_data)
        self._set_option_groups(product, option_group_ids)
        return product

    @transaction.atomic
    def update(self, instance, validated_data):
        option_group_ids = validated_data.pop("option_group_ids", None)
        instance = super().update(instance, validated_data)
        if option_group_ids is not None:
            instance.product_option_groups.exclude(option_group_id__in=option_group_ids).delete()
            self._set_option_groups(instance, option_group_ids)
        return instance

    def _set_option_groups(self, product, option_group_ids):
        existing = set(product.product_option_groups.values_list("option_group_id", flat=True))
        ProductOptionGroup.objects.bulk_create(
            [
                ProductOptionGroup(product=product, option_group_id=group_id)
                for group_id in option_group_ids
                if group_id not in existing
            ]
        )


class KioskProductSerializer(serializers.ModelSerializer):
    """Read-only product representation for the ordering kiosk."""

    category = CategorySerializer(read_only=True)
    option_groups = OptionGroupSerializer(many=True, read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "stock",
            "image_url",
            "category",
            "option_groups",
        ]
        read_only_fields = fields
