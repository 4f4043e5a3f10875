"""
Serializers for the orders app.

Request serializers validate the shape of a kiosk order at the API boundary;
pricing and stock checks happen in apps.orders.services.place_order.
"""

from rest_framework import serializers

from .models import Order, OrderItem
from .services import place_order


class OrderItemRequestSerializer(serializers.Serializer):
    """One line of a kiosk order request."""

    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1)
    selected_options = serializers.DictField(
        child=serializers.DictField(),
        required=False,
        default=dict,
    )

    def validate_selected_options(self, value):
        """Each selection must name the chosen option by its integer id."""
        option_id_field = serializers.IntegerField(min_value=1)
        for key, selection in value.items():
            if "option_id" not in selection:
                raise serializers.ValidationError(f"Selection for '{key}' has no option_id.")
            try:
                option_id_field.run_validation(selection["option_id"])
            except serializers.ValidationError:
                raise serializers.ValidationError(
                    f"Selection for '{key}' has an invalid option_id."
                )
        return value


class OrderCreateSerializer(serializers.Serializer):
    """
    Serializer for placing an order from the kiosk.

    Request: {"store_id": <uuid>, "items": [{"product_id", "quantity",
    "selected_options"}, ...]}
    """

    store_id = serializers.UUIDField()
    items = OrderItemRequestSerializer(many=True)

    def validate_items(self, value):
        """Validate that at least one item is provided."""
        if not value:
            raise serializers.ValidationError("At least one item is required.")
        return value

    def create(self, validated_data):
        return place_order(validated_data["store_id"], validated_data["items"])


class OrderItemSerializer(serializers.ModelSerializer):
    """Serializer for order lines with the product they reference."""

    product_name = serializers.CharField(source="product.name", read_only=True)
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "product",
            "product_name",
            "quantity",
            "price_per_item",
            "line_total",
            "selected_options",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Serializer for orders including their items."""

    store_id = serializers.UUIDField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = ["id", "store_id", "total_amount", "created_at", "items"]
        read_only_fields = fields
