"""
Serializers for registration, authentication and store lookup.
"""

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password

from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from .models import Store

User = get_user_model()


class StoreTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    JWT login serializer.

    Access tokens carry the ``user_id`` and ``store_id`` claims. The response
    uses ``token`` for the access token, which is what the dashboard stores.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)

        # Add custom claims
        token["store_id"] = str(user.store_id) if user.store_id else None

        return token

    def validate(self, attrs):
        attrs[self.username_field] = attrs[self.username_field].strip().lower()
        data = super().validate(attrs)

        return {
            "token": data["access"],
            "refresh": data["refresh"],
            "user": {
                "id": self.user.id,
                "email": self.user.email,
                "store_id": str(self.user.store_id) if self.user.store_id else None,
                "store_name": self.user.store.name if self.user.store_id else None,
            },
        }


class RegisterSerializer(serializers.Serializer):
    """
    Serializer for store owner registration.

    Creates the Store and its owning User together. Duplicate emails are
    reported by the view as a conflict, not as a validation error.
    """

    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(write_only=True, validators=[validate_password])
    store_name = serializers.CharField(max_length=255)

    def validate_email(self, value):
        return value.strip().lower()

    def validate_store_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Store name cannot be blank.")
        return value

    def create(self, validated_data):
        store = Store.objects.create(name=validated_data["store_name"])
        return User.objects.create_user(
            email=validated_data["email"],
            password=validated_data["password"],
            store=store,
        )

    def to_representation(self, instance):
        return {
            "id": instance.id,
            "email": instance.email,
            "store_name": instance.store.name,
            "store_id": str(instance.store_id),
        }


class MeSerializer(serializers.ModelSerializer):
    """
    Serializer for the authenticated store owner.
    """

    store_name = serializers.CharField(source="store.name", read_only=True)
    store_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = User
        fields = ["email", "store_name", "store_id"]
        read_only_fields = fields


class StoreSerializer(serializers.ModelSerializer):
    """
    Public store details shown by the kiosk.
    """

    class Meta:
        model = Store
        fields = ["id", "name"]
        read_only_fields = fields
