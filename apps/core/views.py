"""
Authentication and store views for the kiosk point-of-sale backend.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework_simplejwt.views import TokenObtainPairView

from .exceptions import Conflict
from .models import Store
from .permissions import HasStoreAccess
from .serializers import (
    MeSerializer,
    RegisterSerializer,
    StoreSerializer,
    StoreTokenObtainPairSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()

DUPLICATE_EMAIL_MESSAGE = "A user with this email already exists."


class RegisterView(generics.CreateAPIView):
    """
    API endpoint for store owner registration.

    Creates a Store and its owner in one transaction and returns
    ``{id, email, store_name, store_id}``.
    """

    permission_classes = [permissions.AllowAny]
    serializer_class = RegisterSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data["email"]
        if User.objects.filter(email__iexact=email).exists():
            raise Conflict(DUPLICATE_EMAIL_MESSAGE)

        try:
            with transaction.atomic():
                user = serializer.save()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            raise Conflict(DUPLICATE_EMAIL_MESSAGE)

        logger.info("Registered store %s for %s", user.store_id, user.email)
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class LoginView(TokenObtainPairView):
    """
    JWT login returning ``{token, refresh, user}``.
    """

    serializer_class = StoreTokenObtainPairSerializer


class MeView(generics.RetrieveAPIView):
    """
    API endpoint returning the authenticated owner and their store.
    """

    serializer_class = MeSerializer
    permission_classes = [permissions.IsAuthenticated, HasStoreAccess]

    def get_object(self):
        return self.request.user


class StoreDetailView(generics.RetrieveAPIView):
    """
    Public store lookup used by the kiosk to show the store name.
    """

    queryset = Store.objects.all()
    serializer_class = StoreSerializer
    permission_classes = [permissions.AllowAny]
    lookup_url_kwarg = "store_id"
