"""
Core models for the kiosk point-of-sale backend.

A Store is the tenant: every catalog entity and every order belongs to exactly
one store. Each store is owned by a single registered user who logs in with
an email address.
"""

import uuid

from django.contrib.auth.base_user import BaseUserManager
from django.contrib.auth.models import AbstractUser
from django.db import models


class Store(models.Model):
    """
    Tenant model.

    The UUID primary key doubles as the public store identifier that the
    kiosk embeds in its URLs, so it never changes once issued.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Public identifier for the store",
    )

    name = models.CharField(max_length=255, help_text="Display name of the store")

    created_at = models.DateTimeField(
        auto_now_add=True, help_text="Timestamp when the store was created"
    )

    updated_at = models.DateTimeField(
        auto_now=True, help_text="Timestamp when the store was last updated"
    )

    class Meta:
        db_table = "stores"
        ordering = ["-created_at"]
        verbose_name = "Store"
        verbose_name_plural = "Stores"

    def __str__(self):
        return self.name


class UserManager(BaseUserManager):
    """
    Manager for the email-based User model.
    """

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("An email address is required.")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """
    Store owner account.

    Logs in with email instead of a username. Platform superusers created via
    createsuperuser have no store and cannot use the store-scoped API.
    """

    username = None

    email = models.EmailField(unique=True, help_text="Login name, unique across all stores")

    store = models.OneToOneField(
        Store,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="owner",
        help_text="Store owned by this user (null for platform superusers)",
    )

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        db_table = "users"
        ordering = ["email"]
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        if self.store_id:
            return f"{self.email} ({self.store.name})"
        return self.email

    def has_store_access(self):
        """Check if user owns a store and can use the admin API."""
        return self.is_active and self.store_id is not None
