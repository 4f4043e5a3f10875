"""
Pytest configuration and fixtures for the kiosk point-of-sale backend.
"""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.catalog.models import Category, Option, OptionGroup, Product, ProductOptionGroup
from apps.core.models import Store, User


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    return APIClient()


@pytest.fixture
def store(db):
    return Store.objects.create(name="Burger Town")


@pytest.fixture
def user(store):
    return User.objects.create_user(
        email="owner@burgertown.test", password="S3cure-pass-123", store=store
    )


@pytest.fixture
def authenticated_client(user):
    """
    API client authenticated as the owner of ``store``.
    """
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def other_store(db):
    return Store.objects.create(name="Pizza Place")


@pytest.fixture
def other_user(other_store):
    return User.objects.create_user(
        email="owner@pizzaplace.test", password="S3cure-pass-456", store=other_store
    )


@pytest.fixture
def other_client(other_user):
    """
    API client authenticated as the owner of ``other_store``.
    """
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


@pytest.fixture
def catalog(store):
    """
    A small catalog: a burger with a Size option group and a plain soda.

    Burger price 5000, stock 3; Size has Regular (+0) and Large (+1000).
    """
    category = Category.objects.create(store=store, name="Burgers")
    drinks = Category.objects.create(store=store, name="Drinks")

    size = OptionGroup.objects.create(store=store, name="Size")
    regular = Option.objects.create(option_group=size, name="Regular", price=Decimal("0.00"))
    large = Option.objects.create(option_group=size, name="Large", price=Decimal("1000.00"))

    burger = Product.objects.create(
        store=store,
        category=category,
        name="Cheese Burger",
        price=Decimal("5000.00"),
        stock=3,
    )
    ProductOptionGroup.objects.create(product=burger, option_group=size)

    soda = Product.objects.create(
        store=store,
        category=drinks,
        name="Soda",
        price=Decimal("1500.00"),
        stock=20,
    )

    return {
        "category": category,
        "drinks": drinks,
        "size": size,
        "regular": regular,
        "large": large,
        "burger": burger,
        "soda": soda,
    }
