"""
Tests for catalog management through the admin API.

Covers CRUD for categories, option groups and products, store ownership
checks and deletion conflicts for entities that are still in use.
"""

from decimal import Decimal

from django.urls import reverse

import pytest
from rest_framework import status

from apps.catalog.models import Category, Option, OptionGroup, Product, ProductOptionGroup
from apps.orders.services import place_order


@pytest.mark.django_db
class TestCategoryCRUD:
    """Test category CRUD operations."""

    def test_create_category(self, authenticated_client, store):
        response = authenticated_client.post(
            reverse("catalog:category_list"), {"name": "Desserts"}, format="json"
        )

        assert response.status_code == status.HTTP_201_CREATED
        category = Category.objects.get(pk=response.data["id"])
        assert category.store == store
        assert category.name == "Desserts"

    def test_list_only_own_categories(self, authenticated_client, store, other_store):
        Category.objects.create(store=store, name="Burgers")
        Category.objects.create(store=other_store, name="Pizzas")

        response = authenticated_client.get(reverse("catalog:category_list"))

        assert response.status_code == status.HTTP_200_OK
        assert [c["name"] for c in response.data] == ["Burgers"]

    def test_update_category(self, authenticated_client, store):
        category = Category.objects.create(store=store, name="Burgrs")
        url = reverse("catalog:category_detail", kwargs={"pk": category.pk})

        response = authenticated_client.put(url, {"name": "Burgers"}, format="json")

        assert response.status_code == status.HTTP_200_OK
        category.refresh_from_db()
        assert category.name == "Burgers"

    def test_update_category_of_other_store_forbidden(self, other_client, store):
        category = Category.objects.create(store=store, name="Burgers")
        url = reverse("catalog:category_detail", kwargs={"pk": category.pk})

        response = other_client.patch(url, {"name": "Stolen"}, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        category.refresh_from_db()
        assert category.name == "Burgers"

    def test_unknown_category_returns_404(self, authenticated_client):
        url = reverse("catalog:category_detail", kwargs={"pk": 999999})

        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_unused_category(self, authenticated_client, store):
        category = Category.objects.create(store=store, name="Seasonal")
        url = reverse("catalog:category_detail", kwargs={"pk": category.pk})

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Category.objects.filter(pk=category.pk).exists()

    def test_delete_category_in_use_conflicts(self, authenticated_client, catalog):
        url = reverse("catalog:category_detail", kwargs={"pk": catalog["category"].pk})

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert "in use" in response.data["detail"]
        assert Category.objects.filter(pk=catalog["category"].pk).exists()
        catalog["burger"].refresh_from_db()
        assert catalog["burger"].category_id == catalog["category"].pk

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse("catalog:category_list"))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestOptionGroupCRUD:
    """Test option group operations."""

    def test_create_option_group_with_options(self, authenticated_client, store):
        payload = {
            "name": "Size",
            "options": [
                {"name": "Regular", "price": "0.00"},
                {"name": "Large", "price": "1000.00"},
            ],
        }

        response = authenticated_client.post(
            reverse("catalog:option_group_list"), payload, format="json"
        )

        assert response.status_code == status.HTTP_201_CREATED
        group = OptionGroup.objects.get(pk=response.data["id"])
        assert group.store == store
        assert list(group.options.order_by("id").values_list("name", "price")) == [
            ("Regular", Decimal("0.00")),
            ("Large", Decimal("1000.00")),
        ]
        assert [o["name"] for o in response.data["options"]] == ["Regular", "Large"]

    def test_negative_option_price_rejected(self, authenticated_client):
        payload = {"name": "Size", "options": [{"name": "Small", "price": "-100"}]}

        response = authenticated_client.post(
            reverse("catalog:option_group_list"), payload, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not OptionGroup.objects.exists()

    def test_update_changes_name_only(self, authenticated_client, catalog):
        group = catalog["size"]
        url = reverse("catalog:option_group_detail", kwargs={"pk": group.pk})

        response = authenticated_client.put(
            url,
            {"name": "Portion", "options": [{"name": "Huge", "price": "9999.00"}]},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        group.refresh_from_db()
        assert group.name == "Portion"
        assert list(group.options.order_by("id").values_list("name", flat=True)) == [
            "Regular",
            "Large",
        ]

    def test_list_option_groups_with_options(self, authenticated_client, catalog):
        response = authenticated_client.get(reverse("catalog:option_group_list"))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert {o["name"] for o in response.data[0]["options"]} == {"Regular", "Large"}

    def test_delete_option_group_in_use_conflicts(self, authenticated_client, catalog):
        url = reverse("catalog:option_group_detail", kwargs={"pk": catalog["size"].pk})

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert OptionGroup.objects.filter(pk=catalog["size"].pk).exists()
        assert Option.objects.filter(option_group=catalog["size"]).count() == 2
        assert ProductOptionGroup.objects.filter(option_group=catalog["size"]).exists()

    def test_delete_unused_option_group_removes_options(self, authenticated_client, store):
        group = OptionGroup.objects.create(store=store, name="Sauce")
        Option.objects.create(option_group=group, name="Ketchup", price=Decimal("0.00"))
        url = reverse("catalog:option_group_detail", kwargs={"pk": group.pk})

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Option.objects.filter(option_group_id=group.pk).exists()

    def test_delete_option_group_of_other_store_forbidden(self, other_client, store):
        group = OptionGroup.objects.create(store=store, name="Sauce")
        url = reverse("catalog:option_group_detail", kwargs={"pk": group.pk})

        response = other_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert OptionGroup.objects.filter(pk=group.pk).exists()


@pytest.mark.django_db
class TestProductCRUD:
    """Test product CRUD operations."""

    @pytest.fixture
    def groups(self, store):
        sauce = OptionGroup.objects.create(store=store, name="Sauce")
        Option.objects.create(option_group=sauce, name="Ketchup", price=Decimal("0.00"))
        extra = OptionGroup.objects.create(store=store, name="Extras")
        Option.objects.create(option_group=extra, name="Bacon", price=Decimal("700.00"))
        Option.objects.create(option_group=extra, name="Egg", price=Decimal("500.00"))
        unused = OptionGroup.objects.create(store=store, name="Unused")
        return {"sauce": sauce, "extra": extra, "unused": unused}

    def test_create_product_with_option_groups(self, authenticated_client, store, catalog, groups):
        payload = {
            "name": "Double Burger",
            "description": "Two patties",
            "price": "7500.00",
            "stock": 12,
            "category": catalog["category"].pk,
            "option_group_ids": [groups["sauce"].pk, groups["extra"].pk],
        }

        response = authenticated_client.post(
            reverse("catalog:product_list"), payload, format="json"
        )

        assert response.status_code == status.HTTP_201_CREATED
        product = Product.objects.get(pk=response.data["id"])
        assert product.store == store
        assert product.price == Decimal("7500.00")

        detail = authenticated_client.get(
            reverse("catalog:product_full_detail", kwargs={"pk": product.pk})
        )

        assert detail.status_code == status.HTTP_200_OK
        returned = {group["name"]: group for group in detail.data["option_groups"]}
        assert set(returned) == {"Sauce", "Extras"}
        assert {o["name"] for o in returned["Extras"]["options"]} == {"Bacon", "Egg"}
        assert detail.data["category_name"] == "Burgers"

    def test_create_product_without_category(self, authenticated_client):
        payload = {"name": "Napkins", "price": "0.00", "stock": 100}

        response = authenticated_client.post(
            reverse("catalog:product_list"), payload, format="json"
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["category"] is None
        assert response.data["option_groups"] == []

    def test_option_group_of_other_store_rejected(
        self, authenticated_client, other_store, groups
    ):
        foreign = OptionGroup.objects.create(store=other_store, name="Crust")
        payload = {
            "name": "Burger",
            "price": "5000.00",
            "stock": 1,
            "option_group_ids": [groups["sauce"].pk, foreign.pk],
        }

        response = authenticated_client.post(
            reverse("catalog:product_list"), payload, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "option_group_ids" in response.data
        assert not Product.objects.filter(name="Burger").exists()

    def test_category_of_other_store_rejected(self, authenticated_client, other_store):
        foreign = Category.objects.create(store=other_store, name="Pizzas")
        payload = {"name": "Burger", "price": "5000.00", "stock": 1, "category": foreign.pk}

        response = authenticated_client.post(
            reverse("catalog:product_list"), payload, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "category" in response.data

    def test_negative_stock_rejected(self, authenticated_client):
        payload = {"name": "Burger", "price": "5000.00", "stock": -1}

        response = authenticated_client.post(
            reverse("catalog:product_list"), payload, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "stock" in response.data

    def test_update_replaces_option_groups(self, authenticated_client, catalog, groups):
        burger = catalog["burger"]
        url = reverse("catalog:product_detail", kwargs={"pk": burger.pk})

        response = authenticated_client.patch(
            url,
            {"price": "5500.00", "option_group_ids": [groups["extra"].pk]},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        burger.refresh_from_db()
        assert burger.price == Decimal("5500.00")
        assert list(burger.option_groups.values_list("name", flat=True)) == ["Extras"]
        assert [group["name"] for group in response.data["option_groups"]] == ["Extras"]

    def test_update_without_option_group_ids_keeps_them(self, authenticated_client, catalog):
        burger = catalog["burger"]
        url = reverse("catalog:product_detail", kwargs={"pk": burger.pk})

        response = authenticated_client.patch(url, {"stock": 10}, format="json")

        assert response.status_code == status.HTTP_200_OK
        burger.refresh_from_db()
        assert burger.stock == 10
        assert list(burger.option_groups.values_list("name", flat=True)) == ["Size"]

    def test_list_products(self, authenticated_client, other_store, catalog):
        Product.objects.create(store=other_store, name="Pizza", price=Decimal("9000.00"))

        response = authenticated_client.get(reverse("catalog:product_list"))

        assert response.status_code == status.HTTP_200_OK
        assert {p["name"] for p in response.data} == {"Cheese Burger", "Soda"}

    def test_list_products_filtered_by_category(self, authenticated_client, catalog):
        response = authenticated_client.get(
            reverse("catalog:product_list"), {"category": catalog["drinks"].pk}
        )

        assert [p["name"] for p in response.data] == ["Soda"]

    @pytest.mark.parametrize("category", ["abc", "-1", "1.5"])
    def test_invalid_category_filter_returns_400(self, authenticated_client, catalog, category):
        response = authenticated_client.get(reverse("catalog:product_list"), {"category": category})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "category" in response.data

    def test_product_of_other_store_forbidden(self, other_client, catalog):
        url = reverse("catalog:product_detail", kwargs={"pk": catalog["burger"].pk})

        assert other_client.get(url).status_code == status.HTTP_403_FORBIDDEN
        assert other_client.delete(url).status_code == status.HTTP_403_FORBIDDEN
        assert Product.objects.filter(pk=catalog["burger"].pk).exists()

    def test_detail_route_is_read_only(self, authenticated_client, catalog):
        url = reverse("catalog:product_full_detail", kwargs={"pk": catalog["burger"].pk})

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_delete_product(self, authenticated_client, catalog):
        url = reverse("catalog:product_detail", kwargs={"pk": catalog["burger"].pk})

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Product.objects.filter(pk=catalog["burger"].pk).exists()
        assert not ProductOptionGroup.objects.filter(product_id=catalog["burger"].pk).exists()

    def test_delete_product_with_orders_conflicts(self, authenticated_client, store, catalog):
        place_order(store.id, [{"product_id": catalog["soda"].id, "quantity": 1}])
        url = reverse("catalog:product_detail", kwargs={"pk": catalog["soda"].pk})

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert Product.objects.filter(pk=catalog["soda"].pk).exists()
