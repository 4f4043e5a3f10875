"""
Tests for registration, login, token refresh and the current-user endpoint.
"""

from django.urls import reverse

import pytest
from rest_framework import status
from rest_framework_simplejwt.tokens import AccessToken

from apps.core.models import Store, User


@pytest.mark.django_db
class TestRegistration:
    """Store owner registration."""

    def test_register_creates_store_and_user(self, api_client):
        payload = {
            "email": "New.Owner@Example.com",
            "password": "Kiosk-pass-2025",
            "store_name": "Noodle Bar",
        }

        response = api_client.post(reverse("core:register"), payload, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        user = User.objects.get(pk=response.data["id"])
        assert user.email == "new.owner@example.com"
        assert user.check_password("Kiosk-pass-2025")
        assert user.store.name == "Noodle Bar"
        assert response.data == {
            "id": user.id,
            "email": "new.owner@example.com",
            "store_name": "Noodle Bar",
            "store_id": str(user.store_id),
        }
        assert "password" not in response.data

    def test_duplicate_email_conflicts(self, api_client, user):
        payload = {
            "email": user.email.upper(),
            "password": "Kiosk-pass-2025",
            "store_name": "Second Store",
        }

        response = api_client.post(reverse("core:register"), payload, format="json")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert Store.objects.filter(name="Second Store").count() == 0

    @pytest.mark.parametrize("missing", ["email", "password", "store_name"])
    def test_missing_field(self, api_client, missing):
        payload = {
            "email": "owner@example.com",
            "password": "Kiosk-pass-2025",
            "store_name": "Noodle Bar",
        }
        del payload[missing]

        response = api_client.post(reverse("core:register"), payload, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert missing in response.data

    def test_weak_password_rejected(self, api_client):
        payload = {"email": "owner@example.com", "password": "123", "store_name": "Noodle Bar"}

        response = api_client.post(reverse("core:register"), payload, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "password" in response.data
        assert not User.objects.filter(email="owner@example.com").exists()


@pytest.mark.django_db
class TestLogin:
    """JWT login and refresh."""

    def test_login_returns_token_with_store_claim(self, api_client, user, store):
        payload = {"email": user.email, "password": "S3cure-pass-123"}

        response = api_client.post(reverse("core:login"), payload, format="json")

        assert response.status_code == status.HTTP_200_OK
        token = AccessToken(response.data["token"])
        assert token["user_id"] == str(user.id) or token["user_id"] == user.id
        assert token["store_id"] == str(store.id)
        assert response.data["user"]["email"] == user.email
        assert response.data["user"]["store_id"] == str(store.id)
        assert "refresh" in response.data

    def test_login_email_is_case_insensitive(self, api_client, user):
        payload = {"email": "OWNER@BurgerTown.test", "password": "S3cure-pass-123"}

        response = api_client.post(reverse("core:login"), payload, format="json")

        assert response.status_code == status.HTTP_200_OK

    def test_wrong_password(self, api_client, user):
        payload = {"email": user.email, "password": "wrong-password"}

        response = api_client.post(reverse("core:login"), payload, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert "token" not in response.data

    def test_unknown_email(self, api_client):
        payload = {"email": "nobody@example.com", "password": "whatever-123"}

        response = api_client.post(reverse("core:login"), payload, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_bearer_token_grants_access(self, api_client, user):
        login = api_client.post(
            reverse("core:login"),
            {"email": user.email, "password": "S3cure-pass-123"},
            format="json",
        )
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['token']}")

        response = api_client.get(reverse("core:me"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["email"] == user.email

    def test_refresh_issues_new_access_token(self, api_client, user, store):
        login = api_client.post(
            reverse("core:login"),
            {"email": user.email, "password": "S3cure-pass-123"},
            format="json",
        )

        response = api_client.post(
            reverse("core:token_refresh"), {"refresh": login.data["refresh"]}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert AccessToken(response.data["access"])["store_id"] == str(store.id)

    def test_invalid_token_rejected(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-real-token")

        response = api_client.get(reverse("core:me"))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestMe:
    """Current user endpoint."""

    def test_me(self, authenticated_client, user, store):
        response = authenticated_client.get(reverse("core:me"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            "email": user.email,
            "store_name": "Burger Town",
            "store_id": str(store.id),
        }

    def test_me_requires_authentication(self, api_client):
        response = api_client.get(reverse("core:me"))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_user_without_store_is_forbidden(self, api_client, db):
        admin = User.objects.create_superuser(email="root@example.com", password="Root-pass-123")
        api_client.force_authenticate(user=admin)

        response = api_client.get(reverse("core:me"))

        assert response.status_code == status.HTTP_403_FORBIDDEN
