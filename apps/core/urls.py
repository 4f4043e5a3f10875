"""
URL configuration for authentication, store lookup and health.
"""

from django.urls import path

from rest_framework_simplejwt.views import TokenRefreshView

from . import views
from .health import health_check

app_name = "core"

urlpatterns = [
    path("health/", health_check, name="health_check"),
    # Authentication
    path("auth/register/", views.RegisterView.as_view(), name="register"),
    path("auth/login/", views.LoginView.as_view(), name="login"),
    path("auth/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("me/", views.MeView.as_view(), name="me"),
    # Public store lookup
    path("store/<uuid:store_id>/", views.StoreDetailView.as_view(), name="store_detail"),
]
