from __future__ import annotations

from django.urls import include, path, re_path
from rest_framework.routers import SimpleRouter

from .views import RestaurantDetailView, TableViewSet

app_name = "core"

router = SimpleRouter(trailing_slash=False)
router.register(r"tables", TableViewSet, basename="tables")

urlpatterns = [
    re_path(r"^restaurants/(?P<subdomain>[A-Za-z0-9\-]+)/?$", RestaurantDetailView.as_view(), name="restaurant-detail"),
    path("", include(router.urls)),
]
