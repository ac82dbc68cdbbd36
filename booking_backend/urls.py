# booking_backend/urls.py
from __future__ import annotations

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    # Django default admin interface
    path("admin/", admin.site.urls),

    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    # ---- JSON APIs ----
    path("api/", include(("reservations.urls", "reservations"), namespace="reservations")),
    path("api/", include(("core.urls", "core"), namespace="core")),
]
