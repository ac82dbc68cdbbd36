# reservations/urls.py
from __future__ import annotations

from django.urls import re_path

from .views import AvailabilityView, ReservationCreateView, ReservationDetailView

app_name = "reservations"

# Trailing slash optional so both the booking front-end and curl users hit the same views
urlpatterns = [
    re_path(r"^availability/?$", AvailabilityView.as_view(), name="availability"),
    re_path(r"^reservations/?$", ReservationCreateView.as_view(), name="reservation-create"),
    re_path(r"^reservations/(?P<pk>\d+)/?$", ReservationDetailView.as_view(), name="reservation-detail"),
]
