from __future__ import annotations

from django.contrib import admin, messages
from django.db import transaction
from django.utils import timezone

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = (
        "id", "date", "time", "restaurant", "table", "party_size",
        "guest_name", "guest_email", "status", "created_at",
    )
    list_filter = ("status", "date", "restaurant")
    search_fields = ("=id", "guest_name", "guest_email", "restaurant__subdomain")
    list_select_related = ("restaurant", "table")
    readonly_fields = ("created_at", "cancelled_at")
    date_hierarchy = "date"

    actions = ("action_cancel",)

    @transaction.atomic
    def action_cancel(self, request, queryset):
        # Same effect as the public DELETE endpoint; slots stay blocked
        updated = queryset.exclude(status=Reservation.STATUS_CANCELLED).update(
            status=Reservation.STATUS_CANCELLED,
            cancelled_at=timezone.now(),
        )
        self.message_user(request, f"Cancelled {updated} reservation(s)", level=messages.INFO)
    action_cancel.short_description = "Cancel selected reservations"
