from __future__ import annotations

from rest_framework import serializers

from core.models import MAX_TABLE_CAPACITY

from .exceptions import InvalidInput
from .models import Reservation
from .timefmt import normalize_time

MISSING_CODES = {"required", "null", "blank"}


class BoundaryInputSerializer(serializers.Serializer):
    """
    Request-side serializer. ``error_message()`` reduces DRF's error dict to
    the single short line the API returns, reporting absent fields the same
    way whichever field it was.
    """
    missing_message = "Missing required parameters"

    def error_message(self) -> str:
        errors = self.errors
        codes = {
            getattr(detail, "code", None)
            for details in errors.values()
            for detail in (details if isinstance(details, list) else [details])
        }
        if codes & MISSING_CODES:
            return self.missing_message
        parts = []
        for field, details in errors.items():
            details = details if isinstance(details, list) else [details]
            parts.append(f"{field}: {' '.join(str(d) for d in details)}")
        return "; ".join(parts)


class AvailabilityQuerySerializer(BoundaryInputSerializer):
    """GET /api/availability?date=&time=&partySize=&restaurantId="""
    restaurantId = serializers.IntegerField(min_value=1)
    date = serializers.CharField()
    time = serializers.CharField()
    partySize = serializers.IntegerField(min_value=1, max_value=MAX_TABLE_CAPACITY)


class ReservationCreateSerializer(BoundaryInputSerializer):
    """
    POST /api/reservations body. ``time`` may be ``HH:MM`` or a display
    time like ``"5:30 PM"`` from the booking form; both end up ``HH:MM``.
    """
    missing_message = "Missing required fields"

    restaurantId = serializers.IntegerField(min_value=1)
    tableId = serializers.IntegerField(min_value=1)
    date = serializers.CharField()
    time = serializers.CharField()
    partySize = serializers.IntegerField(min_value=1, max_value=MAX_TABLE_CAPACITY)
    guestName = serializers.CharField(max_length=120)
    guestEmail = serializers.EmailField()

    def validate_time(self, value: str) -> str:
        try:
            return normalize_time(value)
        except InvalidInput as exc:
            raise serializers.ValidationError(exc.message)


class ReservationSerializer(serializers.ModelSerializer):
    """Reservation as returned right after creation or cancellation."""
    restaurantId = serializers.IntegerField(source="restaurant_id", read_only=True)
    tableId = serializers.IntegerField(source="table_id", read_only=True)
    time = serializers.TimeField(format="%H:%M", read_only=True)
    partySize = serializers.IntegerField(source="party_size", read_only=True)
    guestName = serializers.CharField(source="guest_name", read_only=True)
    guestEmail = serializers.EmailField(source="guest_email", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    cancelledAt = serializers.DateTimeField(source="cancelled_at", read_only=True)

    class Meta:
        model = Reservation
        fields = [
            "id",
            "restaurantId",
            "tableId",
            "date",
            "time",
            "partySize",
            "guestName",
            "guestEmail",
            "status",
            "createdAt",
            "cancelledAt",
        ]
        read_only_fields = fields


class ReservationDetailSerializer(serializers.ModelSerializer):
    """
    Confirmation page payload. ``restaurantName`` carries the restaurant's
    subdomain and ``tableNumber`` the table label, copied here so the page
    needs no further lookups.
    """
    restaurantName = serializers.CharField(source="restaurant.subdomain", read_only=True)
    tableNumber = serializers.IntegerField(source="table.number", read_only=True)
    time = serializers.TimeField(format="%H:%M", read_only=True)
    partySize = serializers.IntegerField(source="party_size", read_only=True)
    guestName = serializers.CharField(source="guest_name", read_only=True)
    guestEmail = serializers.EmailField(source="guest_email", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Reservation
        fields = [
            "id",
            "restaurantName",
            "tableNumber",
            "date",
            "time",
            "partySize",
            "guestName",
            "guestEmail",
            "status",
            "createdAt",
        ]
        read_only_fields = fields
