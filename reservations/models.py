from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.html import strip_tags


class Reservation(models.Model):
    """
    A booking of one table for one (date, time) slot.

    - At most one reservation per (table, date, time), whatever its status;
      the database constraint is the authoritative double-booking guard.
    - Cancellation is a status change. It does not release the slot.
    """
    STATUS_CONFIRMED = "confirmed"
    STATUS_CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (STATUS_CONFIRMED, "Confirmed"),
        (STATUS_CANCELLED, "Cancelled"),
    ]

    restaurant = models.ForeignKey(
        "core.Restaurant",
        on_delete=models.CASCADE,
        related_name="reservations",
    )
    table = models.ForeignKey(
        "core.Table",
        on_delete=models.PROTECT,
        related_name="reservations",
        help_text="Table for this reservation"
    )

    # Slot: calendar date + wall-clock time, interpreted as UTC
    date = models.DateField()
    time = models.TimeField()

    party_size = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Number of guests"
    )
    guest_name = models.CharField(
        max_length=120,
        help_text="Guest name (HTML tags will be stripped)"
    )
    guest_email = models.EmailField(help_text="Guest email address")

    status = models.CharField(
        max_length=12,
        choices=STATUS_CHOICES,
        default=STATUS_CONFIRMED,
        help_text="Current reservation status"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    cancelled_at = models.DateTimeField(null=True, blank=True, help_text="When reservation was cancelled")

    class Meta:
        ordering = ["-date", "-time", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["table", "date", "time"], name="unique_table_slot"),
        ]
        indexes = [
            models.Index(fields=["restaurant", "date", "time"], name="reservation_slot_idx"),
        ]

    @property
    def is_cancelled(self) -> bool:
        return self.status == self.STATUS_CANCELLED

    def save(self, *args, **kwargs):
        if self.guest_name:
            self.guest_name = strip_tags(self.guest_name).strip()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"#{self.pk} {self.guest_name} {self.date} {self.time:%H:%M} (table {self.table_id}, {self.status})"
