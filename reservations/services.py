"""
Reservation services: availability, booking, lookup and cancellation.

Everything here is a single request-scoped operation against the database.
There is no in-process shared state; concurrent bookings of the same slot
are settled by the ``unique_table_slot`` constraint, whose violation is
surfaced as :class:`SlotConflict`.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import List, Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from core.models import MAX_TABLE_CAPACITY, Table

from .exceptions import (
    InternalFailure,
    InvalidInput,
    LeadTimeViolation,
    MissingFields,
    NotFound,
    SlotConflict,
)
from .models import Reservation
from .timefmt import parse_date, parse_time

logger = logging.getLogger(__name__)


def _positive_int(value, error_cls=InvalidInput, maximum: Optional[int] = None) -> int:
    if isinstance(value, bool):
        raise error_cls()
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise error_cls()
    if number <= 0 or (maximum is not None and number > maximum):
        raise error_cls()
    return number


def _min_lead_time() -> timedelta:
    return timedelta(hours=int(getattr(settings, "RESERVATION_MIN_LEAD_HOURS", 24)))


# ---------------- Availability ----------------

def find_available(restaurant_id, date, time, party_size) -> List[Table]:
    """
    Tables of the restaurant that seat ``party_size`` and hold no
    reservation for the exact (date, time) slot, smallest first.

    Reservations block their slot whatever their status, so a cancelled
    booking still hides its table. An empty list means "nothing free".
    """
    if not date or not time:
        raise InvalidInput()
    restaurant_id = _positive_int(restaurant_id)
    party_size = _positive_int(party_size, maximum=MAX_TABLE_CAPACITY)
    slot_date = parse_date(date)
    slot_time = parse_time(time)

    booked_ids = (
        Reservation.objects
        .filter(restaurant_id=restaurant_id, date=slot_date, time=slot_time)
        .values_list("table_id", flat=True)
    )
    tables = list(
        Table.objects
        .filter(restaurant_id=restaurant_id, capacity__gte=party_size)
        .exclude(id__in=list(booked_ids))
        .order_by("capacity", "number")
    )
    logger.debug(
        "Availability restaurant=%s slot=%s %s party=%s -> %d table(s)",
        restaurant_id, slot_date, slot_time.strftime("%H:%M"), party_size, len(tables),
    )
    return tables


# ---------------- Creation ----------------

def validate_lead_time(slot_date, slot_time, now: Optional[datetime] = None) -> None:
    """
    Reject slots less than the configured lead time (24h by default) ahead.
    The slot is read as UTC; restaurants carry no time zone of their own.
    """
    now = now or timezone.now()
    booking_at = datetime.combine(slot_date, slot_time, tzinfo=dt_timezone.utc)
    lead = _min_lead_time()
    if booking_at < now + lead:
        hours = int(lead.total_seconds() // 3600)
        raise LeadTimeViolation(f"Reservations must be made at least {hours} hours in advance")


def create_reservation(
    restaurant_id,
    table_id,
    date,
    time,
    party_size,
    guest_name,
    guest_email,
    *,
    now: Optional[datetime] = None,
) -> Reservation:
    """
    Book ``table_id`` for the (date, time) slot.

    Checks run in order and nothing is written unless all pass:
      1. every field present and well-formed           -> MissingFields
         table exists and belongs to the restaurant    -> InvalidInput
      2. slot at least the minimum lead time ahead     -> LeadTimeViolation
      3. no reservation already holds the slot         -> SlotConflict
    A concurrent insert that wins the race between (3) and our insert trips
    the unique constraint and is reported as SlotConflict as well.
    """
    required = (restaurant_id, table_id, date, time, party_size, guest_name, guest_email)
    if any(value in (None, "") for value in required):
        raise MissingFields()

    restaurant_id = _positive_int(restaurant_id, MissingFields)
    table_id = _positive_int(table_id, MissingFields)
    party_size = _positive_int(party_size, MissingFields, maximum=MAX_TABLE_CAPACITY)
    try:
        slot_date = parse_date(date)
        slot_time = parse_time(time)
    except InvalidInput as exc:
        raise MissingFields(exc.message)

    guest_name = str(guest_name).strip()
    guest_email = str(guest_email).strip()
    if not guest_name:
        raise MissingFields()
    try:
        validate_email(guest_email)
    except ValidationError:
        raise MissingFields("Invalid guest email")

    table = Table.objects.filter(pk=table_id).only("id", "restaurant_id").first()
    if table is None:
        raise InvalidInput("Table not found")
    if table.restaurant_id != restaurant_id:
        raise InvalidInput("Table does not belong to this restaurant")

    try:
        validate_lead_time(slot_date, slot_time, now=now)
    except LeadTimeViolation:
        logger.warning("Lead time rejected: table=%s slot=%s %s", table_id, slot_date, slot_time)
        raise

    if Reservation.objects.filter(table_id=table_id, date=slot_date, time=slot_time).exists():
        logger.warning("Slot conflict: table=%s slot=%s %s", table_id, slot_date, slot_time)
        raise SlotConflict()

    try:
        with transaction.atomic():
            reservation = Reservation.objects.create(
                restaurant_id=restaurant_id,
                table_id=table_id,
                date=slot_date,
                time=slot_time,
                party_size=party_size,
                guest_name=guest_name,
                guest_email=guest_email,
                status=Reservation.STATUS_CONFIRMED,
            )
    except IntegrityError:
        logger.warning("Slot conflict on insert: table=%s slot=%s %s", table_id, slot_date, slot_time)
        raise SlotConflict()
    except DatabaseError as exc:
        logger.error("Failed to store reservation for table=%s: %s", table_id, exc, exc_info=True)
        raise InternalFailure("Failed to create reservation")

    logger.info(
        "Reservation %s created: restaurant=%s table=%s slot=%s %s party=%s",
        reservation.pk, restaurant_id, table_id, slot_date, slot_time.strftime("%H:%M"), party_size,
    )
    return reservation


# ---------------- Lookup & cancellation ----------------

def get_reservation(reservation_id) -> Reservation:
    """Reservation with its restaurant and table joined, for display."""
    try:
        pk = _positive_int(reservation_id)
    except InvalidInput:
        raise NotFound("Reservation not found")
    try:
        return Reservation.objects.select_related("restaurant", "table").get(pk=pk)
    except Reservation.DoesNotExist:
        raise NotFound("Reservation not found")


def cancel_reservation(reservation_id) -> Reservation:
    """
    Soft-cancel: flip status to cancelled. Cancelling twice is a no-op.
    The slot stays blocked; lead time is not re-checked.
    """
    reservation = get_reservation(reservation_id)
    if reservation.is_cancelled:
        logger.info("Reservation %s already cancelled", reservation.pk)
        return reservation

    reservation.status = Reservation.STATUS_CANCELLED
    reservation.cancelled_at = timezone.now()
    reservation.save(update_fields=["status", "cancelled_at"])
    logger.info("Reservation %s cancelled", reservation.pk)
    return reservation
