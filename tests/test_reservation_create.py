from datetime import date, datetime, time, timezone
from unittest import mock

import pytest

from core.models import Table
from reservations.exceptions import (
    InvalidInput,
    LeadTimeViolation,
    MissingFields,
    SlotConflict,
)
from reservations.models import Reservation
from reservations.services import (
    cancel_reservation,
    create_reservation,
    find_available,
    get_reservation,
)
from tests.factories import ReservationFactory, RestaurantFactory, TableFactory


def _book(restaurant, table, *, now, **overrides):
    kwargs = dict(
        restaurant_id=restaurant.id,
        table_id=table.id,
        date="2025-07-01",
        time="18:00",
        party_size=2,
        guest_name="Ada Lovelace",
        guest_email="ada@example.com",
    )
    kwargs.update(overrides)
    return create_reservation(now=now, **kwargs)


@pytest.mark.django_db
def test_create_reservation_persists_confirmed_booking(storea, fixed_now):
    table = Table.objects.get(restaurant=storea, number=2)

    r = _book(storea, table, now=fixed_now, party_size=3)

    r.refresh_from_db()
    assert r.status == Reservation.STATUS_CONFIRMED
    assert r.restaurant_id == storea.id
    assert r.table_id == table.id
    assert r.date == date(2025, 7, 1)
    assert r.time == time(18, 0)
    assert r.party_size == 3
    assert r.guest_name == "Ada Lovelace"
    assert r.cancelled_at is None


@pytest.mark.django_db
def test_booked_table_disappears_from_availability(storea, fixed_now):
    """Walk through the demo flow: search, book the smallest fit, search again."""
    first = find_available(storea.id, "2025-07-01", "18:00", 4)
    assert [t.number for t in first] == [2, 3, 4]

    _book(storea, first[0], now=fixed_now, party_size=4)

    second = find_available(storea.id, "2025-07-01", "18:00", 4)
    assert [t.number for t in second] == [3, 4]


@pytest.mark.django_db
@pytest.mark.parametrize(
    "field",
    ["restaurant_id", "table_id", "date", "time", "party_size", "guest_name", "guest_email"],
)
def test_any_missing_field_is_rejected(storea, fixed_now, field):
    table = Table.objects.get(restaurant=storea, number=1)

    with pytest.raises(MissingFields) as excinfo:
        _book(storea, table, now=fixed_now, **{field: ""})

    assert excinfo.value.message == "Missing required fields"
    assert Reservation.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.parametrize(
    "overrides",
    [
        {"party_size": 0},
        {"party_size": "two"},
        {"party_size": 51},
        {"party_size": 10**20},
        {"date": "01-07-2025"},
        {"time": "25:00"},
        {"guest_name": "   "},
        {"guest_email": "not-an-email"},
    ],
)
def test_malformed_fields_are_rejected_as_missing_fields(storea, fixed_now, overrides):
    table = Table.objects.get(restaurant=storea, number=1)

    with pytest.raises(MissingFields):
        _book(storea, table, now=fixed_now, **overrides)

    assert Reservation.objects.count() == 0


@pytest.mark.django_db
def test_table_from_another_restaurant_is_rejected(storea, fixed_now):
    other = RestaurantFactory(subdomain="storeb")
    foreign = TableFactory(restaurant=other, number=1, capacity=4)

    with pytest.raises(InvalidInput) as excinfo:
        _book(storea, foreign, now=fixed_now)

    assert not isinstance(excinfo.value, MissingFields)
    assert Reservation.objects.count() == 0


@pytest.mark.django_db
def test_unknown_table_is_rejected(storea, fixed_now):
    table = Table(id=999999, restaurant=storea, number=99, capacity=2)

    with pytest.raises(InvalidInput, match="Table not found"):
        _book(storea, table, now=fixed_now)


@pytest.mark.django_db
def test_slot_just_over_24_hours_ahead_is_accepted(storea):
    table = Table.objects.get(restaurant=storea, number=1)
    now = datetime(2025, 6, 30, 17, 59, 59, tzinfo=timezone.utc)

    r = _book(storea, table, now=now)

    assert r.pk is not None


@pytest.mark.django_db
def test_slot_exactly_24_hours_ahead_is_accepted(storea):
    table = Table.objects.get(restaurant=storea, number=1)
    now = datetime(2025, 6, 30, 18, 0, tzinfo=timezone.utc)

    assert _book(storea, table, now=now).pk is not None


@pytest.mark.django_db
def test_slot_under_24_hours_ahead_is_rejected(storea):
    table = Table.objects.get(restaurant=storea, number=1)
    now = datetime(2025, 6, 30, 18, 1, tzinfo=timezone.utc)

    with pytest.raises(LeadTimeViolation) as excinfo:
        _book(storea, table, now=now)

    assert excinfo.value.message == "Reservations must be made at least 24 hours in advance"
    assert Reservation.objects.count() == 0


@pytest.mark.django_db
def test_slot_in_the_past_is_rejected(storea, fixed_now):
    table = Table.objects.get(restaurant=storea, number=1)

    with pytest.raises(LeadTimeViolation):
        _book(storea, table, now=fixed_now, date="2025-05-01")


@pytest.mark.django_db
def test_lead_time_follows_setting(storea, settings):
    settings.RESERVATION_MIN_LEAD_HOURS = 48
    table = Table.objects.get(restaurant=storea, number=1)
    now = datetime(2025, 6, 29, 20, 0, tzinfo=timezone.utc)

    with pytest.raises(LeadTimeViolation, match="48 hours"):
        _book(storea, table, now=now)


@pytest.mark.django_db
def test_zero_lead_time_setting_is_honoured(storea, settings):
    settings.RESERVATION_MIN_LEAD_HOURS = 0
    table = Table.objects.get(restaurant=storea, number=1)
    now = datetime(2025, 7, 1, 17, 59, tzinfo=timezone.utc)

    assert _book(storea, table, now=now).pk is not None
    with pytest.raises(LeadTimeViolation):
        _book(storea, table, now=now, time="17:00")


@pytest.mark.django_db
def test_double_booking_same_slot_is_rejected(storea, fixed_now):
    table = Table.objects.get(restaurant=storea, number=3)
    _book(storea, table, now=fixed_now)

    with pytest.raises(SlotConflict) as excinfo:
        _book(storea, table, now=fixed_now, guest_name="Grace Hopper", guest_email="grace@example.com")

    assert excinfo.value.message == "Table is already booked for this time"
    assert Reservation.objects.filter(table=table).count() == 1


@pytest.mark.django_db
def test_cancelled_booking_still_holds_the_slot(storea, fixed_now):
    table = Table.objects.get(restaurant=storea, number=3)
    ReservationFactory(table=table, status=Reservation.STATUS_CANCELLED)

    with pytest.raises(SlotConflict):
        _book(storea, table, now=fixed_now)


@pytest.mark.django_db
def test_same_table_other_time_is_bookable(storea, fixed_now):
    table = Table.objects.get(restaurant=storea, number=3)
    _book(storea, table, now=fixed_now)

    r = _book(storea, table, now=fixed_now, time="18:30")

    assert r.time == time(18, 30)
    assert Reservation.objects.filter(table=table).count() == 2


@pytest.mark.django_db
def test_insert_race_surfaces_as_slot_conflict(storea, fixed_now):
    """The pre-check misses a concurrent insert; the unique constraint catches it."""
    table = Table.objects.get(restaurant=storea, number=4)
    ReservationFactory(table=table)

    exists_false = mock.Mock()
    exists_false.exists.return_value = False
    with mock.patch.object(Reservation.objects, "filter", return_value=exists_false):
        with pytest.raises(SlotConflict):
            _book(storea, table, now=fixed_now)

    assert Reservation.objects.filter(table=table).count() == 1


@pytest.mark.django_db
def test_storea_booking_lifecycle(storea, fixed_now):
    """Search, book, collide, look up, cancel; the table stays unavailable."""
    found = find_available(storea.id, "2025-07-01", "18:00", 4)
    assert [(t.number, t.capacity) for t in found] == [(2, 4), (3, 4), (4, 6)]
    table = found[0]

    booked = _book(storea, table, now=fixed_now, party_size=4)
    with pytest.raises(SlotConflict):
        _book(storea, table, now=fixed_now, guest_name="Grace Hopper", guest_email="grace@example.com")

    fetched = get_reservation(booked.id)
    assert fetched.restaurant.subdomain == "storea"
    assert fetched.table.number == 2
    assert fetched.party_size == 4
    assert fetched.status == Reservation.STATUS_CONFIRMED

    cancelled = cancel_reservation(booked.id)
    assert cancelled.status == Reservation.STATUS_CANCELLED

    after = find_available(storea.id, "2025-07-01", "18:00", 4)
    assert table.id not in [t.id for t in after]
    assert [t.number for t in after] == [3, 4]
    with pytest.raises(SlotConflict):
        _book(storea, table, now=fixed_now)
