import pytest

from core.models import Table
from reservations.exceptions import NotFound
from reservations.models import Reservation
from reservations.services import cancel_reservation, create_reservation, get_reservation
from tests.factories import ReservationFactory


@pytest.mark.django_db
def test_get_reservation_returns_what_was_booked(storea, fixed_now):
    table = Table.objects.get(restaurant=storea, number=4)
    created = create_reservation(
        storea.id, table.id, "2025-07-01", "18:00", 5, "Ada Lovelace", "ada@example.com", now=fixed_now,
    )

    found = get_reservation(created.id)

    assert found.pk == created.pk
    assert found.restaurant.subdomain == "storea"
    assert found.table.number == 4
    assert found.party_size == 5
    assert found.guest_email == "ada@example.com"
    assert found.status == Reservation.STATUS_CONFIRMED


@pytest.mark.django_db
def test_get_reservation_accepts_string_ids():
    r = ReservationFactory()
    assert get_reservation(str(r.id)).pk == r.pk


@pytest.mark.django_db
@pytest.mark.parametrize("bad_id", [999999, "abc", 0, -1, None])
def test_get_unknown_reservation_raises_not_found(bad_id):
    with pytest.raises(NotFound) as excinfo:
        get_reservation(bad_id)
    assert excinfo.value.message == "Reservation not found"


@pytest.mark.django_db
def test_cancel_marks_reservation_cancelled():
    r = ReservationFactory()

    cancelled = cancel_reservation(r.id)

    r.refresh_from_db()
    assert cancelled.status == Reservation.STATUS_CANCELLED
    assert r.status == Reservation.STATUS_CANCELLED
    assert r.cancelled_at is not None


@pytest.mark.django_db
def test_cancel_twice_is_a_no_op():
    r = ReservationFactory()
    first = cancel_reservation(r.id)

    second = cancel_reservation(r.id)

    assert second.status == Reservation.STATUS_CANCELLED
    assert second.cancelled_at == first.cancelled_at


@pytest.mark.django_db
def test_cancel_unknown_reservation_raises_not_found():
    with pytest.raises(NotFound):
        cancel_reservation(424242)


@pytest.mark.django_db
def test_cancelled_reservation_is_still_retrievable():
    r = ReservationFactory()
    cancel_reservation(r.id)

    assert get_reservation(r.id).is_cancelled
