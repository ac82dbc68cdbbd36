from __future__ import annotations

from core.exceptions import InternalFailure, InvalidInput, NotFound, ServiceError

__all__ = [
    "ServiceError",
    "InvalidInput",
    "MissingFields",
    "LeadTimeViolation",
    "SlotConflict",
    "NotFound",
    "InternalFailure",
]


class MissingFields(InvalidInput):
    """A reservation request is incomplete or a field has the wrong shape."""
    default_message = "Missing required fields"


class LeadTimeViolation(ServiceError):
    default_message = "Reservations must be made at least 24 hours in advance"


class SlotConflict(ServiceError):
    """The (table, date, time) slot already holds a reservation."""
    default_message = "Table is already booked for this time"
