from .core import RestaurantFactory, TableFactory
from .reservations import ReservationFactory

__all__ = [
    "RestaurantFactory",
    "TableFactory",
    "ReservationFactory",
]
