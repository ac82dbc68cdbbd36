from __future__ import annotations

import logging

from django.db.models import Prefetch

from .exceptions import InvalidInput, NotFound
from .models import Restaurant, Table

logger = logging.getLogger(__name__)


def get_restaurant_by_subdomain(subdomain: str) -> Restaurant:
    """
    Resolve a tenant by subdomain (case-insensitive) with its tables
    prefetched in floor-plan order.
    """
    key = (subdomain or "").strip().lower()
    if not key:
        raise InvalidInput("Subdomain is required")

    tables = Prefetch("tables", queryset=Table.objects.order_by("number"))
    try:
        return Restaurant.objects.prefetch_related(tables).get(subdomain=key)
    except Restaurant.DoesNotExist:
        logger.info("Unknown restaurant subdomain %r", key)
        raise NotFound("Restaurant not found")
