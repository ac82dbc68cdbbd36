import os
from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

os.environ.setdefault("ENVIRONMENT", "test")

from tests.factories import RestaurantFactory, TableFactory  # noqa: E402


@pytest.fixture
def api_client() -> APIClient:
    """Anonymous DRF APIClient; every booking endpoint is public."""
    return APIClient(enforce_csrf_checks=False)


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed 'now' one month before the demo slot (2025-07-01 18:00 UTC)."""
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def storea(db):
    """The demo restaurant with tables of capacity 2, 4, 4 and 6."""
    restaurant = RestaurantFactory(subdomain="storea", name="Store A Restaurant", email="hello@storea.com")
    for number, capacity in [(1, 2), (2, 4), (3, 4), (4, 6)]:
        TableFactory(restaurant=restaurant, number=number, capacity=capacity)
    return restaurant
