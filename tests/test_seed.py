from io import StringIO

import pytest
from django.core.management import call_command

from core.models import Restaurant, Table
from core.seed import DEMO_TABLES, seed_demo_restaurant


@pytest.mark.django_db
def test_seed_command_creates_demo_restaurant_once():
    out = StringIO()
    call_command("seed_restaurant", stdout=out)
    call_command("seed_restaurant", stdout=out)

    restaurant = Restaurant.objects.get(subdomain="storea")
    assert restaurant.name == "Store A Restaurant"
    assert list(restaurant.tables.order_by("number").values_list("number", "capacity")) == [
        (number, capacity) for number, capacity, _ in DEMO_TABLES
    ]
    assert "restaurants+1, tables+5" in out.getvalue()
    assert "restaurants+0, tables+0" in out.getvalue()


@pytest.mark.django_db
def test_seed_other_subdomain():
    created = seed_demo_restaurant(subdomain="Bistro")

    assert created == {"restaurants": 1, "tables": 5}
    assert Restaurant.objects.get(subdomain="bistro").name == "Bistro"
    assert Table.objects.filter(restaurant__subdomain="bistro").count() == len(DEMO_TABLES)
