from __future__ import annotations

from django.db import transaction

DEMO_TABLES = [
    (1, 2, "https://images.unsplash.com/photo-1517248135467-4c7edcad34c4?w=400&h=300&fit=crop"),
    (2, 4, "https://images.unsplash.com/photo-1551218808-94e220e084d2?w=400&h=300&fit=crop"),
    (3, 4, "https://images.unsplash.com/photo-1559339352-11d035aa65de?w=400&h=300&fit=crop"),
    (4, 6, "https://images.unsplash.com/photo-1414235077428-338989a2e8c0?w=400&h=300&fit=crop"),
    (5, 6, "https://images.unsplash.com/photo-1578474846511-04ba529f0b88?w=400&h=300&fit=crop"),
]


def seed_demo_restaurant(subdomain: str = "storea") -> dict:
    """
    Idempotently seed a demo restaurant and its five tables.
    Returns a summary dict with counts created.
    """
    from core.models import Restaurant, Table

    subdomain = subdomain.strip().lower()
    created = {"restaurants": 0, "tables": 0}

    with transaction.atomic():
        restaurant, r_created = Restaurant.objects.get_or_create(
            subdomain=subdomain,
            defaults={
                "name": f"Store {subdomain[-1].upper()} Restaurant" if subdomain.startswith("store") else subdomain.title(),
                "email": f"hello@{subdomain}.com",
                "max_capacity": 30,
            },
        )
        if r_created:
            created["restaurants"] += 1

        for number, capacity, photo_url in DEMO_TABLES:
            _, t_created = Table.objects.get_or_create(
                restaurant=restaurant,
                number=number,
                defaults={"capacity": capacity, "photo_url": photo_url},
            )
            if t_created:
                created["tables"] += 1

    return created
