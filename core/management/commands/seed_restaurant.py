from __future__ import annotations

from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Seed a demo restaurant (default: storea) and its tables if they don't exist."

    def add_arguments(self, parser):
        parser.add_argument("--subdomain", default="storea", help="Subdomain of the restaurant to seed (default: storea)")

    def handle(self, *args, **options):
        from core.seed import seed_demo_restaurant
        created = seed_demo_restaurant(subdomain=options["subdomain"])
        self.stdout.write(self.style.SUCCESS(
            f"Seed complete: restaurants+{created['restaurants']}, tables+{created['tables']}"
        ))
