import logging

from django.apps import AppConfig
from django.conf import settings
from django.db.models.signals import post_migrate

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Restaurants"

    def ready(self):
        # Optionally seed the demo restaurant after migrations in dev environments
        def _post_migrate_seed(sender, **kwargs):
            auto = getattr(settings, "AUTO_SEED_RESTAURANT", None)
            if auto is None:
                auto = getattr(settings, "DEBUG", False)
            if not auto:
                return
            from core.models import Restaurant
            if Restaurant.objects.exists():
                return
            from .seed import seed_demo_restaurant
            created = seed_demo_restaurant()
            logger.info("Seeded demo restaurant: %s", created)

        post_migrate.connect(_post_migrate_seed, sender=self)
