# booking_backend/settings/__init__.py
"""
Django settings package for the booking backend.

This package provides environment-specific settings:
- development: Local development with debug enabled
- production: Production environment with security hardening
- test: In-memory database for the pytest suite

Point DJANGO_SETTINGS_MODULE at ``booking_backend.settings`` and the module
matching the ENVIRONMENT variable is loaded. Pointing it at a concrete
submodule (e.g. ``booking_backend.settings.test``) loads only that one.
"""

import os
import sys

VALID_ENVIRONMENTS = ["development", "production", "test"]

_requested = os.getenv("DJANGO_SETTINGS_MODULE", "")

if not _requested.startswith(__name__ + "."):
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()
    if ENVIRONMENT not in VALID_ENVIRONMENTS:
        raise ValueError(
            f"Invalid ENVIRONMENT '{ENVIRONMENT}'. "
            f"Must be one of: {', '.join(VALID_ENVIRONMENTS)}"
        )

    if ENVIRONMENT == "production":
        from .production import *
    elif ENVIRONMENT == "test":
        from .test import *
    else:
        from .development import *

    def validate_settings():
        """Validate critical settings are properly configured."""
        errors = []

        if not SECRET_KEY or (SECRET_KEY.startswith("django-insecure") and ENVIRONMENT == "production"):
            errors.append("SECRET_KEY must be set to a secure random value")

        if not DATABASES.get("default"):
            errors.append("Database configuration is missing")

        if ENVIRONMENT == "production" and not ALLOWED_HOSTS:
            errors.append("ALLOWED_HOSTS must be configured for production")

        if ENVIRONMENT == "production" and globals().get("CORS_ALLOW_ALL_ORIGINS", False):
            errors.append("CORS_ALLOW_ALL_ORIGINS should not be True in production")

        if ENVIRONMENT == "production" and DEBUG:
            errors.append("DEBUG should be False in production")

        if errors:
            error_msg = "\n".join([f"  - {error}" for error in errors])
            raise ValueError(f"Settings validation failed:\n{error_msg}")

    if "migrate" not in sys.argv and "collectstatic" not in sys.argv:
        try:
            validate_settings()
        except ValueError as e:
            print(f"Settings validation warning: {e}", file=sys.stderr)
            if ENVIRONMENT == "production":
                raise
