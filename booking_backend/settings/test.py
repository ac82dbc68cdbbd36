# booking_backend/settings/test.py
from .base import *

# -----------------------------------------------------------------------------
# Test Settings
# -----------------------------------------------------------------------------
ENVIRONMENT = "test"
DEBUG = False
ALLOWED_HOSTS = ["*"]

SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
SECURE_HSTS_SECONDS = 0

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

STORAGES["staticfiles"] = {
    "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
}

# No throttling so suites can hammer the same endpoint
REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []

LOGGING["handlers"]["console"]["level"] = "WARNING"

# Suites build their own restaurants
AUTO_SEED_RESTAURANT = False
