# booking_backend/settings/production.py
from .base import *
from .base import _split_csv
import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration

# -----------------------------------------------------------------------------
# Production Settings
# -----------------------------------------------------------------------------
DEBUG = False

# Strict host validation
ALLOWED_HOSTS = _split_csv("DJANGO_ALLOWED_HOSTS")
if not ALLOWED_HOSTS:
    raise ValueError("DJANGO_ALLOWED_HOSTS must be set in production")

# -----------------------------------------------------------------------------
# Security Settings (Enhanced for Production)
# -----------------------------------------------------------------------------
SECURE_SSL_REDIRECT = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# -----------------------------------------------------------------------------
# Database Configuration (Production)
# -----------------------------------------------------------------------------
if not os.getenv("DATABASE_URL") and not os.getenv("PG_NAME"):
    raise ValueError("Database configuration is required in production")

DATABASES["default"]["CONN_MAX_AGE"] = 600  # 10 minutes

# -----------------------------------------------------------------------------
# Static Files (Production)
# -----------------------------------------------------------------------------
WHITENOISE_USE_FINDERS = False
WHITENOISE_AUTOREFRESH = False

# -----------------------------------------------------------------------------
# Logging Configuration (Production)
# -----------------------------------------------------------------------------
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOGGING["handlers"]["file"] = {
    "level": "INFO",
    "class": "logging.handlers.RotatingFileHandler",
    "filename": LOG_DIR / "booking.log",
    "maxBytes": 1024 * 1024 * 15,  # 15MB
    "backupCount": 10,
    "formatter": "verbose",
    "filters": ["request_id"],
}
LOGGING["handlers"]["error_file"] = {
    "level": "ERROR",
    "class": "logging.handlers.RotatingFileHandler",
    "filename": LOG_DIR / "booking_errors.log",
    "maxBytes": 1024 * 1024 * 15,  # 15MB
    "backupCount": 10,
    "formatter": "verbose",
    "filters": ["request_id"],
}

if os.getenv("USE_JSON_LOGGING", "0") == "1":
    LOGGING["handlers"]["json_file"] = {
        "level": "INFO",
        "class": "logging.handlers.RotatingFileHandler",
        "filename": LOG_DIR / "booking.json",
        "maxBytes": 1024 * 1024 * 15,  # 15MB
        "backupCount": 10,
        "formatter": "json",
        "filters": ["request_id"],
    }

for logger_name in ["django", "core", "reservations"]:
    LOGGING["loggers"][logger_name]["handlers"] = ["console", "file"]
    if "json_file" in LOGGING["handlers"]:
        LOGGING["loggers"][logger_name]["handlers"].append("json_file")
LOGGING["loggers"]["django.request"]["handlers"] = ["console", "error_file"]

# -----------------------------------------------------------------------------
# Error Monitoring (Sentry)
# -----------------------------------------------------------------------------
SENTRY_DSN = os.getenv("SENTRY_DSN")
if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[DjangoIntegration(transaction_style="url")],
        traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
        send_default_pii=False,
        environment=os.getenv("ENVIRONMENT", "production"),
        release=os.getenv("APP_VERSION", "unknown"),
    )
