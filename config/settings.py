"""Django settings for the bookings project.

Values come from environment variables, optionally loaded from a .env file
(BOOKINGS_ENV_FILE, default .env at the project root), with development defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

ENV_FILE = Path(os.getenv("BOOKINGS_ENV_FILE", BASE_DIR / ".env"))
load_dotenv(ENV_FILE)

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-insecure-key")
DEBUG = os.getenv("DJANGO_DEBUG", "false").strip().lower() in {"1", "true", "yes", "on"}
ALLOWED_HOSTS = [h.strip() for h in os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",") if h.strip()]

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "bookings.apps.BookingsConfig",
]

DATABASES = {
    "default": {
        "ENGINE": os.getenv("BOOKINGS_DB_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.getenv("BOOKINGS_DB_NAME", str(BASE_DIR / "db.sqlite3")),
        "USER": os.getenv("BOOKINGS_DB_USER", ""),
        "PASSWORD": os.getenv("BOOKINGS_DB_PASSWORD", ""),
        "HOST": os.getenv("BOOKINGS_DB_HOST", ""),
        "PORT": os.getenv("BOOKINGS_DB_PORT", ""),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"

LOG_LEVEL = os.getenv("BOOKINGS_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "bookings": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": True,
        },
    },
}
