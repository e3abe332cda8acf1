"""
facility-ability – Django Settings (Infrastructure Only)
========================================================
Django hosts the HTTP adapters. The authorization core reads no
settings; everything here is adapter and logging configuration.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "ABILITY_SECRET_KEY", "ability-dev-key-replace-before-deployment"
)

DEBUG = os.environ.get("ABILITY_DEBUG", "1") == "1"

ALLOWED_HOSTS = ["*"] if DEBUG else os.environ.get("ABILITY_ALLOWED_HOSTS", "").split(",")

# ── Installed Apps ────────────────────────────────────────────
# No models: the adapters are stateless.
INSTALLED_APPS = [
    "django.contrib.contenttypes",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL & WSGI ────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Database ──────────────────────────────────────────────────
DATABASES = {}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Secure Rooms API ──────────────────────────────────────────
# Card reader controllers authenticate with HTTP basic auth.
SECURE_ROOMS_API = {
    "BASIC_AUTH_NAME": os.environ.get("SECURE_ROOMS_API_BASIC_AUTH_NAME", "secure-rooms"),
    "BASIC_AUTH_PASSWORD": os.environ.get(
        "SECURE_ROOMS_API_BASIC_AUTH_PASSWORD", "secure-rooms-dev-password"
    ),
    "TABLET_IDENTIFIER": os.environ.get("SECURE_ROOMS_TABLET_IDENTIFIER", "abc123"),
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "ability": {
            "level": os.environ.get("ABILITY_LOG_LEVEL", "INFO"),
        },
    },
}
