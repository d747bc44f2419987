"""
Composer Samples – Django Settings (Infrastructure Only)
=========================================================
Django hosts the optional database-backed world state and is the
single source of runtime configuration.

The embedded runtime reads BUSINESS_NETWORKS through
core.config.get_runtime_settings().
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
# BASE_DIR = project root
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("COMPOSER_SECRET_KEY", "composer-samples-dev-key")

DEBUG = True

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    # ── Composer Modules ──────────────────────────────────
    "core.world_state",
]

# ── Database ──────────────────────────────────────────────────
# SQLite for samples and tests.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ── Default Primary Key ──────────────────────────────────────
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Business Networks ─────────────────────────────────────────
# STORE_BACKEND:  "memory" (process-local) or "django" (StateRecord table)
# ADMIN_IDENTITY: identity name bound to the network administrator
# LOG_PROCESSORS: log every processor invocation at INFO
BUSINESS_NETWORKS = {
    "STORE_BACKEND": os.environ.get("COMPOSER_STORE_BACKEND", "memory"),
    "ADMIN_IDENTITY": "admin",
    "LOG_PROCESSORS": True,
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "composer": {"handlers": ["console"], "level": "INFO"},
        "networks": {"handlers": ["console"], "level": "INFO"},
    },
}
