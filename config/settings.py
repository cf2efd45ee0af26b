"""
MEL - Django Settings (Infrastructure Only)
===========================================
Django serves as the framework container for the MEL backend: ORM,
migrations, management commands and the WSGI entry point.

Every deploy-sensitive value is read from a MEL_* environment variable.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
# BASE_DIR = project root where manage.py lives
BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str) -> list[str]:
    raw = os.environ.get(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("MEL_SECRET_KEY", "mel-dev-key-replace-before-deployment")

DEBUG = _env_bool("MEL_DEBUG", True)

ALLOWED_HOSTS = _env_list("MEL_ALLOWED_HOSTS") or ["localhost", "127.0.0.1", "testserver"]

# ── Installed Apps ────────────────────────────────────────────
# No Django auth or sessions: credentials are Basic auth checked against
# the MEL users table on every request.
INSTALLED_APPS = [
    "core.auth",
    "core.projects_store",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# Trailing slashes are part of the resource path.
APPEND_SLASH = False

# ── URL & WSGI ────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

# ── Database ──────────────────────────────────────────────────
# SQLite for development; MEL_DB_ENGINE switches backend, e.g.
# django.db.backends.postgresql.
_DB_ENGINE = os.environ.get("MEL_DB_ENGINE", "django.db.backends.sqlite3")

if _DB_ENGINE.endswith("sqlite3"):
    DATABASES = {
        "default": {
            "ENGINE": _DB_ENGINE,
            "NAME": os.environ.get("MEL_DB_NAME", str(BASE_DIR / "db.sqlite3")),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": _DB_ENGINE,
            "NAME": os.environ.get("MEL_DB_NAME", "mel"),
            "USER": os.environ.get("MEL_DB_USER", ""),
            "PASSWORD": os.environ.get("MEL_DB_PASSWORD", ""),
            "HOST": os.environ.get("MEL_DB_HOST", ""),
            "PORT": os.environ.get("MEL_DB_PORT", ""),
        }
    }

# ── Password Hashing ──────────────────────────────────────────
# scrypt N parameter; must be a power of two.
MEL_PASSWORD_WORK_FACTOR = int(os.environ.get("MEL_PASSWORD_WORK_FACTOR", 1 << 16))

# ── Logging ───────────────────────────────────────────────────
MEL_LOG_LEVEL = os.environ.get("MEL_LOG_LEVEL", "INFO").upper()

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
    "loggers": {
        "mel": {
            "handlers": ["console"],
            "level": MEL_LOG_LEVEL,
            "propagate": False,
        },
    },
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# ── Default Primary Key ──────────────────────────────────────
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
