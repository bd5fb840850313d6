import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=BASE_DIR / ".env")


def _get_env(*keys, default=None):
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_bool(key, default=False):
    v = _get_env(key)
    if v is None:
        return default
    return v.lower() in ("1", "true", "yes", "on")


def _get_float(key, default):
    v = _get_env(key)
    return float(v) if v is not None else default


SECRET_KEY = _get_env("DJANGO_SECRET_KEY", default="dev-insecure-electranow-key")
DEBUG = _get_bool("DJANGO_DEBUG", default=True)
ALLOWED_HOSTS = (_get_env("DJANGO_ALLOWED_HOSTS", default="*")).split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    "rest_framework",
    "services",
    "cart",
    "bookings",
    "assistant",
    "frontend",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

# Cart, booking flow and chat history all live in the session; no database.
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "electranow-sessions",
    }
}
SESSION_ENGINE = "django.contrib.sessions.backends.cache"
SESSION_COOKIE_HTTPONLY = True

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "Asia/Kolkata"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

# Catalog
CATALOG_PATH = _get_env("CATALOG_PATH", default=str(BASE_DIR / "services" / "data" / "catalog.json"))
CATALOG_PREVIEW_COUNT = int(_get_env("CATALOG_PREVIEW_COUNT", default="4"))

# Bookings
BOOKING_ACK_DELAY = _get_float("BOOKING_ACK_DELAY", 1.0)

# Recommendation assistant
OPENAI_API_KEY = _get_env("OPENAI_API_KEY", default="")
OPENAI_MODEL = _get_env("OPENAI_MODEL", default="gpt-4o-mini")
OPENAI_TIMEOUT = _get_float("OPENAI_TIMEOUT", 30.0)
CHAT_HISTORY_LIMIT = int(_get_env("CHAT_HISTORY_LIMIT", default="50"))

LOG_LEVEL = _get_env("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
}
