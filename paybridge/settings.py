# paybridge/settings.py
"""
Django settings for the paybridge project.

Everything deployment-specific comes from the environment so the same module
works for local dev, CI and production.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# -----------------------------
# 🔐 Core
# -----------------------------
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-paybridge-dev-key")
DEBUG = _env_bool("DJANGO_DEBUG", default=True)
ALLOWED_HOSTS = [h.strip() for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "shop",
    "gateway",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "paybridge.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "paybridge.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DJANGO_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "Asia/Tehran"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"


# -----------------------------
# 💳 Payment gateway
# -----------------------------
# Only the merchant id is mandatory; everything else has a working default.
PAYBRIDGE_GATEWAY = {
    "MERCHANT_ID": os.environ.get("PAYBRIDGE_MERCHANT_ID", "zibal"),
    "TITLE": os.environ.get("PAYBRIDGE_TITLE", "Online payment"),
    "DESCRIPTION": os.environ.get("PAYBRIDGE_DESCRIPTION", "Pay securely through the Zibal gateway."),
    "REQUEST_URL": os.environ.get("PAYBRIDGE_REQUEST_URL", "https://gateway.zibal.ir/v1/request"),
    "VERIFY_URL": os.environ.get("PAYBRIDGE_VERIFY_URL", "https://gateway.zibal.ir/v1/verify"),
    "START_URL": os.environ.get("PAYBRIDGE_START_URL", "https://gateway.zibal.ir/start/"),
    "TIMEOUT": float(os.environ.get("PAYBRIDGE_TIMEOUT", "30")),
}


# -----------------------------
# 📜 Logging
# -----------------------------
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        # app loggers bubble up to the root console handler
        "gateway": {
            "level": os.environ.get("PAYBRIDGE_LOG_LEVEL", "INFO"),
        },
        "shop": {
            "level": os.environ.get("PAYBRIDGE_LOG_LEVEL", "INFO"),
        },
    },
}
