# config/settings/base.py
from pathlib import Path
import os
from dotenv import load_dotenv
from datetime import timedelta

from config.settings.logging import build_logging_config


BASE_DIR = Path(__file__).resolve().parent.parent.parent
load_dotenv(BASE_DIR / ".env")

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "unsafe-dev-key")
DEBUG = os.getenv("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    # Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # Third-party
    "corsheaders",
    "rest_framework",
    "rest_framework_simplejwt",
    "drf_spectacular",
    "django_filters",

    # Domain apps
    "triage_core.common.apps.CommonConfig",
    "triage_core.submissions.apps.SubmissionsConfig",
    "triage_core.actions.apps.ActionsConfig",
    "triage_core.appointments.apps.AppointmentsConfig",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "triage_core.common.middleware.RequestIdMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]


ROOT_URLCONF = "config.urls"

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
    }
]

WSGI_APPLICATION = "config.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("DB_NAME", "digidoc"),
        "USER": os.getenv("DB_USER", "digidoc"),
        "PASSWORD": os.getenv("DB_PASSWORD", "digidoc"),
        "HOST": os.getenv("DB_HOST", "127.0.0.1"),
        "PORT": os.getenv("DB_PORT", "5432"),
        # Surface an unreachable database as StoreUnavailable instead of hanging.
        "OPTIONS": {"connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "5"))},
    }
}

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

LANGUAGE_CODE = "en-ie"
TIME_ZONE = "Europe/Dublin"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "triage_core.iam.auth.CookieOrHeaderJWTAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.IsAuthenticated",
    ),
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",

    # Standard error envelope
    "EXCEPTION_HANDLER": "triage_core.common.api.exceptions.api_exception_handler",

    "DEFAULT_FILTER_BACKENDS": [
        "django_filters.rest_framework.DjangoFilterBackend",
        "rest_framework.filters.OrderingFilter",
    ],

    "DEFAULT_PAGINATION_CLASS": "triage_core.common.api.pagination.DefaultPagination",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "DigiDoc Triage API",
    "DESCRIPTION": "Symptom intake, triage classification and GP case workflow",
    "VERSION": "0.1.0",
    "COMPONENT_SPLIT_REQUEST": True,
    "SORT_OPERATIONS": True,
    "SORT_OPERATION_PARAMETERS": True,
}

SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(minutes=30),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=14),
    "ROTATE_REFRESH_TOKENS": True,
    "BLACKLIST_AFTER_ROTATION": False,
    "UPDATE_LAST_LOGIN": True,

    # Cookie settings
    "AUTH_COOKIE": "dd_access",
    "AUTH_COOKIE_SECURE": False,   # set True in production (HTTPS)
    "AUTH_COOKIE_HTTP_ONLY": True,
    "AUTH_COOKIE_SAMESITE": "Lax",
}

# CORS (development)
CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_CREDENTIALS = True

# Case store adapter used by the workflow services.
TRIAGE_CASE_STORE = os.getenv("TRIAGE_CASE_STORE", "triage_core.store.orm.OrmCaseStore")

# Applied by the store adapter to reads only; the workflow services never retry.
TRIAGE_CASE_STORE_RETRY = {
    "MAX_ATTEMPTS": int(os.getenv("TRIAGE_STORE_MAX_ATTEMPTS", "3")),
    "BACKOFF_SECONDS": float(os.getenv("TRIAGE_STORE_BACKOFF_SECONDS", "0.2")),
}

# Logging
TRIAGE_LOG_LEVEL = os.getenv("TRIAGE_LOG_LEVEL", "INFO")
TRIAGE_LOG_DIR = os.getenv("TRIAGE_LOG_DIR") or None

LOGGING = build_logging_config(
    Path(TRIAGE_LOG_DIR) if TRIAGE_LOG_DIR else None,
    TRIAGE_LOG_LEVEL,
)
