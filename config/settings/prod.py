# config/settings/prod.py
from .base import *  # noqa

DEBUG = False

CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = [
    "https://app.digidoc.ie",
]
CORS_ALLOW_CREDENTIALS = True

SIMPLE_JWT["AUTH_COOKIE_SECURE"] = True  # noqa: F405
SIMPLE_JWT["AUTH_COOKIE_SAMESITE"] = "Lax"  # noqa: F405
