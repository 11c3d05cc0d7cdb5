# config/settings/test.py
from .base import *  # noqa

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# No backoff sleeps in tests.
TRIAGE_CASE_STORE_RETRY = {"MAX_ATTEMPTS": 3, "BACKOFF_SECONDS": 0.0}

LOGGING = build_logging_config(None, "WARNING", quiet=True)  # noqa: F405
