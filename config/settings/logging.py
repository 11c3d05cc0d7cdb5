from pathlib import Path
from typing import Optional


def build_logging_config(log_dir: Optional[Path], log_level: str = "INFO", quiet: bool = False):
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    }
    if log_dir is not None:
        handlers["file"] = {
            # TimedRotatingFileHandler is not process-safe with multi-worker gunicorn writes.
            "class": "concurrent_log_handler.ConcurrentTimedRotatingFileHandler",
            "filename": str(log_dir / "triage.log"),
            "when": "midnight",
            "interval": 1,
            "backupCount": 20,
            "formatter": "json",
            "encoding": "utf-8",
        }

    # Tests: keep the pipeline, drop the output.
    if quiet:
        handlers = {name: {"class": "logging.NullHandler"} for name in handlers}

    for handler in handlers.values():
        handler["filters"] = ["request_id"]

    names = list(handlers)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_id": {
                "()": "triage_core.common.logging_utils.RequestIdFilter",
            },
        },
        "formatters": {
            "json": {
                "()": "triage_core.common.logging_utils.JsonFormatter",
            },
        },
        "handlers": handlers,
        "root": {
            "handlers": names,
            "level": log_level,
        },
        "loggers": {
            "django": {
                "handlers": names,
                "level": log_level,
                "propagate": False,
            },
            "django.request": {
                "handlers": names,
                "level": "ERROR",
                "propagate": False,
            },
            "triage_core": {
                "handlers": names,
                "level": log_level,
                "propagate": False,
            },
        },
    }
