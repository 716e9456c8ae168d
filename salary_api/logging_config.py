"""
Logging setup.
Console logging always, file logging when LOG_FILE is set.
"""

import logging.config
from pathlib import Path

from salary_api.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_logging_config(settings: Settings) -> dict:
    level = settings.LOG_LEVEL.upper()
    handlers: dict[str, dict] = {
        "console": {
            "level": level,
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    }

    if settings.LOG_FILE:
        Path(settings.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "level": "DEBUG",
            "class": "logging.FileHandler",
            "filename": settings.LOG_FILE,
            "formatter": "standard",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT},
        },
        "handlers": handlers,
        "loggers": {
            "": {  # root logger
                "handlers": list(handlers),
                "level": level,
            },
            "sqlalchemy": {
                "level": "WARNING",
            },
        },
    }


def configure_logging(settings: Settings) -> None:
    logging.config.dictConfig(build_logging_config(settings))
