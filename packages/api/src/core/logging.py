# This project was developed with assistance from AI tools.
"""Console logging setup applied once at application startup."""

from logging.config import dictConfig

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        }
    },
    "root": {"handlers": ["console"], "level": "INFO"},
}


def setup_logging(level: str = "INFO") -> None:
    LOGGING_CONFIG["root"]["level"] = level.upper()
    dictConfig(LOGGING_CONFIG)
