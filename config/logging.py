"""Logging configuration for the application."""

import logging
import logging.config
from pythonjsonlogger import jsonlogger

from .settings import settings


def setup_logging():
    """Setup structured logging configuration.

    httpx logs every request URL at INFO, and the provider credential
    travels in the query string, so its loggers stay at WARNING.
    """

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": jsonlogger.JsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s"
            }
        },
        "handlers": {
            "default": {
                "level": settings.log_level,
                "formatter": "json",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout"
            }
        },
        "loggers": {
            "": {
                "handlers": ["default"],
                "level": settings.log_level,
                "propagate": False
            },
            "uvicorn": {
                "handlers": ["default"],
                "level": settings.log_level,
                "propagate": False
            },
            "httpx": {
                "level": "WARNING"
            },
            "httpcore": {
                "level": "WARNING"
            }
        }
    }

    logging.config.dictConfig(logging_config)
    return logging.getLogger(__name__)
