"""Logging configuration for the apidoc command line."""

import logging
from logging.config import dictConfig

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stderr",
        }
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(verbose: bool = False) -> None:
    """Configure logging, switching to DEBUG when verbose."""

    config = {**LOGGING_CONFIG, "root": {**LOGGING_CONFIG["root"]}}
    if verbose:
        config["root"]["level"] = "DEBUG"
    dictConfig(config)
    logging.getLogger(__name__).debug("Debug logging enabled")
