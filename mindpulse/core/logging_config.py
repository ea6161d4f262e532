"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the
application. Assessment text is user-authored and sensitive, so every handler
carries the sensitive text filter.
"""

import copy
import logging
import logging.config
import os
from pathlib import Path
from typing import Any

# Get log level from environment or default to INFO
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING_CONFIG_BASE: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "detailed": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "filters": {
        "sensitive_text": {
            "()": "mindpulse.core.utils.logging.SensitiveTextFilter",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
            "filters": ["sensitive_text"],
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "mindpulse": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
        "uvicorn": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
        "sqlalchemy.engine": {
            "level": "WARNING",  # Set to INFO for SQL query logging
            "handlers": ["console"],
            "propagate": False,
        },
        "httpx": {
            "level": "WARNING",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def build_logging_config(level: str | None = None, log_dir: str | None = None) -> dict[str, Any]:
    """
    Build a concrete logging configuration from the base dictionary.

    Args:
        level: Optional log level overriding LOG_LEVEL
        log_dir: Optional directory for a rotating file handler

    Returns:
        Logging configuration dictionary suitable for dictConfig
    """
    config = copy.deepcopy(LOGGING_CONFIG_BASE)
    level = (level or LOG_LEVEL).upper()

    config["handlers"]["console"]["level"] = level
    config["loggers"]["mindpulse"]["level"] = level
    config["loggers"]["uvicorn"]["level"] = level

    log_dir = log_dir or os.getenv("LOG_DIR")
    if log_dir:
        config["handlers"]["file_handler"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "detailed",
            "filters": ["sensitive_text"],
            "filename": str(Path(log_dir) / "mindpulse.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 10,
            "encoding": "utf8",
        }
        config["loggers"]["mindpulse"]["handlers"].append("file_handler")

    return config


LOGGING_CONFIG = build_logging_config()


def setup_logging(config: dict[str, Any] | None = None) -> None:
    """
    Configure the logging system with the provided configuration or default.

    Args:
        config: Optional logging configuration dictionary to use instead of the default
    """
    if config is None:
        config = LOGGING_CONFIG

    file_handler = config["handlers"].get("file_handler")
    if file_handler:
        Path(file_handler["filename"]).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured successfully")
