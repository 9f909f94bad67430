"""
Logging configuration for the console exercises.
Records go to stderr so stdout carries only prompts and program output.
"""
import logging
import logging.config
from typing import Any, Dict, Optional

import exercises.config as cfg


def get_logging_config(level: Optional[str] = None) -> Dict[str, Any]:
    """Get logging configuration dictionary."""
    level = (level or cfg.LOG_LEVEL).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": cfg.LOG_FORMAT,
                "datefmt": cfg.LOG_DATEFMT,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "simple",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "exercises": {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(level: Optional[str] = None) -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
    logging.getLogger(__name__).debug("Logging configured at %s", (level or cfg.LOG_LEVEL).upper())
