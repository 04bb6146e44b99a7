#!/usr/bin/env python3

import logging
import logging.config
from pythonjsonlogger import jsonlogger

from .config import parser_config


def setup_logging(level: str = None):
    """Setup JSON logging configuration for a host application.

    The library itself only creates module loggers; callers opt in to this
    configuration.
    """
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": jsonlogger.JsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(document)s %(stage)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout"
            }
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level or parser_config.get_log_level(),
                "propagate": False
            },
            "uml_ingest": {
                "handlers": ["console"],
                "level": level or parser_config.get_log_level(),
                "propagate": False
            }
        }
    }

    logging.config.dictConfig(logging_config)
