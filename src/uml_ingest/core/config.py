#!/usr/bin/env python3
"""
Configuration settings for XMI ingestion.

These settings can be overridden via environment variables so the host
code-generation tool can pick the target storage family and the indexing
policy without code changes.
"""

import logging

from .env_utils import getenv_bool, getenv_clean

logger = logging.getLogger(__name__)


class ParserConfig:
    """Parser configuration.

    All values can be overridden via environment variables. They are read when
    the config object is created, so a fresh ``ParserConfig()`` picks up
    changes made to the environment after import.
    """

    def __init__(self):
        # Storage family whose type registry validates scalar names
        # One of 'sql', 'mongodb', 'cassandra'
        self.DEFAULT_DATABASE_TYPE = getenv_clean("XMI_DEFAULT_DATABASE_TYPE", "sql").lower()

        # Unknown packagedElement kinds are skipped unless this is set,
        # in which case indexing fails on the first one
        self.STRICT_ELEMENT_KINDS = getenv_bool("XMI_STRICT_ELEMENT_KINDS", False)

        # Level used by setup_logging() for the root logger
        self.LOG_LEVEL = getenv_clean("XMI_LOG_LEVEL", "INFO").upper()

    def get_log_level(self) -> str:
        """Get the configured log level, falling back to INFO when unknown.

        Returns:
            A level name accepted by logging.config
        """
        if self.LOG_LEVEL not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            logger.warning(f"Unknown log level {self.LOG_LEVEL!r}, using INFO")
            return "INFO"
        return self.LOG_LEVEL


# Singleton instance
parser_config = ParserConfig()
