#!/usr/bin/env python3
"""
Utility functions for reading parser settings from environment variables.

Handles Windows CRLF line endings and other whitespace issues that can occur
when .env files are edited on different operating systems.
"""

import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def getenv_clean(key: str, default: str = None, strip: bool = True) -> Optional[str]:
    """Read an environment variable, dropping whitespace and CRLF left by .env files.

    The default is returned as given when the variable is unset. Values that
    needed stripping are logged at warning level.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    if strip and value != value.strip():
        logger.warning(f"Stripped whitespace from environment variable {key}: {value!r}")
        value = value.strip()
    return value


def getenv_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean with automatic cleaning.

    - "true", "1", "yes", "on" → True
    - "false", "0", "no", "off", "" → False
    - anything else → default, with a warning

    Args:
        key: Environment variable name
        default: Default boolean value if variable is not set

    Returns:
        Boolean value
    """
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    cleaned_lower = raw_value.lower()
    if cleaned_lower in ("true", "1", "yes", "on"):
        return True
    elif cleaned_lower in ("false", "0", "no", "off", ""):
        return False
    else:
        logger.warning(
            f"Environment variable {key} has unexpected boolean value: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default
