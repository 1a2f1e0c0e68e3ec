"""
Settings and configuration for Pratyaya.

Values are read from the environment once, at import time.
"""

import logging
import os

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to default."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring {name}={raw!r}: must be positive, using {default}")
        return default
    return value


# Debug mode
DEBUG = os.environ.get("PRATYAYA_DEBUG", "").lower() in ("1", "true", "yes")

# Longest suffix the shell and CLI accept when adding entries
MAX_SUFFIX_LENGTH = _env_int("PRATYAYA_MAX_SUFFIX_LENGTH", 19)

# Categories longer than this are truncated when added from the shell or CLI
MAX_CATEGORY_LENGTH = _env_int("PRATYAYA_MAX_CATEGORY_LENGTH", 79)
