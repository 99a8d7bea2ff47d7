"""
Environment-driven defaults for ordmap.

Values are read once at import time. Constructor arguments always win.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def env_flag(name: str, default: bool) -> bool:
    """Parse a boolean environment variable, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning("Ignoring %s=%r (expected one of %s); using %s",
                   name, raw, sorted(_TRUTHY | _FALSY), default)
    return default


def env_log_level(name: str) -> Optional[int]:
    """Return the numeric logging level named by an environment variable, if any."""
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return None
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        logger.warning("Ignoring %s=%r (unknown log level)", name, raw)
        return None
    return level


REBALANCE_ON_DELETE: bool = env_flag("ORDMAP_REBALANCE_ON_DELETE", True)
LOG_LEVEL: Optional[int] = env_log_level("ORDMAP_LOG_LEVEL")
