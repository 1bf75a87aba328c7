# stake_accounts/config.py
"""
Environment-driven logging settings.

Protocol constants (seed length, program id, account size) live in
``constants.py`` and are not read from the environment.
"""

from __future__ import annotations
import logging, os
from typing import Optional


def log_level() -> int:
    name = os.getenv("STAKE_ACCOUNTS_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.INFO


def log_file() -> Optional[str]:
    return os.getenv("STAKE_ACCOUNTS_LOG_FILE") or None
