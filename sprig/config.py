from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_HOST_RECURSION_LIMIT = 10000


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_max_depth() -> Optional[int]:
    """Closure call-depth limit; None (unset or 0) means unlimited."""
    depth = int_from_env('SPRIG_MAX_DEPTH')
    if not depth:
        return None
    return depth


def get_host_recursion_limit() -> int:
    """Python recursion limit the interpreter raises the host to on startup."""
    return int_from_env('SPRIG_HOST_RECURSION_LIMIT', _DEFAULT_HOST_RECURSION_LIMIT) or _DEFAULT_HOST_RECURSION_LIMIT


def get_log_level() -> str:
    return os.environ.get('SPRIG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a basic stderr handler to the ``sprig`` logger hierarchy.

    Library code never calls this; hosts (scripts, notebooks) may.
    """
    logger = logging.getLogger("sprig")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s %(levelname)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level or get_log_level())
