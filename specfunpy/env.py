"""Environment-variable helpers for runtime switches.

These helpers centralize parsing of the environment variables that control
tier availability, mpmath guard bits and logging verbosity.

Notes
-----
These are intentionally forgiving: invalid inputs fall back to defaults rather
than raising, so imports and batch runs never fail on a typo.
"""

from __future__ import annotations

import logging
import os

DISABLE_EXTENDED = "SPECFUNPY_DISABLE_EXTENDED"
MP_GUARD_BITS = "SPECFUNPY_MP_GUARD_BITS"
LOG_LEVEL = "SPECFUNPY_LOG_LEVEL"


def parse_bool_env(name: str, *, default: bool) -> bool:
    """Parse a boolean environment variable.

    Parameters
    ----------
    name:
        Environment variable name.
    default:
        Default value used when the variable is unset or invalid.

    Returns
    -------
    bool
        Parsed boolean value.
    """

    raw = os.environ.get(name, "").strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off", ""}:
        return default if raw == "" else False
    return default


def parse_int_env(name: str, *, default: int, minimum: int = 1) -> int:
    """Parse an integer environment variable with a lower bound.

    Parameters
    ----------
    name:
        Environment variable name.
    default:
        Default value used when the variable is unset or invalid.
    minimum:
        Lower bound enforced on the returned value.

    Returns
    -------
    int
        Parsed integer value (at least ``minimum``).
    """

    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, value)


def normalize_log_level(value: str, *, default: int = logging.WARNING) -> int:
    """Map a level name or number to a :mod:`logging` level.

    Parameters
    ----------
    value:
        A raw environment variable value such as ``"debug"`` or ``"10"``.
    default:
        Level used when ``value`` is empty or not recognized.

    Returns
    -------
    int
        A logging level.
    """

    value = value.strip()
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return default
