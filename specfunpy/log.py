"""Logger factory shared by all specfunpy modules."""

from __future__ import annotations

import logging
import os

from specfunpy.env import LOG_LEVEL, normalize_log_level

_ROOT = "specfunpy"
_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger(_ROOT)
    root.setLevel(normalize_log_level(os.environ.get(LOG_LEVEL, "")))
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        root.addHandler(handler)
    _configured = True


def specfun_logger(name: str) -> logging.Logger:
    """Return a logger below the ``specfunpy`` hierarchy.

    Parameters
    ----------
    name:
        Usually ``__name__`` of the calling module.

    Returns
    -------
    logging.Logger
        Logger whose level follows ``SPECFUNPY_LOG_LEVEL``.
    """
    _configure_root()
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
