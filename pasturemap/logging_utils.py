"""Mini README: Logging helpers shared by every pasturemap module.

Structure:
    * configure_root_logger - attach one formatted stream handler to root.
    * get_logger - module logger factory used for pipeline diagnostics.

Usage:
    Modules create a module-level ``LOGGER = get_logger(__name__)``. Skipped
    geometries, malformed payloads and empty records are reported through
    these loggers at WARNING so a batch never aborts silently. The CLI calls
    ``configure_root_logger(logging.DEBUG)`` for ``--verbose`` runs.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False
DEFAULT_LEVEL = logging.INFO


def configure_root_logger(level: Optional[int] = None) -> None:
    """Install the pasturemap stream handler once and apply ``level``.

    The handler is only added on the first call. Later calls that pass an
    explicit level adjust the root level, which lets the CLI switch to debug
    output after modules have already created their loggers.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.setLevel(DEFAULT_LEVEL if level is None else level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger for ``name`` with the shared handler installed."""

    configure_root_logger()
    return logging.getLogger(name)
