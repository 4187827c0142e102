"""Mini README: Tests for the shared logging helpers.

Checks that repeated configuration never duplicates the handler and that an
explicit level can still be applied after the first call.
"""

from __future__ import annotations

import logging

from pasturemap.logging_utils import configure_root_logger, get_logger


def test_repeated_configuration_adds_one_handler() -> None:
    root_logger = logging.getLogger()
    get_logger("pasturemap.tests")
    handler_count = len(root_logger.handlers)

    configure_root_logger()
    get_logger("pasturemap.tests.other")

    assert len(root_logger.handlers) == handler_count


def test_explicit_level_is_applied_after_initialisation() -> None:
    root_logger = logging.getLogger()
    previous_level = root_logger.level
    get_logger(__name__)

    try:
        configure_root_logger(logging.WARNING)
        assert root_logger.level == logging.WARNING
        configure_root_logger()
        assert root_logger.level == logging.WARNING
    finally:
        root_logger.setLevel(previous_level)
