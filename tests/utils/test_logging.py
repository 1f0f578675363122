"""Tests for logging setup."""

import logging

import pytest

from skillsync.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    logger = logging.getLogger("skillsync")
    saved = list(logger.handlers)
    logger.handlers = []
    yield
    logger.handlers = saved
    logger.setLevel(logging.NOTSET)


def test_default_level_is_warning():
    setup_logging()

    assert logging.getLogger("skillsync").level == logging.WARNING


def test_verbose_enables_debug():
    setup_logging(verbose=True)

    assert logging.getLogger("skillsync").level == logging.DEBUG


def test_repeated_setup_adds_one_handler():
    """Calling setup twice doesn't duplicate output."""
    logger = logging.getLogger("skillsync")
    setup_logging()
    setup_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.DEBUG


def test_handler_writes_to_current_stderr(capsys):
    """The handler is bound to stderr at setup time and replaces any earlier one."""
    setup_logging()
    first = logging.getLogger("skillsync").handlers[0]

    setup_logging()
    logging.getLogger("skillsync.test").warning("copy failed")

    handlers = logging.getLogger("skillsync").handlers
    assert handlers[0] is not first
    assert isinstance(handlers[0], logging.StreamHandler)
    assert "WARNING - skillsync.test - copy failed" in capsys.readouterr().err
