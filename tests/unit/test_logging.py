"""Tests for console logging setup."""

import logging

import pytest

from clubdesk.log import HANDLER_NAME, setup_logging

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _console_handlers():
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


def test_setup_logging_sets_level():
    setup_logging("debug")

    assert logging.getLogger().level == logging.DEBUG
    assert len(_console_handlers()) == 1


def test_setup_logging_does_not_stack_handlers():
    setup_logging("INFO")
    setup_logging("WARNING")

    assert logging.getLogger().level == logging.WARNING
    assert len(_console_handlers()) == 1


def test_setup_logging_defaults_to_settings(monkeypatch):
    monkeypatch.setenv("CLUBDESK_LOG_LEVEL", "ERROR")

    setup_logging()

    assert logging.getLogger().level == logging.ERROR


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        setup_logging("LOUD")


def test_setup_logging_is_public():
    import clubdesk

    assert clubdesk.setup_logging is setup_logging
