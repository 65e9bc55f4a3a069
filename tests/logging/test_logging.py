"""Tests for package logging configuration."""

import asyncio
import logging
from io import StringIO

import pytest

from scenepath.logging import (
    LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)
from scenepath.path import navigate


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def _capture() -> tuple:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    setup_root_logger(level=logging.INFO, handler=handler)
    return stream, handler


def test_default_level_is_info():
    logger = get_logger("scenepath.test")
    assert logger.getEffectiveLevel() == logging.INFO
    assert not logger.isEnabledFor(logging.DEBUG)


def test_enable_and_disable_debug():
    stream, _ = _capture()
    logger = get_logger("scenepath.test")

    logger.debug("hidden")
    enable_debug_logging()
    logger.debug("shown")
    disable_debug_logging()
    logger.debug("hidden-again")

    out = stream.getvalue()
    assert "shown" in out
    assert "hidden" not in out


def test_global_level_reaches_existing_and_new_loggers():
    first = get_logger("scenepath.one")
    set_global_log_level(logging.WARNING)
    second = get_logger("scenepath.two")
    assert first.getEffectiveLevel() == logging.WARNING
    assert second.getEffectiveLevel() == logging.WARNING


def test_setup_is_idempotent():
    _capture()
    setup_root_logger(level=logging.DEBUG)
    package_logger = logging.getLogger(LOGGER_NAME)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO


def test_custom_format():
    stream = StringIO()
    setup_root_logger(
        handler=logging.StreamHandler(stream),
        format_string="%(levelname)s|%(name)s|%(message)s",
    )
    get_logger("scenepath.fmt").info("hello")
    assert stream.getvalue().strip() == "INFO|scenepath.fmt|hello"


def test_reset_clears_handlers():
    _capture()
    reset_logging()
    assert logging.getLogger(LOGGER_NAME).handlers == []


def test_navigation_steps_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    asyncio.run(navigate({"a": {"b": 1}}, "a.b"))
    messages = [r.getMessage() for r in caplog.records if r.name == "scenepath.path"]
    assert any("'a'" in m for m in messages)
    assert any("'b'" in m for m in messages)


def test_timed_out_wait_logged_at_debug(caplog):
    from scenepath.scene import Instance

    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    root = Instance("Folder", "root")
    assert asyncio.run(root.wait_for_child("Missing", timeout=0)) is None
    assert any(
        r.name == "scenepath.scene.instance"
        and r.levelno == logging.DEBUG
        and "Gave up waiting for 'Missing' under root" in r.getMessage()
        for r in caplog.records
    )
