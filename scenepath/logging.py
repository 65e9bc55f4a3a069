"""Package-wide logging setup.

Every module obtains its logger through :func:`get_logger` so that all records
flow through the single ``scenepath`` logger configured here. Console output
goes to stderr: the CLI reserves stdout for resolved values.

What the package logs, by level:

- DEBUG: each segment ``navigate`` resolves (``scenepath.path``), hierarchy
  waits that time out (``scenepath.scene.instance``), scene sizes after
  loading and CLI lookup timings.
- INFO: match counts from ``scenepath find --all``.
- WARNING: a ``wait_for_child`` that has been pending longer than
  ``NAV_CONFIG.infinite_yield_warning`` seconds with no timeout, and scene
  documents that use classes missing from the registry (such instances never
  satisfy ``is_a``).

The CLI maps ``--verbose`` to DEBUG and ``--quiet`` to WARNING through
:func:`set_global_log_level`.
"""

import logging
import sys
from typing import Optional

#: Name of the package logger every module logger hangs off.
LOGGER_NAME = "scenepath"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``scenepath`` logger.

    Runs on import, so navigation warnings are visible without any setup by
    the caller. Repeated calls are no-ops until :func:`reset_logging` is
    called; to change the destination afterwards, reset first and pass a
    ``handler``.

    Args:
        level: Level for the package logger.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a stderr ``StreamHandler``.
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Keep propagation so pytest's caplog sees package records
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that inherits the package configuration.

    Args:
        name: Logger name, normally ``__name__`` of the caller.

    Returns:
        Logger whose level defers to the ``scenepath`` logger.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the level of the package logger and its handlers.

    Args:
        level: Logging level such as ``logging.DEBUG``.
    """
    setup_root_logger()

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show per-segment navigation traces and wait timeouts."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO level, hiding navigation traces."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget the configuration.

    Module loggers created earlier keep working; they defer to the package
    logger, which falls back to the root logger until it is set up again.
    Mainly used by tests.
    """
    global _configured
    _configured = False

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
