"""Logging setup for processes embedding the console core.

The package itself only creates module loggers. A process embedding it calls
setup_logging once at startup to send those records to stdout at the
configured CLUBDESK_LOG_LEVEL.
"""

import logging
import sys

from clubdesk.config import get_settings

HANDLER_NAME = "clubdesk.console"

console_formatter = logging.Formatter("%(levelname)s: [%(name)s] %(message)s (%(asctime)s)")


def setup_logging(log_level: str | None = None) -> None:
    """Configure the root logger with a console handler.

    Calling it again replaces the handler installed by a previous call instead
    of stacking a second one.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the configured log_level.

    Raises:
        ValueError: If the level name is unknown
    """
    if log_level is None:
        log_level = get_settings().log_level

    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(HANDLER_NAME)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    root_logger.debug("Logging configured with level %s", log_level.upper())
