"""Logging setup for the Gallery API.

Every module obtains its own logger with ``logging.getLogger(__name__)``; this
module only configures the root logger once, at application start-up.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with the application log format.

    Safe to call more than once: the level is always applied, but handlers are
    only installed by the first call (``logging.basicConfig`` is a no-op when
    the root logger already has handlers).

    Args:
        level: Log level name, e.g. ``"INFO"`` or ``"DEBUG"``.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
