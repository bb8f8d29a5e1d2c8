"""Logger setup for paritybits.

Every module logs under the ``paritybits`` logger. The first request for a
logger attaches one stdout handler to it; module loggers carry no handlers of
their own and take their level from the package logger.
"""

import logging
import sys

PACKAGE_LOGGER = "paritybits"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: logging.Handler | None = None


def configure_package_logger(level: int = logging.INFO) -> logging.Logger:
    """Attach the stdout handler to the package logger once and return it.

    Later calls return the same logger untouched; use
    :func:`set_global_log_level` to change the level afterwards.
    """
    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(_handler)
        package_logger.setLevel(level)
        # Records still reach the root logger, where pytest's caplog listens
        package_logger.propagate = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a paritybits module (usually ``__name__``)."""
    configure_package_logger()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its stdout handler."""
    package_logger = configure_package_logger()
    package_logger.setLevel(level)
    if _handler is not None:
        _handler.setLevel(level)
