from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(module)s: %(message)s"

_ROOT_LOGGER = "attendance_tracker"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the package logger.

    Safe to call more than once: an existing handler is reused and only the
    level is updated.
    """

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
