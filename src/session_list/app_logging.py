"""Logging setup for the session list service."""

import logging

LOGGER_NAME = "session_list"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the package logger and apply ``level``.

    The level is reapplied on every call, so a rebuilt app picks up a changed
    ``LOG_LEVEL`` without duplicating handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
