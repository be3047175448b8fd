"""
Logging Setup — Console output plus server.log in LOG_DIR.
"""
import logging
import os

from paysim.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach console and file handlers to the ``paysim`` logger (idempotent)."""
    os.makedirs(settings.LOG_DIR, exist_ok=True)

    logger = logging.getLogger("paysim")
    logger.setLevel(settings.LOG_LEVEL.upper())
    logger.propagate = True

    if not getattr(logger, "_paysim_configured", False):
        formatter = logging.Formatter(LOG_FORMAT)

        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

        log_file = os.path.join(settings.LOG_DIR, "server.log")
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger._paysim_configured = True

    return logger
