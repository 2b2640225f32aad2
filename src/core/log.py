import logging
import os
from logging.handlers import RotatingFileHandler

from core.config import settings

LOGGER_NAME = "konjugation"


def setup_logging() -> logging.Logger:
    """
    Send the drill's log records to a rotating file.

    The terminal belongs to the TUI while the quiz runs, so nothing goes to stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL.upper())

    if not os.path.exists(settings.LOG_DIR):
        os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)
    logger.propagate = False
    return logger
