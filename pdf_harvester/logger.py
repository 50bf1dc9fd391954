"""Logging setup with rotating file + console output."""

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "pdf_harvester"
LOG_FILENAME = "harvester.log"


def setup_logger(log_dir: str = "logs", level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    if not log_dir:
        return logger

    log_path = os.path.abspath(os.path.join(log_dir, LOG_FILENAME))
    if any(isinstance(h, RotatingFileHandler) and h.baseFilename == log_path
           for h in logger.handlers):
        return logger

    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        logger.error(f"Cannot create log directory {log_dir}: {e}")
        return logger

    # Rotating file handler (10MB per file, keep 5)
    fh = RotatingFileHandler(log_path, maxBytes=10 * 1024 * 1024, backupCount=5)
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    return logger
