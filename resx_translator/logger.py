"""Logging setup shared by every module of the package."""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "resx_translator"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(log_mode: str = "info", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console and file handlers to the package logger.

    Args:
        log_mode: "debug", "info" or "off"
        log_file: Optional path of a log file (ignored when log_mode is "off")

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    # Drop handlers from a previous call, keep the NullHandler
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            handler.close()
            logger.removeHandler(handler)

    if log_mode == "off":
        # A level higher than CRITICAL disables everything
        logger.setLevel(logging.CRITICAL + 1)
        return logger

    level = logging.DEBUG if log_mode == "debug" else logging.INFO
    logger.setLevel(level)
    log_format = logging.Formatter(LOG_FORMAT)

    c_handler = logging.StreamHandler()
    c_handler.setLevel(level)
    c_handler.setFormatter(log_format)
    logger.addHandler(c_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        f_handler = logging.FileHandler(log_file, encoding="utf-8")
        f_handler.setLevel(logging.DEBUG)
        f_handler.setFormatter(log_format)
        logger.addHandler(f_handler)

    return logger
