import logging
import os
import sys
from datetime import datetime

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "marketlens",
    level: int | str = logging.WARNING,
    log_dir: str | None = None,
) -> logging.Logger:
    """
    Setup a logger with a console handler and an optional file handler

    Args:
        name: Logger name (the package logger by default)
        level: Logging level, as a number or a level name
        log_dir: Directory for a dated log file; no file handler when None

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    for handler in logger.handlers:
        handler.setLevel(level)
        if type(handler) is logging.StreamHandler:
            handler.setStream(sys.stderr)

    if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        # Console handler writes to stderr so command output on stdout stays clean
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)

    if log_dir is not None and not any(isinstance(handler, logging.FileHandler) for handler in logger.handlers):
        os.makedirs(log_dir, exist_ok=True)
        module_name = name.split(".")[-1]
        log_filename = f"{module_name}_{datetime.now().strftime('%Y%m%d')}.log"
        log_filepath = os.path.join(log_dir, log_filename)

        file_handler = logging.FileHandler(log_filepath, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_filepath}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger without handlers, inheriting the package configuration

    Args:
        name: Logger name (usually __name__)
    """
    return logging.getLogger(name)
