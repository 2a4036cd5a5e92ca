"""
Logging Configuration Module.

Centralized stdlib logging setup for FunShop: one console handler, an
optional ``funshop.log`` file handler and quieter levels for chatty
third-party loggers. Defaults come from the server settings.
"""

import logging
from pathlib import Path
from typing import Optional

from funshop.server.core.config import settings

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

LOG_FILE_NAME = "funshop.log"

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "funshop.server.api": "DEBUG",
    "funshop.server.services": "DEBUG",
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "aiosmtplib": "WARNING",
    "httpx": "WARNING",
    "uvicorn.access": "INFO",
}


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configure logging for the application.

    Calling it again replaces the handlers of the previous call.

    Args:
        log_level: Console level, defaults to ``FUNSHOP_LOG_LEVEL``
        log_format: ``simple`` or ``detailed``, defaults to ``LOG_FORMAT``
        enable_file: Also write DEBUG and up to the log file, defaults to ``ENABLE_FILE_LOGGING``
        log_dir: Directory of the log file, defaults to ``LOG_FILE_DIR``
    """
    level = (log_level or settings.log_level).upper()
    fmt = log_format or settings.log_format
    to_file = settings.enable_file_logging if enable_file is None else enable_file

    formatter = logging.Formatter(
        SIMPLE_FORMAT if fmt == "simple" else DETAILED_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if to_file:
        directory = Path(log_dir or settings.log_file_dir)
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(directory / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={fmt}, file_logging={to_file}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
