"""Logging infrastructure for the repository manager.

Every module logs through a child of the ``repository_manager`` logger
(``repository_manager.manager``, ``repository_manager.array``, ...), so
configuring that one root logger from the ``logging`` configuration section
sets up output for the whole package.
"""

import logging
import logging.handlers
import os
from typing import Optional

from .config import ManagerConfig

LOGGER_ROOT = "repository_manager"
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str) -> logging.Logger:
    """Get a package logger.

    Names are placed under the package root unless they already are.

    Args:
        name: Component name (e.g. ``"manager"``)

    Returns:
        Logger instance
    """
    if name == LOGGER_ROOT or name.startswith(LOGGER_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_ROOT}.{name}")


def setup_logger(
    name: str = LOGGER_ROOT,
    log_dir: str = "logs",
    level: str = "INFO",
    log_format: Optional[str] = None,
    file_logging: bool = False,
    console_logging: bool = True,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Attach handlers to a logger and set its level.

    Calling this again for the same logger only updates the level.

    Args:
        name: Logger name, the package root by default
        log_dir: Directory for the rotating log file
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string
        file_logging: Write to ``<log_dir>/<name>.log``
        console_logging: Write to stderr
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup log files to keep

    Returns:
        Configured logger instance

    Raises:
        ValueError: If level is not a known logging level
    """
    level_upper = level.upper()
    if level_upper not in VALID_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Must be one of: {', '.join(VALID_LEVELS)}"
        )

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level_upper))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(log_format or DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    handlers = []
    if file_logging:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                os.path.join(log_dir, f"{name}.log"),
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
        )
    if console_logging:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def configure_logging(config: ManagerConfig) -> logging.Logger:
    """Configure the package root logger from the ``logging`` section.

    Args:
        config: Parsed configuration

    Returns:
        The package root logger
    """
    return setup_logger(
        LOGGER_ROOT,
        log_dir=config.log_dir,
        level=config.log_level,
        file_logging=config.log_to_file,
    )
