"""Common utilities for the repository manager."""

from .logger import configure_logging, setup_logger, get_logger
from .config import load_config, load_typed_config
from .io import IOInterface, LoggerIO, NullIO

__all__ = [
    "IOInterface",
    "LoggerIO",
    "NullIO",
    "configure_logging",
    "get_logger",
    "load_config",
    "load_typed_config",
    "setup_logger",
]
