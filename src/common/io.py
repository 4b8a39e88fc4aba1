"""Input/output sinks handed to repositories.

Repositories report progress and problems through an IOInterface rather
than printing directly, so the host application decides where messages go.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .logger import get_logger


class IOInterface(ABC):
    """Output channel used by the manager and its repositories."""

    @abstractmethod
    def write(self, message: str) -> None:
        """Write an informational message."""
        pass

    @abstractmethod
    def write_error(self, message: str) -> None:
        """Write an error message."""
        pass

    @abstractmethod
    def is_verbose(self) -> bool:
        """Return True if debug output is wanted."""
        pass


class LoggerIO(IOInterface):
    """IOInterface backed by a standard logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger("io")

    def write(self, message: str) -> None:
        self.logger.info(message)

    def write_error(self, message: str) -> None:
        self.logger.error(message)

    def is_verbose(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)


class NullIO(IOInterface):
    """IOInterface that discards everything."""

    def write(self, message: str) -> None:
        pass

    def write_error(self, message: str) -> None:
        pass

    def is_verbose(self) -> bool:
        return False
