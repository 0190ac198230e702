"""
This module provides utility classes for logging and colored log formatting.
"""

import logging


class LoggerMixin:
    """
    Mixin class to provide a logger instance to child classes.
    """

    _logger: logging.Logger

    def _build_logger(
        self,
        logger: logging.Logger,
    ) -> None:
        """
        Initialize a logger for the class as a child of the provided logger.

        Args:
            logger (logging.Logger): The base logger to use.
        """
        self._logger = logger.getChild(self.__class__.__name__)


class ColorFormatter(logging.Formatter):
    """
    Logging formatter that colors each message by its level.
    """

    COLORS = {
        "DEBUG": "\033[94m",  # Blue
        "INFO": "\033[92m",  # Green
        "WARNING": "\033[93m",  # Yellow
        "ERROR": "\033[91m",  # Red
        "CRITICAL": "\033[95m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        message = super().format(record)
        return f"{color}{message}{self.RESET}"
