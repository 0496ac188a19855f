"""Logging Management for the Atlassian Client

The library only emits records through module loggers under the
``atlassian_client`` namespace. Embedding applications that want output call
``LoggingManager.configure``.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional, Union

LIBRARY_LOGGER = "atlassian_client"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Format log record with colors for console output."""
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{self.COLORS['RESET']}"


class LoggingManager:
    """Centralized logging configuration for the library namespace."""

    _loggers: Dict[str, logging.Logger] = {}
    _handlers: list = []

    @classmethod
    def configure(
        cls,
        level: str = "INFO",
        log_file: Optional[Union[str, Path]] = None,
        colored: bool = True,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5
    ) -> logging.Logger:
        """Attach console and optional rotating file handlers.

        Calling it again replaces the handlers installed by a previous call.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional path for a rotating log file
            colored: Whether console output uses ANSI colors
            max_bytes: Rotation size of the log file
            backup_count: Number of rotated files to keep

        Returns:
            The library's root logger
        """
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')

        logger = logging.getLogger(LIBRARY_LOGGER)
        for handler in cls._handlers:
            logger.removeHandler(handler)
            handler.close()
        cls._handlers = []

        logger.setLevel(numeric_level)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_format = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
        if colored:
            console_handler.setFormatter(ColoredFormatter(console_format, datefmt='%H:%M:%S'))
        else:
            console_handler.setFormatter(logging.Formatter(console_format, datefmt='%H:%M:%S'))
        logger.addHandler(console_handler)
        cls._handlers.append(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)
            cls._handlers.append(file_handler)

        return logger

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with the specified name.

        Args:
            name: Logger name (typically __name__ of the module)

        Returns:
            Logger instance
        """
        if name in cls._loggers:
            return cls._loggers[name]

        logger = logging.getLogger(name)
        cls._loggers[name] = logger
        return logger

    @classmethod
    def set_log_level(cls, level: str):
        """Set the logging level of the library logger and its handlers."""
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')

        logger = logging.getLogger(LIBRARY_LOGGER)
        logger.setLevel(numeric_level)
        for handler in cls._handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(numeric_level)
