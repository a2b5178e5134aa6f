"""
Centralized logging configuration.

The LoggingManager singleton owns the handlers it installs on the
``httpadapter`` logger and nothing else.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from ..constants import DEFAULT_LOG_FILE, SERVICE_NAME
from .config import LoggingConfig
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler


class LoggingManager:
    """Installs and swaps the package's log handlers.

    Reconfiguring replaces only the handlers a previous ``configure()``
    installed; handlers added by the host application are left alone.
    """

    _instance = None
    config: Optional[LoggingConfig]
    handlers: List[logging.Handler]

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.config = None
            instance.handlers = []
            cls._instance = instance
        return cls._instance

    def configure(self, config: LoggingConfig):
        """Install one handler per configured output."""
        self.reset()
        self.config = config

        package_logger = logging.getLogger(SERVICE_NAME)
        package_logger.setLevel(config.level)
        for output in config.output:
            handler = self._build_handler(output, config)
            handler.setLevel(config.level)
            package_logger.addHandler(handler)
            self.handlers.append(handler)

    def reset(self):
        """Remove and close every handler this manager installed."""
        package_logger = logging.getLogger(SERVICE_NAME)
        for handler in self.handlers:
            package_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    def _build_handler(self, output: str, config: LoggingConfig) -> logging.Handler:
        if output == "file":
            return self._build_file_handler(config)
        if output != "console":
            raise ValueError(f"Unknown log output: {output!r}")
        if config.format_type == "rich":
            return create_rich_handler()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._formatter_for(config))
        return handler

    def _build_file_handler(self, config: LoggingConfig) -> logging.Handler:
        path = config.file_path or Path(DEFAULT_LOG_FILE)
        path.parent.mkdir(parents=True, exist_ok=True)

        handler = RotatingFileHandler(
            path, maxBytes=config.max_file_size, backupCount=config.backup_count
        )
        # rich markup has no place in a file; it falls back to the console layout
        handler.setFormatter(self._formatter_for(config))
        return handler

    @staticmethod
    def _formatter_for(config: LoggingConfig) -> logging.Formatter:
        if config.format_type == "json":
            return StructuredFormatter(config.service_name, config.version)
        return create_console_formatter()


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
