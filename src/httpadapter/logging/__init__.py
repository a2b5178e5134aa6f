"""
httpadapter logging package

- config: logging configuration
- formatters: JSON, console and rich output
- loggers: AdapterLogger with correlation IDs
- manager: centralized setup
"""

from .config import LoggingConfig
from .formatters import StructuredFormatter
from .loggers import AdapterLogger
from .manager import LoggingManager, configure_logging, logging_manager

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "AdapterLogger",
    "StructuredFormatter",
    "configure_logging",
    "logging_manager",
]
