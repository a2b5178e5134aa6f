"""Configuration models and loading."""

from .manager import ConfigManager
from .models import (
    AdapterConfig,
    AdapterSettings,
    LoggingSettings,
    LogLevel,
    RedirectConfig,
    TransportConfig,
    TransportName,
)

__all__ = [
    "AdapterConfig",
    "AdapterSettings",
    "ConfigManager",
    "LogLevel",
    "LoggingSettings",
    "RedirectConfig",
    "TransportConfig",
    "TransportName",
]
