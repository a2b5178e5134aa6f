"""
Configuration manager for httpadapter.

Loads the TOML configuration file, applies HTTPADAPTER_* environment
overrides and validates the result.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError

from ..exceptions import ConfigurationError, ConfigurationValidationError
from ..logging import LoggingConfig
from .models import AdapterConfig, AdapterSettings

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "httpadapter" / "config.toml"


class ConfigManager:
    """Loads, validates and saves the client configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to custom config file. If None, uses default location.
        """
        self.config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
        self._config: Optional[AdapterConfig] = None

    def load_config(self) -> AdapterConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = AdapterConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            ) from e

        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationValidationError(
                [f"Invalid TOML syntax in {self.config_file}: {e}"]
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {self.config_file}: {e}"
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = AdapterSettings()

        transport = config_data.setdefault("transport", {})
        redirect = config_data.setdefault("redirect", {})
        logging_section = config_data.setdefault("logging", {})

        if settings.httpadapter_transport:
            transport["name"] = settings.httpadapter_transport
        if settings.httpadapter_timeout is not None:
            transport["timeout"] = settings.httpadapter_timeout
        if settings.httpadapter_protocol_version:
            transport["protocol_version"] = settings.httpadapter_protocol_version
        if settings.httpadapter_max_redirects is not None:
            redirect["max_redirects"] = settings.httpadapter_max_redirects
        if settings.httpadapter_strict is not None:
            redirect["strict"] = settings.httpadapter_strict
        if settings.httpadapter_throw_exception is not None:
            redirect["throw_exception"] = settings.httpadapter_throw_exception
        if settings.httpadapter_log_level:
            logging_section["level"] = settings.httpadapter_log_level.upper()
        if settings.httpadapter_log_format:
            logging_section["format"] = settings.httpadapter_log_format

        return config_data

    def save_config(self, config: Optional[AdapterConfig] = None) -> Path:
        """Save configuration to the TOML file and return its path."""
        if config is None:
            config = self.load_config()

        data = config.model_dump(mode="json", exclude_none=True)
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "wb") as f:
            tomli_w.dump(data, f)

        self._config = config
        return self.config_file

    def logging_config(self) -> LoggingConfig:
        """Translate the logging section into a LoggingConfig."""
        settings = self.load_config().logging
        return LoggingConfig(
            level=settings.level.value,
            format_type=settings.format,
            output=list(settings.output),
            file_path=settings.file_path,
            max_file_size=settings.max_file_size,
            backup_count=settings.backup_count,
        )
