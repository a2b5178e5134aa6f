"""
Configuration models for httpadapter.

Pydantic-based models providing validation and documentation for the
client configuration, plus environment variable overrides.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_PROTOCOL_VERSION,
    DEFAULT_STRICT_REDIRECTS,
    DEFAULT_THROW_ON_MAX_REDIRECTS,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_TIMEOUT_SECONDS,
    MIN_LOG_FILE_SIZE_BYTES,
    SUPPORTED_PROTOCOL_VERSIONS,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class TransportName(str, Enum):
    """Supported transport backends."""

    REQUESTS = "requests"
    HTTPX = "httpx"
    HTTP_CLIENT = "http_client"


class RedirectConfig(BaseModel):
    """Redirect following configuration."""

    max_redirects: int = Field(
        DEFAULT_MAX_REDIRECTS, ge=0, description="Maximum redirects followed per call"
    )
    strict: bool = Field(
        DEFAULT_STRICT_REDIRECTS,
        description="Only 303 switches the method to GET; 301/302 keep method and body",
    )
    throw_exception: bool = Field(
        DEFAULT_THROW_ON_MAX_REDIRECTS,
        description="Raise when max_redirects is exceeded instead of returning the last response",
    )


class TransportConfig(BaseModel):
    """Transport backend configuration."""

    name: TransportName = Field(TransportName.REQUESTS, description="Transport backend")
    timeout: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        le=MAX_TIMEOUT_SECONDS,
        description="Per-hop timeout in seconds",
    )
    protocol_version: str = Field(
        DEFAULT_PROTOCOL_VERSION, description="HTTP protocol version of new requests"
    )

    @field_validator("protocol_version")
    @classmethod
    def validate_protocol_version(cls, v: str) -> str:
        if v not in SUPPORTED_PROTOCOL_VERSIONS:
            raise ValueError(
                f"protocol_version must be one of: {', '.join(SUPPORTED_PROTOCOL_VERSIONS)}"
            )
        return v


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class AdapterConfig(BaseModel):
    """Main httpadapter configuration model."""

    transport: TransportConfig = Field(default_factory=TransportConfig)
    redirect: RedirectConfig = Field(default_factory=RedirectConfig)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class AdapterSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    httpadapter_transport: Optional[str] = Field(None, alias="HTTPADAPTER_TRANSPORT")
    httpadapter_timeout: Optional[float] = Field(None, alias="HTTPADAPTER_TIMEOUT")
    httpadapter_protocol_version: Optional[str] = Field(
        None, alias="HTTPADAPTER_PROTOCOL_VERSION"
    )
    httpadapter_max_redirects: Optional[int] = Field(
        None, alias="HTTPADAPTER_MAX_REDIRECTS"
    )
    httpadapter_strict: Optional[bool] = Field(None, alias="HTTPADAPTER_STRICT")
    httpadapter_throw_exception: Optional[bool] = Field(
        None, alias="HTTPADAPTER_THROW_EXCEPTION"
    )
    httpadapter_log_level: Optional[str] = Field(None, alias="HTTPADAPTER_LOG_LEVEL")
    httpadapter_log_format: Optional[str] = Field(None, alias="HTTPADAPTER_LOG_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
