"""
httpadapter Exception Hierarchy

Exception Hierarchy:
    HttpAdapterError (base)
    ├── TransportError
    │   └── TransportFailure
    ├── RedirectError
    │   └── RedirectLimitExceeded
    ├── ConfigurationError
    │   ├── InvalidConfigurationError
    │   └── ConfigurationValidationError
    └── CLIError
"""

from .base import ExceptionContext, HttpAdapterError
from .cli import CLIError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .redirect import RedirectError, RedirectLimitExceeded
from .templates import ErrorCodes, ErrorMessageTemplates, RecoverySuggestions
from .transport import TransportError, TransportFailure

__all__ = [
    "ExceptionContext",
    "HttpAdapterError",
    "TransportError",
    "TransportFailure",
    "RedirectError",
    "RedirectLimitExceeded",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
    "CLIError",
    "ErrorCodes",
    "ErrorMessageTemplates",
    "RecoverySuggestions",
]
