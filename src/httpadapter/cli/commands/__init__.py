"""CLI commands."""

from .config import config
from .fetch import fetch

__all__ = ["config", "fetch"]
