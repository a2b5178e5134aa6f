"""
Transport backends.

Each backend wraps one HTTP library behind the Transport contract.
"""

from typing import Callable, Dict, List

from ..exceptions import InvalidConfigurationError
from .base import AbstractTransport, Transport
from .http_client_transport import HttpClientTransport
from .httpx_transport import HttpxTransport
from .requests_transport import RequestsTransport

TRANSPORTS: Dict[str, Callable[..., Transport]] = {
    "requests": RequestsTransport,
    "httpx": HttpxTransport,
    "http_client": HttpClientTransport,
}


def available_transports() -> List[str]:
    return sorted(TRANSPORTS)


def create_transport(name: str, **kwargs) -> Transport:
    """Build the transport registered under ``name``."""
    try:
        factory = TRANSPORTS[name]
    except KeyError:
        raise InvalidConfigurationError(
            "transport.name", name, f"one of {', '.join(available_transports())}"
        ) from None
    return factory(**kwargs)


__all__ = [
    "AbstractTransport",
    "HttpClientTransport",
    "HttpxTransport",
    "RequestsTransport",
    "Transport",
    "TRANSPORTS",
    "available_transports",
    "create_transport",
]
