"""
httpadapter: one request/response contract over several HTTP libraries.

Architecture Overview:
- models: Request, Response and their per-message parameter store
- transports: backends wrapping requests, httpx and http.client
- pipeline: ordered pre/post-send stages around one transport
- redirect: redirect policy, chain tracking, hop cap and finalization
- client: the HttpAdapter facade
- config, logging, exceptions, cli: cross-cutting concerns
"""

__version__ = "0.1.0"

from .client import HttpAdapter
from .config import AdapterConfig, RedirectConfig, TransportConfig
from .exceptions import HttpAdapterError, RedirectLimitExceeded, TransportFailure
from .models import ParameterStore, Request, Response
from .pipeline import SendPipeline, Stage
from .redirect import RedirectStage
from .transports import Transport, create_transport

__all__ = [
    "__version__",
    "AdapterConfig",
    "HttpAdapter",
    "HttpAdapterError",
    "ParameterStore",
    "RedirectConfig",
    "RedirectLimitExceeded",
    "RedirectStage",
    "Request",
    "Response",
    "SendPipeline",
    "Stage",
    "Transport",
    "TransportConfig",
    "TransportFailure",
    "create_transport",
]
