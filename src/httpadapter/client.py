"""
HTTP client facade.

Builds requests, composes the stage list around a transport and exposes
the usual verb helpers. Every call returns a response annotated with
redirect_count and effective_url.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from .config.models import AdapterConfig
from .constants import (
    METHOD_DELETE,
    METHOD_GET,
    METHOD_HEAD,
    METHOD_OPTIONS,
    METHOD_PATCH,
    METHOD_POST,
    METHOD_PUT,
)
from .logging import AdapterLogger
from .models import Request, Response
from .pipeline import LoggingStage, SendPipeline, Stage
from .redirect import RedirectStage
from .transports import Transport, create_transport

Body = Union[bytes, str, None]


class HttpAdapter:
    """HTTP client running one transport behind the send pipeline.

    Usage:
        with HttpAdapter() as client:
            response = client.get("https://example.com/")
            print(response.status_code, response.effective_url)

    Args:
        transport: Transport backend; built from ``config.transport`` if omitted
        config: Client configuration; defaults apply if omitted
        stages: Extra stages run before the built-in logging and redirect stages
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        config: Optional[AdapterConfig] = None,
        stages: Optional[Iterable[Stage]] = None,
    ):
        self.config = config or AdapterConfig()
        self.transport = transport or create_transport(
            self.config.transport.name.value, timeout=self.config.transport.timeout
        )
        self.logger = AdapterLogger(f"{__name__}.{self.__class__.__name__}")

        pipeline_stages: List[Stage] = list(stages or [])
        pipeline_stages.append(LoggingStage())
        pipeline_stages.append(RedirectStage.from_config(self.config.redirect))
        self.pipeline = SendPipeline(self.transport, pipeline_stages)

    @property
    def redirect_stage(self) -> RedirectStage:
        return self.pipeline.get_stage(RedirectStage.name)

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Body = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        protocol_version: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Response:
        """Build a request and send it through the pipeline."""
        request = Request(
            method=method,
            url=url,
            headers=headers or {},
            body=body,
            data=data or {},
            files=files or {},
            protocol_version=protocol_version or self.config.transport.protocol_version,
            timeout=timeout,
        )
        return self.send_request(request)

    def send_request(self, request: Request) -> Response:
        self.logger.debug(f"Sending {request.method} {request.url} via {self.transport.name}")
        return self.pipeline.send(request)

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs) -> Response:
        return self.send(METHOD_GET, url, headers, **kwargs)

    def head(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs) -> Response:
        return self.send(METHOD_HEAD, url, headers, **kwargs)

    def options(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs) -> Response:
        return self.send(METHOD_OPTIONS, url, headers, **kwargs)

    def delete(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs) -> Response:
        return self.send(METHOD_DELETE, url, headers, **kwargs)

    def post(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Body = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> Response:
        return self.send(METHOD_POST, url, headers, body, data, files, **kwargs)

    def put(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Body = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> Response:
        return self.send(METHOD_PUT, url, headers, body, data, files, **kwargs)

    def patch(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Body = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> Response:
        return self.send(METHOD_PATCH, url, headers, body, data, files, **kwargs)

    def close(self) -> None:
        """Close the transport."""
        self.transport.close()

    def __enter__(self) -> "HttpAdapter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
