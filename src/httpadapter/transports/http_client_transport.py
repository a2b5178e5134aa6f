"""
Transport backed by the standard library ``http.client``.
"""

import http.client
import ssl

from ..constants import DEFAULT_TIMEOUT_SECONDS
from ..models import Request, Response
from .base import AbstractTransport


class HTTP10Connection(http.client.HTTPConnection):
    """Plain connection writing an HTTP/1.0 request line."""

    _http_vsn = 10
    _http_vsn_str = "HTTP/1.0"


class HTTPS10Connection(http.client.HTTPSConnection):
    """TLS connection writing an HTTP/1.0 request line."""

    _http_vsn = 10
    _http_vsn_str = "HTTP/1.0"


class HttpClientTransport(AbstractTransport):
    """Opens one ``http.client`` connection per request."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS, ssl_context=None):
        super().__init__(timeout)
        self.ssl_context = ssl_context

    @property
    def name(self) -> str:
        return "http_client"

    def _create_connection(self, request: Request) -> http.client.HTTPConnection:
        parsed_url = request.parsed_url
        timeout = self.effective_timeout(request)
        http_10 = request.protocol_version == "1.0"

        if parsed_url.scheme == "https":
            connection_class = HTTPS10Connection if http_10 else http.client.HTTPSConnection
            return connection_class(
                parsed_url.hostname,
                parsed_url.port,
                timeout=timeout,
                context=self.ssl_context or ssl.create_default_context(),
            )
        if parsed_url.scheme == "http":
            connection_class = HTTP10Connection if http_10 else http.client.HTTPConnection
            return connection_class(parsed_url.hostname, parsed_url.port, timeout=timeout)
        raise ValueError(f"Unsupported URL scheme: {parsed_url.scheme!r}")

    def _do_send(self, request: Request) -> Response:
        parsed_url = request.parsed_url
        path = parsed_url.path or "/"
        if parsed_url.query:
            path += "?" + parsed_url.query

        headers, body = self.prepare_request(request)
        conn = self._create_connection(request)

        self.logger.debug(f"{request.method} {request.url}")

        try:
            conn.request(request.method, path, body=body or None, headers=dict(headers))
            response = conn.getresponse()
            content = response.read()

            return Response(
                status_code=response.status,
                reason_phrase=response.reason,
                headers=self.merge_headers(response.getheaders()),
                body=self.normalize_body(content, request.method),
                protocol_version=self.format_protocol_version(response.version),
            )
        finally:
            conn.close()
