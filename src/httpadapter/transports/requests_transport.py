"""
Transport backed by requests.
"""

from typing import Optional

import requests

from ..constants import DEFAULT_TIMEOUT_SECONDS
from ..models import Request, Response
from .base import AbstractTransport


class RequestsTransport(AbstractTransport):
    """Sends requests through a ``requests.Session``.

    urllib3 always writes an HTTP/1.1 request line, so HTTP/1.0 requests
    are refused.
    """

    supported_protocol_versions = ("1.1",)

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        super().__init__(timeout)
        self.session = session or requests.Session()

    @property
    def name(self) -> str:
        return "requests"

    def _do_send(self, request: Request) -> Response:
        headers, body = self.prepare_request(request)

        self.logger.debug(f"{request.method} {request.url}")

        response = self.session.request(
            request.method,
            request.url,
            headers=dict(headers),
            data=body or None,
            timeout=self.effective_timeout(request),
            allow_redirects=False,
        )

        raw_version = getattr(response.raw, "version", 11)
        return Response(
            status_code=response.status_code,
            reason_phrase=response.reason or "",
            headers=response.headers.copy(),
            body=self.normalize_body(response.content, request.method),
            protocol_version=self.format_protocol_version(raw_version),
        )

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()
