"""
Transport backed by httpx.
"""

from typing import Optional

import httpx

from ..constants import DEFAULT_TIMEOUT_SECONDS
from ..models import Request, Response
from .base import AbstractTransport


class HttpxTransport(AbstractTransport):
    """Sends requests through an ``httpx.Client``.

    httpx only speaks HTTP/1.1 and HTTP/2, so HTTP/1.0 requests are refused.
    """

    supported_protocol_versions = ("1.1",)

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        super().__init__(timeout)
        # follow_redirects=False: the send pipeline follows redirects.
        self.client = client or httpx.Client(timeout=timeout, follow_redirects=False)

    @property
    def name(self) -> str:
        return "httpx"

    def _do_send(self, request: Request) -> Response:
        headers, body = self.prepare_request(request)

        self.logger.debug(f"{request.method} {request.url}")

        response = self.client.request(
            request.method,
            request.url,
            headers=dict(headers),
            content=body or None,
            timeout=self.effective_timeout(request),
            follow_redirects=False,
        )

        return Response(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            headers=self.merge_headers(response.headers.multi_items()),
            body=self.normalize_body(response.content, request.method),
            protocol_version=response.http_version.replace("HTTP/", ""),
        )

    def close(self) -> None:
        self.client.close()
