"""
Redirect decisions.

Decides whether a response is a redirect and derives the request for the
next hop following RFC 7231 / RFC 7538 semantics.
"""

from typing import Optional, TYPE_CHECKING

from ..constants import (
    HEADER_LOCATION,
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_FOUND,
    HTTP_STATUS_MULTIPLE_CHOICES,
    HTTP_STATUS_SEE_OTHER,
    METHOD_GET,
    PAYLOAD_HEADERS,
)
from ..models import Request, Response
from .chain import RedirectChainTracker

if TYPE_CHECKING:
    from ..transports.base import Transport


class RedirectPolicy:
    """Pure redirect decision engine; performs no I/O.

    In non-strict mode 301 and 302 behave like 303 (the method becomes GET
    and the payload is dropped), which is what browsers do. In strict mode
    only 303 changes the method; 301, 302, 307 and 308 keep it.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def is_redirect(self, response: Response) -> bool:
        return (
            HTTP_STATUS_MULTIPLE_CHOICES <= response.status_code < HTTP_STATUS_BAD_REQUEST
            and response.has_header(HEADER_LOCATION)
        )

    def downgrades_to_get(self, status_code: int, strict: Optional[bool] = None) -> bool:
        """Whether a redirect with ``status_code`` turns the next request into a GET."""
        strict = self.strict if strict is None else strict
        return status_code == HTTP_STATUS_SEE_OTHER or (
            not strict and status_code <= HTTP_STATUS_FOUND
        )

    def build_next_request(
        self,
        original: Request,
        response: Response,
        strict: Optional[bool] = None,
        transport: Optional["Transport"] = None,
    ) -> Request:
        """Derive the request for the hop after ``response``.

        ``original`` is left untouched. The Location header is used as is;
        relative locations are not resolved against the original URL.
        """
        redirect = (
            transport.clone_request(original) if transport is not None else original.clone()
        )
        changes = {"url": response.get_header(HEADER_LOCATION)}

        if self.downgrades_to_get(response.status_code, strict):
            for header in PAYLOAD_HEADERS:
                redirect.headers.pop(header, None)
            changes.update(method=METHOD_GET, body=None, data={}, files={})

        return RedirectChainTracker.link(redirect, original, **changes)
