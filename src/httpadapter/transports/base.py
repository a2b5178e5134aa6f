"""
Transport contract and shared helpers.

A transport wraps one HTTP library and does exactly one thing: send a
prepared request and return a response, or fail with TransportFailure.
Redirects are never followed by the wrapped library; the send pipeline
owns that.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple
from urllib.parse import urlencode

from requests.structures import CaseInsensitiveDict
from urllib3.filepost import encode_multipart_formdata

from ..constants import (
    CONTENT_TYPE_FORM,
    DEFAULT_TIMEOUT_SECONDS,
    HEADER_CONTENT_TYPE,
    METHOD_HEAD,
    SUPPORTED_PROTOCOL_VERSIONS,
)
from ..exceptions import TransportFailure
from ..logging import AdapterLogger
from ..models import Request, Response


class Transport(ABC):
    """Interface every transport backend implements."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Transport identifier, surfaced in failures."""

    @abstractmethod
    def send(self, request: Request) -> Response:
        """Send one request and return one response."""

    def clone_request(self, request: Request) -> Request:
        return request.clone()

    def close(self) -> None:
        pass


class AbstractTransport(Transport):
    """Base class handling timeouts, payload encoding and error wrapping.

    Subclasses narrow ``supported_protocol_versions`` when the wrapped
    library cannot speak every version; such requests fail before anything
    is sent.
    """

    supported_protocol_versions: Tuple[str, ...] = SUPPORTED_PROTOCOL_VERSIONS

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        self.timeout = timeout
        self.logger = AdapterLogger(f"{__name__}.{self.__class__.__name__}")

    def send(self, request: Request) -> Response:
        if request.protocol_version not in self.supported_protocol_versions:
            raise TransportFailure.cannot_fetch_url(
                request.url,
                self.name,
                f"HTTP/{request.protocol_version} is not supported, "
                f"use one of: {', '.join(self.supported_protocol_versions)}",
            )
        try:
            return self._do_send(request)
        except TransportFailure:
            raise
        except Exception as e:
            self.logger.exception(f"Cannot fetch {request.url} with {self.name}: {e}")
            raise TransportFailure.cannot_fetch_url(request.url, self.name, str(e)) from e

    @abstractmethod
    def _do_send(self, request: Request) -> Response:
        """Send ``request`` through the wrapped library."""

    def effective_timeout(self, request: Request) -> float:
        return request.timeout if request.timeout is not None else self.timeout

    def prepare_request(self, request: Request) -> Tuple[CaseInsensitiveDict, bytes]:
        """Return the headers and the encoded body to put on the wire."""
        headers = request.headers.copy()
        body, content_type = self.prepare_body(request)
        if content_type and HEADER_CONTENT_TYPE not in headers:
            headers[HEADER_CONTENT_TYPE] = content_type
        return headers, body

    def prepare_body(self, request: Request) -> Tuple[bytes, Optional[str]]:
        """Encode the request payload.

        A raw body wins over structured data; files switch the encoding to
        multipart/form-data. File values are bytes or
        ``(filename, content[, content_type])`` tuples.
        """
        if request.body:
            return request.body, None
        if request.files:
            fields = {key: str(value) for key, value in request.data.items()}
            fields.update(request.files)
            return encode_multipart_formdata(fields)
        if request.data:
            return urlencode(request.data, doseq=True).encode("utf-8"), CONTENT_TYPE_FORM
        return b"", None

    @staticmethod
    def merge_headers(items: Iterable[Tuple[str, str]]) -> CaseInsensitiveDict:
        """Fold header pairs, joining repeated names with ", " as requests does."""
        headers = CaseInsensitiveDict()
        for name, value in items:
            if name in headers:
                headers[name] = f"{headers[name]}, {value}"
            else:
                headers[name] = value
        return headers

    @staticmethod
    def normalize_body(body: Optional[bytes], method: str) -> bytes:
        """Responses to HEAD never carry a body."""
        if method == METHOD_HEAD or body is None:
            return b""
        return body

    @staticmethod
    def format_protocol_version(version: int) -> str:
        """Turn the 10/11 style version of urllib3 and http.client into '1.0'/'1.1'."""
        return "1.0" if version == 10 else "1.1"

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(timeout={self.timeout})"
