"""
Response model shared by every transport.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from requests.structures import CaseInsensitiveDict

from ..constants import (
    DEFAULT_PROTOCOL_VERSION,
    EFFECTIVE_URL,
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_MULTIPLE_CHOICES,
    REDIRECT_COUNT,
)
from .parameters import ParameterStore


@dataclass(eq=False)
class Response:
    """Represents an HTTP response returned by a transport.

    redirect_count and effective_url are filled in once, on the response
    handed back to the caller.
    """

    status_code: int
    reason_phrase: str = ""
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: bytes = b""
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    parameters: ParameterStore = field(default_factory=ParameterStore)
    redirect_count: int = 0
    effective_url: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.headers, CaseInsensitiveDict):
            self.headers = CaseInsensitiveDict(self.headers or {})
        if self.body is None:
            self.body = b""
        if not isinstance(self.parameters, ParameterStore):
            self.parameters = ParameterStore(self.parameters or {})

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.status_code < 300

    @property
    def is_redirect_status(self) -> bool:
        return HTTP_STATUS_MULTIPLE_CHOICES <= self.status_code < HTTP_STATUS_BAD_REQUEST

    @property
    def text(self) -> str:
        """Get response body as text."""
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse response body as JSON."""
        return json.loads(self.body)

    def has_header(self, name: str) -> bool:
        return name in self.headers

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name, default)

    def get_parameter(self, key: str, default: Any = None) -> Any:
        if key == REDIRECT_COUNT:
            return self.redirect_count
        if key == EFFECTIVE_URL:
            return self.effective_url
        return self.parameters.get(key, default)

    def set_parameter(self, key: str, value: Any) -> None:
        if key == REDIRECT_COUNT:
            self.redirect_count = int(value)
        elif key == EFFECTIVE_URL:
            self.effective_url = value
        else:
            self.parameters[key] = value
