"""
Request model shared by every transport.

A Request is frozen: the chain fields (parent_request, redirect_count) are
fixed when the request is built, so a parent can only be a request that
already existed. Redirect steps derive new requests instead of mutating.
"""

import copy
import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional
from urllib.parse import urlparse

from requests.structures import CaseInsensitiveDict

from ..constants import (
    DEFAULT_PROTOCOL_VERSION,
    PARENT_REQUEST,
    REDIRECT_COUNT,
    SUPPORTED_METHODS,
    SUPPORTED_PROTOCOL_VERSIONS,
)
from .parameters import ParameterStore


@dataclass(frozen=True, eq=False)
class Request:
    """Represents one HTTP request of a (possibly redirected) call."""

    method: str
    url: str
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: Optional[bytes] = None
    data: Dict[str, Any] = field(default_factory=dict)
    files: Dict[str, Any] = field(default_factory=dict)
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    timeout: Optional[float] = None
    parameters: ParameterStore = field(default_factory=ParameterStore)
    parent_request: Optional["Request"] = None
    redirect_count: int = 0

    def __post_init__(self):
        method = self.method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method!r}")
        object.__setattr__(self, "method", method)

        # headers and parameters are owned by this request alone
        object.__setattr__(self, "headers", CaseInsensitiveDict(self.headers or {}))
        if isinstance(self.body, str):
            object.__setattr__(self, "body", self.body.encode("utf-8"))
        object.__setattr__(self, "parameters", ParameterStore(self.parameters or {}))

        if self.protocol_version not in SUPPORTED_PROTOCOL_VERSIONS:
            raise ValueError(
                f"Unsupported protocol version {self.protocol_version!r}, "
                f"expected one of {', '.join(SUPPORTED_PROTOCOL_VERSIONS)}"
            )
        if self.redirect_count < 0:
            raise ValueError("redirect_count cannot be negative")
        if self.parent_request is self:
            raise ValueError("A request cannot be its own parent")

    @property
    def parsed_url(self):
        return urlparse(self.url)

    def clone(self) -> "Request":
        """Return a deep copy sharing no mutable state with this request."""
        return self.with_changes()

    def with_changes(self, **changes: Any) -> "Request":
        """Return an independent copy of this request with fields replaced."""
        fields = {"data": copy.deepcopy(self.data), "files": dict(self.files)}
        fields.update(changes)
        return dataclasses.replace(self, **fields)

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Read a parameter; chain keys resolve to the typed chain fields."""
        if key == PARENT_REQUEST:
            return self.parent_request
        if key == REDIRECT_COUNT:
            return self.redirect_count
        return self.parameters.get(key, default)

    def has_parameter(self, key: str) -> bool:
        if key == PARENT_REQUEST:
            return self.parent_request is not None
        if key == REDIRECT_COUNT:
            return True
        return key in self.parameters

    def set_parameter(self, key: str, value: Any) -> None:
        if key in (PARENT_REQUEST, REDIRECT_COUNT):
            raise ValueError(
                f"'{key}' is fixed when the request is built; use with_changes()"
            )
        self.parameters[key] = value

    def iter_parents(self) -> Iterator["Request"]:
        """Yield the predecessors of this request, nearest first."""
        parent = self.parent_request
        while parent is not None:
            yield parent
            parent = parent.parent_request

    def __repr__(self) -> str:
        return (
            f"Request(method={self.method!r}, url={self.url!r}, "
            f"redirect_count={self.redirect_count})"
        )
