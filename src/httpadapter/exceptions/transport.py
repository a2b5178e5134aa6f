"""
Transport-related exceptions.

Raised by transport adapters when the wrapped HTTP library fails to
complete a request.
"""

from typing import Optional

from .base import ExceptionContext, HttpAdapterError
from .templates import ErrorCodes, ErrorMessageTemplates, RecoverySuggestions


class TransportError(HttpAdapterError):
    """Base class for transport-related errors."""


class TransportFailure(TransportError):
    """Raised when a transport cannot complete a request."""

    def __init__(self, url: str, adapter: str, error: str, details: Optional[str] = None):
        self.url = url
        self.adapter = adapter
        self.error = error

        message = ErrorMessageTemplates.CANNOT_FETCH_URL.format(
            url=url, adapter=adapter, error=error
        )
        suggestions = RecoverySuggestions.for_transport_failure(adapter)
        context = ExceptionContext(
            help_text=suggestions[0],
            error_code=ErrorCodes.TRANSPORT_FAILURE,
            context={"url": url, "adapter": adapter},
            user_action="; ".join(suggestions[1:]),
            technical_details=details,
        )
        super().__init__(message, context)

    @classmethod
    def cannot_fetch_url(cls, url: str, adapter: str, error: str) -> "TransportFailure":
        """Build the failure raised when a URL could not be fetched."""
        return cls(url, adapter, error)
