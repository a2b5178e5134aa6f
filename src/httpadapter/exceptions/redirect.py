"""
Redirect-related exceptions.
"""

from .base import ExceptionContext, HttpAdapterError
from .templates import ErrorCodes, ErrorMessageTemplates, RecoverySuggestions


class RedirectError(HttpAdapterError):
    """Base class for redirect-related errors."""


class RedirectLimitExceeded(RedirectError):
    """Raised when a redirect chain needs more hops than allowed.

    The reported URL is always the URL of the root request of the chain,
    not the URL of the last hop.
    """

    def __init__(self, url: str, max_redirects: int, adapter: str):
        self.url = url
        self.max_redirects = max_redirects
        self.adapter = adapter

        message = ErrorMessageTemplates.MAX_REDIRECTS_EXCEEDED.format(
            url=url, adapter=adapter, max_redirects=max_redirects
        )
        suggestions = RecoverySuggestions.for_redirect_limit(max_redirects)
        context = ExceptionContext(
            help_text=suggestions[0],
            error_code=ErrorCodes.MAX_REDIRECTS_EXCEEDED,
            context={"url": url, "max_redirects": max_redirects, "adapter": adapter},
            user_action="; ".join(suggestions[1:]),
        )
        super().__init__(message, context)
