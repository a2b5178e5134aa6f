"""
Pipeline stages.

A stage sees every request before the transport sends it and every
response after. Stages are composed as an ordered list when the client is
built.
"""

from ..models import Request
from .context import PostSendContext


class Stage:
    """Base class for pipeline stages."""

    name = "stage"

    def pre_send(self, request: Request) -> Request:
        """Process the request before it's sent."""
        return request

    def post_send(self, context: PostSendContext) -> None:
        """Process the response after it's received."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class LoggingStage(Stage):
    """Logs every hop of a call."""

    name = "logging"

    def post_send(self, context: PostSendContext) -> None:
        request, response = context.request, context.response
        context.logger.debug(
            f"{request.method} {request.url} -> {response.status_code} {response.reason_phrase}".rstrip(),
            method=request.method,
            url=request.url,
            transport=context.transport.name,
            redirect_count=request.redirect_count,
            status_code=response.status_code,
        )
