"""
Send orchestration.

Drives the transport in a loop: every hop runs the pre-send stages, one
transport round-trip, then the post-send stages. The loop ends when no
stage asks to follow another request.
"""

from typing import Iterable, List, Optional

from ..exceptions import HttpAdapterError, TransportFailure
from ..logging import AdapterLogger
from ..models import Request, Response
from ..transports.base import Transport
from .context import PostSendContext
from .stages import Stage


class SendPipeline:
    """Sends a request through a transport and an ordered list of stages."""

    def __init__(self, transport: Transport, stages: Optional[Iterable[Stage]] = None):
        self.transport = transport
        self.stages: List[Stage] = list(stages or [])

        names = [stage.name for stage in self.stages]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate stage names: {', '.join(duplicates)}")

    def get_stage(self, name: str) -> Optional[Stage]:
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def send(self, request: Request) -> Response:
        """Send ``request`` and return the terminal response of the call.

        Raises:
            TransportFailure: the transport could not complete a hop
            RedirectLimitExceeded: the redirect stage hit its cap
        """
        logger = AdapterLogger(__name__)
        current = request

        while True:
            for stage in self.stages:
                current = stage.pre_send(current)

            response = self._send_once(current, logger)

            context = PostSendContext(self.transport, current, response, logger)
            for stage in self.stages:
                stage.post_send(context)

            if not context.followed:
                return context.response

            logger.debug(
                f"Following {response.status_code} to {context.next_request.url}",
                redirect_count=context.next_request.redirect_count,
            )
            current = context.next_request

    def _send_once(self, request: Request, logger: AdapterLogger) -> Response:
        try:
            return self.transport.send(request)
        except HttpAdapterError:
            raise
        except Exception as e:
            logger.error(
                f"Transport {self.transport.name} failed for {request.url}: {e}"
            )
            raise TransportFailure.cannot_fetch_url(
                request.url, self.transport.name, str(e)
            ) from e
