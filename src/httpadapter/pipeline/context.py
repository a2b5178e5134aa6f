"""
Mutable context handed to post-send stages.
"""

from typing import Optional, TYPE_CHECKING

from ..logging import AdapterLogger
from ..models import Request, Response

if TYPE_CHECKING:
    from ..transports.base import Transport


class PostSendContext:
    """Bundles the transport, the request sent and the response received.

    A stage may replace ``response`` or ask the pipeline to send another
    request with ``follow()``.
    """

    def __init__(
        self,
        transport: "Transport",
        request: Request,
        response: Response,
        logger: Optional[AdapterLogger] = None,
    ):
        self.transport = transport
        self.request = request
        self.response = response
        self.logger = logger or AdapterLogger(__name__)
        self.next_request: Optional[Request] = None

    def follow(self, request: Request) -> None:
        """Ask the pipeline to send ``request`` instead of returning."""
        self.next_request = request

    @property
    def followed(self) -> bool:
        return self.next_request is not None
