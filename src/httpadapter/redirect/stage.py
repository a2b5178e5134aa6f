"""
Redirect following as a post-send stage.

For every response: stop and finalize when it is not a redirect, check the
hop cap when it is, and otherwise derive the next request and ask the
pipeline to follow it.
"""

from typing import TYPE_CHECKING

from ..constants import (
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_STRICT_REDIRECTS,
    DEFAULT_THROW_ON_MAX_REDIRECTS,
)
from ..pipeline.context import PostSendContext
from ..pipeline.stages import Stage
from .chain import RedirectChainTracker
from .finalizer import ResponseFinalizer
from .guard import RedirectGuard
from .policy import RedirectPolicy

if TYPE_CHECKING:
    from ..config.models import RedirectConfig


class RedirectStage(Stage):
    """Follows redirects up to ``max_redirects`` hops.

    Args:
        max_redirects: Maximum number of hops followed for one call
        strict: Follow RFC 7231 strictly (only 303 switches to GET)
        throw_exception: Raise RedirectLimitExceeded when the cap is hit;
            when False the last response is returned instead
    """

    name = "redirect"

    def __init__(
        self,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        strict: bool = DEFAULT_STRICT_REDIRECTS,
        throw_exception: bool = DEFAULT_THROW_ON_MAX_REDIRECTS,
    ):
        self.tracker = RedirectChainTracker()
        self.policy = RedirectPolicy(strict)
        self.guard = RedirectGuard(max_redirects, throw_exception, self.tracker)
        self.finalizer = ResponseFinalizer()

    @classmethod
    def from_config(cls, config: "RedirectConfig") -> "RedirectStage":
        return cls(config.max_redirects, config.strict, config.throw_exception)

    @property
    def max_redirects(self) -> int:
        return self.guard.max_redirects

    @property
    def strict(self) -> bool:
        return self.policy.strict

    @property
    def throw_exception(self) -> bool:
        return self.guard.throw_exception

    def post_send(self, context: PostSendContext) -> None:
        request, response = context.request, context.response

        if not self.policy.is_redirect(response):
            self.finalizer.finalize(request, response)
            return

        decision = self.guard.check_limit(request, context.transport.name)
        if decision.exceeded:
            if self.throw_exception:
                context.logger.error(
                    f"Max redirects ({decision.max_redirects}) exceeded for {decision.root_url}",
                    transport=decision.adapter,
                )
                raise decision.to_exception()

            context.logger.warning(
                f"Max redirects ({decision.max_redirects}) reached, returning {response.status_code} from {request.url}"
            )
            self.finalizer.finalize(request, response)
            return

        context.follow(
            self.policy.build_next_request(request, response, transport=context.transport)
        )
