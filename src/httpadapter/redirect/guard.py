"""
Hop cap enforcement.

The guard never raises: it returns a LimitDecision and leaves it to the
caller to turn an exceeded decision into RedirectLimitExceeded or into a
graceful stop.
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import DEFAULT_MAX_REDIRECTS, DEFAULT_THROW_ON_MAX_REDIRECTS
from ..exceptions import RedirectLimitExceeded
from ..models import Request
from .chain import RedirectChainTracker


@dataclass(frozen=True)
class LimitDecision:
    """Outcome of a limit check for one more hop."""

    exceeded: bool
    next_count: int
    max_redirects: int
    root_url: Optional[str] = None
    adapter: str = ""

    @property
    def should_continue(self) -> bool:
        return not self.exceeded

    def to_exception(self) -> RedirectLimitExceeded:
        if not self.exceeded:
            raise ValueError("Only an exceeded decision can be turned into an error")
        return RedirectLimitExceeded(self.root_url, self.max_redirects, self.adapter)


class RedirectGuard:
    """Bounds the length of a redirect chain."""

    def __init__(
        self,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        throw_exception: bool = DEFAULT_THROW_ON_MAX_REDIRECTS,
        tracker: Optional[RedirectChainTracker] = None,
    ):
        if max_redirects < 0:
            raise ValueError("max_redirects must be greater than or equal to 0")
        self.max_redirects = max_redirects
        self.throw_exception = throw_exception
        self.tracker = tracker or RedirectChainTracker()

    def check_limit(
        self,
        request: Request,
        transport_name: str = "",
        max_redirects: Optional[int] = None,
    ) -> LimitDecision:
        """Check whether following one more redirect from ``request`` is allowed."""
        limit = self.max_redirects if max_redirects is None else max_redirects
        next_count = (request.redirect_count or 0) + 1

        if next_count > limit:
            return LimitDecision(
                exceeded=True,
                next_count=next_count,
                max_redirects=limit,
                root_url=self.tracker.get_root_request(request).url,
                adapter=transport_name,
            )
        return LimitDecision(exceeded=False, next_count=next_count, max_redirects=limit)
