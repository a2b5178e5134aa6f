"""
Parent linkage of a redirect chain.

Every redirect request points at the request it was derived from; the
root request has no parent. Requests are frozen, so a link can only name a
request that already existed and the chain cannot loop.
"""

from typing import Any, Iterator, List

from ..models import Request


class RedirectChainTracker:
    """Answers questions about the chain a request belongs to."""

    @staticmethod
    def link(request: Request, previous: Request, **changes: Any) -> Request:
        """Return ``request`` attached to ``previous`` as the next hop.

        Extra ``changes`` are applied in the same step. The result is an
        independent copy; ``request`` itself is left untouched.
        """
        return request.with_changes(
            parent_request=previous,
            redirect_count=previous.redirect_count + 1,
            **changes,
        )

    @staticmethod
    def iter_chain(request: Request) -> Iterator[Request]:
        """Yield ``request`` then each predecessor up to the root."""
        yield request
        yield from request.iter_parents()

    def get_root_request(self, request: Request) -> Request:
        """Return the first request of the chain ``request`` belongs to."""
        root = request
        while root.parent_request is not None:
            root = root.parent_request
        return root

    def get_chain(self, request: Request) -> List[Request]:
        """Return the whole chain, root first."""
        chain = list(self.iter_chain(request))
        chain.reverse()
        return chain
