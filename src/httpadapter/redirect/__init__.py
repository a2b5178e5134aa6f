"""
Redirect following.

- policy: is a response a redirect, and what is the next request
- chain: parent linkage and root lookup
- guard: hop cap
- finalizer: redirect_count / effective_url on the terminal response
- stage: the "redirect" pipeline stage composing the above
"""

from .chain import RedirectChainTracker
from .finalizer import ResponseFinalizer
from .guard import LimitDecision, RedirectGuard
from .policy import RedirectPolicy
from .stage import RedirectStage

__all__ = [
    "LimitDecision",
    "RedirectChainTracker",
    "RedirectGuard",
    "RedirectPolicy",
    "RedirectStage",
    "ResponseFinalizer",
]
