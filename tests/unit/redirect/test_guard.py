import pytest

from httpadapter.exceptions import RedirectLimitExceeded
from httpadapter.redirect import LimitDecision, RedirectGuard


@pytest.mark.unit
class TestRedirectGuard:
    def test_defaults(self):
        guard = RedirectGuard()

        assert guard.max_redirects == 5
        assert guard.throw_exception is True

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            RedirectGuard(max_redirects=-1)

    def test_continue_below_limit(self, build_chain):
        guard = RedirectGuard(max_redirects=2)
        chain = build_chain(1)

        decision = guard.check_limit(chain[-1], "scripted")

        assert decision.should_continue
        assert not decision.exceeded
        assert decision.next_count == 2

    def test_exceeded_at_limit(self, build_chain):
        guard = RedirectGuard(max_redirects=2)
        chain = build_chain(2)

        decision = guard.check_limit(chain[-1], "scripted")

        assert decision.exceeded
        assert decision.next_count == 3
        assert decision.max_redirects == 2
        assert decision.adapter == "scripted"

    def test_exceeded_reports_root_url(self, build_chain):
        chain = build_chain(3)

        decision = RedirectGuard(max_redirects=3).check_limit(chain[-1])

        assert decision.root_url == "http://host/0"

    def test_zero_limit_never_follows(self, root_request):
        decision = RedirectGuard(max_redirects=0).check_limit(root_request)

        assert decision.exceeded
        assert decision.root_url == "http://a/"

    def test_limit_override(self, root_request):
        guard = RedirectGuard(max_redirects=0)

        assert guard.check_limit(root_request, max_redirects=1).should_continue


@pytest.mark.unit
class TestLimitDecision:
    def test_to_exception(self):
        decision = LimitDecision(
            exceeded=True, next_count=3, max_redirects=2, root_url="http://a/", adapter="requests"
        )

        error = decision.to_exception()

        assert isinstance(error, RedirectLimitExceeded)
        assert error.url == "http://a/"
        assert error.max_redirects == 2
        assert error.adapter == "requests"

    def test_continue_decision_cannot_become_error(self):
        decision = LimitDecision(exceeded=False, next_count=1, max_redirects=5)

        with pytest.raises(ValueError):
            decision.to_exception()
