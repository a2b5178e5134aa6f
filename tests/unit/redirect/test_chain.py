import pytest

from httpadapter.models import Request
from httpadapter.redirect import RedirectChainTracker


@pytest.fixture
def tracker():
    return RedirectChainTracker()


@pytest.mark.unit
class TestRedirectChainTracker:
    def test_root_of_root_is_itself(self, tracker, root_request):
        assert tracker.get_root_request(root_request) is root_request

    @pytest.mark.parametrize("depth", [1, 2, 5, 20])
    def test_root_lookup_any_depth(self, tracker, build_chain, depth):
        chain = build_chain(depth)

        assert tracker.get_root_request(chain[-1]) is chain[0]

    def test_get_chain_is_root_first(self, tracker, build_chain):
        chain = build_chain(3)

        assert tracker.get_chain(chain[-1]) == chain

    def test_iter_chain_starts_with_request(self, tracker, build_chain):
        chain = build_chain(2)

        assert list(tracker.iter_chain(chain[-1])) == [chain[2], chain[1], chain[0]]

    def test_link(self, root_request):
        next_request = Request("GET", "http://b/")

        linked = RedirectChainTracker.link(next_request, root_request)

        assert linked.parent_request is root_request
        assert linked.redirect_count == 1
        assert next_request.parent_request is None

    def test_link_shares_no_mutable_state(self, root_request):
        next_request = Request("GET", "http://b/", headers={"X-Trace": "t1"})
        next_request.parameters["trace"] = "abc"

        linked = RedirectChainTracker.link(next_request, root_request)
        linked.headers["X-Trace"] = "t2"
        linked.parameters["trace"] = "changed"

        assert linked.parameters is not next_request.parameters
        assert next_request.headers["X-Trace"] == "t1"
        assert next_request.parameters["trace"] == "abc"

    def test_link_applies_changes(self, root_request):
        linked = RedirectChainTracker.link(
            root_request.clone(), root_request, url="http://b/", method="HEAD"
        )

        assert linked.url == "http://b/"
        assert linked.method == "HEAD"
        assert linked.redirect_count == 1
