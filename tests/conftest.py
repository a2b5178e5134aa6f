"""
Pytest configuration and shared fixtures for httpadapter tests.
"""

import pytest

from fixtures.transports import ScriptedTransport, chain_routes
from httpadapter.models import Request


@pytest.fixture
def root_request():
    """A plain GET with no predecessor."""
    return Request("GET", "http://a/")


@pytest.fixture
def post_request():
    """A POST carrying a body and payload headers."""
    return Request(
        "POST",
        "http://a/",
        headers={"Content-Type": "text/plain", "Content-Length": "1", "X-Trace": "t1"},
        body=b"x",
    )


@pytest.fixture
def scripted_transport():
    """Factory building a ScriptedTransport from a route table."""
    def _build(routes=None, name="scripted"):
        return ScriptedTransport(routes, name)
    return _build


@pytest.fixture
def chain_transport():
    """Factory building a transport serving a redirect chain over ``urls``."""
    def _build(urls, status_code=302, final_status=200, name="scripted"):
        return ScriptedTransport(chain_routes(urls, status_code, final_status), name)
    return _build


@pytest.fixture
def build_chain():
    """Factory linking ``depth`` requests behind a root request."""
    def _build(depth, root=None):
        current = root or Request("GET", "http://host/0")
        requests_built = [current]
        for hop in range(1, depth + 1):
            current = current.with_changes(
                url=f"http://host/{hop}",
                parent_request=current,
                redirect_count=current.redirect_count + 1,
            )
            requests_built.append(current)
        return requests_built
    return _build


# Pytest hooks
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Tests running against a local HTTP server")
