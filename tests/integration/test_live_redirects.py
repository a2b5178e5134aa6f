"""
End-to-end redirect following against a local HTTP server, once per transport.
"""

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from httpadapter import HttpAdapter
from httpadapter.config import AdapterConfig
from httpadapter.exceptions import RedirectLimitExceeded, TransportFailure
from httpadapter.transports import available_transports


class RedirectingHandler(BaseHTTPRequestHandler):
    """Serves /redirect/<status>/<hops> chains ending at /echo."""

    def _handle(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        parts = self.path.strip("/").split("/")

        if parts[0] == "redirect":
            status, hops = int(parts[1]), int(parts[2])
            target = "/echo" if hops <= 1 else f"/redirect/{status}/{hops - 1}"
            self.send_response(status)
            self.send_header("Location", f"http://{self.server.authority}{target}")
            self.send_header("Content-Length", "0")
            self.end_headers()
            return

        if parts[0] == "version":
            payload = self.request_version.encode("ascii")
            self.send_response(200)
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)
            return

        if parts[0] == "repeated":
            self.send_response(200)
            self.send_header("X-A", "one")
            self.send_header("X-A", "two")
            self.send_header("Content-Length", "0")
            self.end_headers()
            return

        if parts[0] == "loop":
            self.send_response(302)
            self.send_header("Location", f"http://{self.server.authority}/loop")
            self.send_header("Content-Length", "0")
            self.end_headers()
            return

        payload = json.dumps(
            {
                "method": self.command,
                "body": body.decode("utf-8"),
                "content_type": self.headers.get("Content-Type"),
            }
        ).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(payload)

    do_GET = do_POST = do_PUT = do_HEAD = do_DELETE = _handle

    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="module")
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), RedirectingHandler)
    httpd.authority = f"127.0.0.1:{httpd.server_address[1]}"
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://{httpd.authority}"
    httpd.shutdown()
    httpd.server_close()


@pytest.fixture(params=available_transports())
def client(request):
    config = AdapterConfig(transport={"name": request.param, "timeout": 5})
    with HttpAdapter(config=config) as adapter:
        yield adapter


@pytest.mark.integration
class TestLiveRedirects:
    def test_chain_is_followed(self, client, server):
        response = client.get(f"{server}/redirect/302/3")

        assert response.status_code == 200
        assert response.redirect_count == 3
        assert response.effective_url == f"{server}/echo"
        assert response.json()["method"] == "GET"

    def test_post_downgraded_on_302(self, client, server):
        response = client.post(f"{server}/redirect/302/1", data={"a": "1"})

        assert response.json() == {"method": "GET", "body": "", "content_type": None}

    def test_post_kept_on_307(self, client, server):
        response = client.post(f"{server}/redirect/307/1", data={"a": "1"})

        assert response.json() == {
            "method": "POST",
            "body": "a=1",
            "content_type": "application/x-www-form-urlencoded",
        }

    def test_head_has_no_body(self, client, server):
        response = client.head(f"{server}/redirect/307/1")

        assert response.status_code == 200
        assert response.body == b""
        assert response.redirect_count == 1

    def test_redirect_loop(self, client, server):
        with pytest.raises(RedirectLimitExceeded) as exc_info:
            client.get(f"{server}/loop")

        assert exc_info.value.url == f"{server}/loop"
        assert exc_info.value.max_redirects == 5
        assert exc_info.value.adapter == client.transport.name


@pytest.mark.integration
class TestLiveTransportContract:
    def test_repeated_headers_are_joined(self, client, server):
        response = client.get(f"{server}/repeated")

        assert response.get_header("X-A") == "one, two"

    def test_default_protocol_version(self, client, server):
        assert client.get(f"{server}/version").body == b"HTTP/1.1"

    def test_http_10_is_sent_or_refused(self, client, server):
        if "1.0" in client.transport.supported_protocol_versions:
            response = client.get(f"{server}/version", protocol_version="1.0")

            assert response.body == b"HTTP/1.0"
        else:
            with pytest.raises(TransportFailure, match="HTTP/1.0 is not supported"):
                client.get(f"{server}/version", protocol_version="1.0")


@pytest.mark.integration
def test_connection_refused():
    # port 9 (discard) is closed on CI hosts
    with HttpAdapter(config=AdapterConfig(transport={"timeout": 2})) as client:
        with pytest.raises(TransportFailure) as exc_info:
            client.get("http://127.0.0.1:9/")

    assert exc_info.value.adapter == "requests"
