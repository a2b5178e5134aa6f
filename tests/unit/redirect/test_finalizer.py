import pytest

from httpadapter.models import Response
from httpadapter.redirect import ResponseFinalizer


@pytest.mark.unit
class TestResponseFinalizer:
    def test_root_request(self, root_request):
        response = Response(200)

        result = ResponseFinalizer().finalize(root_request, response)

        assert result is response
        assert response.redirect_count == 0
        assert response.effective_url == "http://a/"

    def test_redirected_request(self, build_chain):
        chain = build_chain(3)
        response = Response(200)

        ResponseFinalizer().finalize(chain[-1], response)

        assert response.redirect_count == 3
        assert response.effective_url == "http://host/3"
