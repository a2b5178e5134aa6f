"""Stamps the terminal response with chain-wide metadata."""

from ..models import Request, Response


class ResponseFinalizer:
    """Annotates the response that is handed back to the caller."""

    def finalize(self, request: Request, response: Response) -> Response:
        response.redirect_count = int(request.redirect_count or 0)
        response.effective_url = request.url
        return response
