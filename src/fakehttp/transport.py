"""httpx transport adapter.

Lets code that builds its own ``httpx.Client`` be served by a fake::

    http = FakeHTTP(routes)
    with httpx.Client(transport=http.transport(), base_url="https://api.test") as client:
        client.get("/users/5")

    http.requests["/users/5"]["get"][0]["headers"]["accept"]   # "*/*"

Logged options are ``headers`` (lowercased names, as httpx stores them),
``params``, ``content`` (bytes) and, for JSON request bodies that decode,
``json``.
"""

import contextlib
import json
from typing import TYPE_CHECKING, Any

import httpx

from fakehttp.http.response import Response

if TYPE_CHECKING:
    from fakehttp.client import FakeClient


class FakeTransport(httpx.BaseTransport, httpx.AsyncBaseTransport):
    """Route httpx requests through a fake client's registry.

    Works for both ``httpx.Client`` and ``httpx.AsyncClient``. Unmatched
    routes raise ``UnmatchedRouteError`` straight out of the httpx call.
    """

    def __init__(self, client: "FakeClient") -> None:
        self.client = client

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.read()
        return self._dispatch(request).to_httpx(request)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        return self._dispatch(request).to_httpx(request)

    def _dispatch(self, request: httpx.Request) -> Response:
        return self.client.request(request.method, str(request.url), request_options(request))


def request_options(request: httpx.Request) -> dict[str, Any]:
    """Translate an httpx request into the options dict the log records."""
    options: dict[str, Any] = {
        "headers": dict(request.headers),
        "params": dict(request.url.params),
        "content": request.content,
    }
    content_type = request.headers.get("content-type", "")
    if request.content and content_type.startswith("application/json"):
        # malformed bodies stay available as raw ``content``
        with contextlib.suppress(ValueError):
            options["json"] = json.loads(request.content)
    return options
