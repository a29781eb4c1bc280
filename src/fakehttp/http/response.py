"""Synthesized HTTP response.

Mirrors the value shape of a real client response (status, version,
headers, body, uri) so code that parses responses cannot tell the
difference.
"""

from __future__ import annotations

import json as json_module
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from fakehttp.http.headers import Headers

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True, slots=True)
class Response:
    """A response produced by a responder. Immutable.

    ``status`` and ``body`` follow the fluent-client naming; ``status_code``
    and ``text`` are provided for httpx/requests-style callers.
    """

    status: int = 200
    version: str = "1.1"
    headers: Headers = field(default_factory=Headers)
    body: str = ""
    uri: str = ""

    # -- Aliases --

    @property
    def status_code(self) -> int:
        return self.status

    @property
    def text(self) -> str:
        """Body as string."""
        return self.body

    @property
    def content(self) -> bytes:
        """Body as bytes."""
        return self.body.encode("utf-8")

    @property
    def content_type(self) -> str | None:
        return self.headers.get("Content-Type")

    @property
    def ok(self) -> bool:
        """True for 2xx and 3xx statuses."""
        return 200 <= self.status < 400

    # -- Body helpers --

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises ``json.JSONDecodeError`` if the body is not JSON.
        """
        return json_module.loads(self.body)

    def to_httpx(self, request: httpx.Request | None = None) -> httpx.Response:
        """Convert to an ``httpx.Response``.

        Pass the originating *request* so ``response.url`` and
        ``raise_for_status()`` work on the result.
        """
        import httpx

        return httpx.Response(
            status_code=self.status,
            headers=list(self.headers.raw),
            content=self.content,
            request=request,
            extensions={"http_version": f"HTTP/{self.version}".encode("ascii")},
        )
