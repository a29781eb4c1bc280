"""Fluent client interface shared by the fake and its branches.

Every configuration call returns a *branch*: a new client with the extra
options layered on top, sharing the same routes and request log. Every
verb call funnels into ``request(verb, uri, ...)``::

    client.headers({"X-Trace": "1"}).bearer_auth("t0k3n").get("/users/5")
"""

import base64
from collections.abc import Mapping
from typing import Any, Self

from fakehttp._internal.types import Options
from fakehttp.http.response import Response
from fakehttp.verbs import Verb


class Chainable:
    """Mixin providing the verb and configuration methods.

    Subclasses supply ``options``, ``branch()`` and ``request()``.
    """

    __slots__ = ()

    @property
    def options(self) -> Mapping[str, Any]:
        raise NotImplementedError

    def branch(self, options: Options) -> "Chainable":
        raise NotImplementedError

    def request(
        self, verb: str, uri: object, options: Options | None = None, **kwargs: Any
    ) -> Response:
        raise NotImplementedError

    # -- Verbs --

    def get(self, uri: object, **options: Any) -> Response:
        """Send a GET request."""
        return self.request(Verb.GET, uri, **options)

    def post(self, uri: object, **options: Any) -> Response:
        """Send a POST request."""
        return self.request(Verb.POST, uri, **options)

    def put(self, uri: object, **options: Any) -> Response:
        """Send a PUT request."""
        return self.request(Verb.PUT, uri, **options)

    def patch(self, uri: object, **options: Any) -> Response:
        """Send a PATCH request."""
        return self.request(Verb.PATCH, uri, **options)

    def delete(self, uri: object, **options: Any) -> Response:
        """Send a DELETE request."""
        return self.request(Verb.DELETE, uri, **options)

    # -- Configuration branches --

    def with_options(self, **options: Any) -> "Chainable":
        """Branch with arbitrary extra options (shallow-merged)."""
        return self.branch(options)

    def headers(self, headers: Mapping[str, str] | None = None, **extra: str) -> "Chainable":
        """Branch with extra headers, added to any already accumulated."""
        merged = {**self.options.get("headers", {}), **(headers or {}), **extra}
        return self.branch({"headers": merged})

    def accept(self, mime_type: str) -> "Chainable":
        return self.headers({"Accept": mime_type})

    def auth(self, value: str) -> "Chainable":
        """Branch with a raw ``Authorization`` header."""
        return self.headers({"Authorization": value})

    def basic_auth(self, *, user: str, password: str) -> "Chainable":
        token = base64.b64encode(f"{user}:{password}".encode()).decode("ascii")
        return self.auth(f"Basic {token}")

    def bearer_auth(self, token: str) -> "Chainable":
        return self.auth(f"Bearer {token}")

    def cookies(self, cookies: Mapping[str, str]) -> "Chainable":
        merged = {**self.options.get("cookies", {}), **cookies}
        return self.branch({"cookies": merged})

    def timeout(self, seconds: float) -> "Chainable":
        """Recorded in the options only; the fake never waits."""
        return self.branch({"timeout": seconds})

    def follow(self, enabled: bool = True) -> "Chainable":
        """Recorded in the options only; the fake never redirects."""
        return self.branch({"follow": enabled})

    # -- Lifecycle --

    def close(self) -> None:
        """No-op. Present so the fake can stand in for a real client."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
