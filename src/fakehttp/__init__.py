"""fakehttp: a route-matching test double for fluent HTTP clients.

Stub routes, inject the fake where a real client would go, and assert on
what was requested. No network I/O ever happens.

Basic usage::

    from fakehttp import FakeHTTP

    def routes(registry):
        @registry.get("/users/:id")
        def show(params):
            return {"id": params["id"]}

        @registry.post("/users")
        def create(params, options, response):
            response.set_status(201)
            return {"id": 1, **options["json"]}

    http = FakeHTTP(routes)
    http.headers({"X-Trace": "1"}).get("/users/5").json()   # {"id": "5"}
    http.requests["/users/5"]["get"]                         # [{"headers": {"X-Trace": "1"}}]

Serving a real ``httpx.Client``::

    client = httpx.Client(transport=http.transport(), base_url="https://api.test")

Single-threaded by design: do not register or dispatch against one fake
from several threads.
"""

__version__ = "0.1.0"
__all__ = [
    "FakeClient",
    "FakeConfig",
    "FakeHTTP",
    "FakeHTTPError",
    "FakeTransport",
    "Headers",
    "Pattern",
    "PatternError",
    "Registry",
    "RequestLog",
    "Responder",
    "Response",
    "ResponseBuilder",
    "UnmatchedRouteError",
    "UnsupportedVerbError",
    "Verb",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fakehttp`` fast and defers the httpx import until the
    transport is actually used.
    """
    if name in ("FakeHTTP", "FakeClient"):
        from fakehttp import client as _client

        return getattr(_client, name)

    if name == "FakeConfig":
        from fakehttp.config import FakeConfig

        return FakeConfig

    if name == "FakeTransport":
        from fakehttp.transport import FakeTransport

        return FakeTransport

    if name == "Registry":
        from fakehttp.registry import Registry

        return Registry

    if name == "RequestLog":
        from fakehttp.log import RequestLog

        return RequestLog

    if name in ("Responder", "ResponseBuilder"):
        from fakehttp import responder as _responder

        return getattr(_responder, name)

    if name == "Response":
        from fakehttp.http.response import Response

        return Response

    if name == "Headers":
        from fakehttp.http.headers import Headers

        return Headers

    if name == "Pattern":
        from fakehttp.routing.pattern import Pattern

        return Pattern

    if name == "Verb":
        from fakehttp.verbs import Verb

        return Verb

    if name in ("FakeHTTPError", "PatternError", "UnmatchedRouteError", "UnsupportedVerbError"):
        from fakehttp import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
