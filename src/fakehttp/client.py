"""Fake HTTP clients.

``FakeHTTP`` looks like a real fluent HTTP client but never touches the
network. Stub the routes your code calls, inject the fake, then assert
on what was requested::

    def routes(registry):
        @registry.get("/users/:id")
        def show(params, options, response):
            return {"id": params["id"]}

    http = FakeHTTP(routes)
    client = MyClient(http=http)
    client.fetch_user(5)

    assert http.requests["/users/5"]["get"] == [{}]

Branches created by the fluent calls (``headers()``, ``auth()``...) share
the fake's registry and request log and never modify their parent.
"""

import copy
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from fakehttp._internal.types import Options
from fakehttp.chainable import Chainable
from fakehttp.config import FakeConfig
from fakehttp.http.response import Response
from fakehttp.log import RequestLog
from fakehttp.registry import Registry

if TYPE_CHECKING:
    from fakehttp.transport import FakeTransport

Setup = Callable[[Registry], object]


class FakeClient(Chainable):
    """A fluent client view over a shared registry.

    Holds an immutable snapshot of the options accumulated along the
    chain. Cheap to create, safe to discard.
    """

    __slots__ = ("_options", "registry")

    def __init__(self, options: Options, *, registry: Registry) -> None:
        self._options: Mapping[str, Any] = MappingProxyType(copy.deepcopy(dict(options)))
        self.registry = registry

    @property
    def options(self) -> Mapping[str, Any]:
        """Options accumulated through branching (read-only)."""
        return self._options

    @property
    def requests(self) -> RequestLog:
        return self.registry.requests

    def branch(self, options: Options) -> "FakeClient":
        """Return a client with *options* layered over this one's."""
        return FakeClient({**self._options, **options}, registry=self.registry)

    def request(
        self, verb: str, uri: object, options: Options | None = None, **kwargs: Any
    ) -> Response:
        """Dispatch one request through the registry.

        Call options win over accumulated ones on a key conflict (shallow
        merge). The handler gets its own deep copy, so mutating nested
        options never reaches this branch. Raises ``UnmatchedRouteError`` when no route is stubbed.
        """
        merged = copy.deepcopy({**self._options, **(options or {}), **kwargs})
        return self.registry.dispatch(verb, uri, merged)

    def transport(self) -> "FakeTransport":
        """An ``httpx`` transport served by this client's routes."""
        from fakehttp.transport import FakeTransport

        return FakeTransport(self)

    def __repr__(self) -> str:
        options = dict(self._options)
        return f"{type(self).__name__}(options={options!r}, registry={self.registry!r})"


class FakeHTTP(FakeClient):
    """The root fake. Owns the registry; configured once per test.

    *setup* is called with the fresh registry to register responders.
    """

    __slots__ = ()

    def __init__(self, setup: Setup | None = None, *, config: FakeConfig | None = None) -> None:
        super().__init__({}, registry=Registry(config))
        if setup is not None:
            setup(self.registry)

    def merge(
        self, other: "FakeHTTP | Registry | None" = None, setup: Setup | None = None
    ) -> "FakeHTTP":
        """Extend this fake in place and return it.

        Responders from *other* are merged first (see ``Registry.merge``),
        then *setup* runs against this fake's registry.
        """
        if other is not None:
            registry = other if isinstance(other, Registry) else other.registry
            self.registry.merge(registry)
        if setup is not None:
            setup(self.registry)
        return self
