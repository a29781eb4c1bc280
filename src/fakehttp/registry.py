"""Responder registry: the fake's route table.

Maps each verb to its responders and resolves a concrete request to the
single best one:

1. Only responders whose pattern matches the path are candidates.
2. The lowest score wins (fewest bound parameters, most specific).
3. On a score tie, the highest sequence wins (most recently added,
   whether by registration or by merge).

Usage::

    registry = Registry()

    @registry.get("/users/:id")
    def show(params):
        return {"id": params["id"]}

    registry.resolve("get", "/users/5")

Not thread-safe: register and dispatch from one thread per fake.
"""

import itertools
import logging
from collections.abc import Callable
from dataclasses import replace

from fakehttp._internal.types import Handler, Options
from fakehttp._internal.urls import request_path
from fakehttp.config import FakeConfig
from fakehttp.errors import UnmatchedRouteError
from fakehttp.http.response import Response
from fakehttp.log import RequestLog
from fakehttp.responder import Responder
from fakehttp.routing.pattern import Pattern
from fakehttp.verbs import Verb

logger = logging.getLogger("fakehttp.registry")

# Verb helpers return the handler when given one, else a decorator
HandlerOrDecorator = Handler | Callable[[Handler], Handler]


class Registry:
    """Verb-keyed responder table plus the request log it feeds."""

    __slots__ = ("_counter", "_requests", "_responders", "config")

    def __init__(self, config: FakeConfig | None = None) -> None:
        self.config = config or FakeConfig()
        self._responders: dict[Verb, list[Responder]] = {verb: [] for verb in Verb}
        self._counter = itertools.count(1)
        self._requests: RequestLog | None = None

    # -- Registration --

    def register(self, verb: str, pattern: str | Pattern, handler: Handler) -> Responder:
        """Bind *handler* to *verb* and *pattern*.

        Raises ``PatternError`` for an invalid template and
        ``UnsupportedVerbError`` for an unknown verb.
        """
        if not isinstance(pattern, Pattern):
            pattern = Pattern(pattern)
        responder = Responder(
            verb=Verb.coerce(verb),
            pattern=pattern,
            handler=handler,
            sequence=next(self._counter),
        )
        self._responders[responder.verb].append(responder)
        return responder

    def _decorator(self, verb: Verb, pattern: str, handler: Handler | None) -> HandlerOrDecorator:
        if handler is not None:
            self.register(verb, pattern, handler)
            return handler

        def decorator(func: Handler) -> Handler:
            self.register(verb, pattern, func)
            return func

        return decorator

    def get(self, pattern: str, handler: Handler | None = None) -> HandlerOrDecorator:
        """Register a GET responder. Usable as a decorator or called directly."""
        return self._decorator(Verb.GET, pattern, handler)

    def post(self, pattern: str, handler: Handler | None = None) -> HandlerOrDecorator:
        """Register a POST responder."""
        return self._decorator(Verb.POST, pattern, handler)

    def put(self, pattern: str, handler: Handler | None = None) -> HandlerOrDecorator:
        """Register a PUT responder."""
        return self._decorator(Verb.PUT, pattern, handler)

    def patch(self, pattern: str, handler: Handler | None = None) -> HandlerOrDecorator:
        """Register a PATCH responder."""
        return self._decorator(Verb.PATCH, pattern, handler)

    def delete(self, pattern: str, handler: Handler | None = None) -> HandlerOrDecorator:
        """Register a DELETE responder."""
        return self._decorator(Verb.DELETE, pattern, handler)

    def merge(self, other: "Registry") -> "Registry":
        """Add every responder of *other* to this registry.

        Merged responders get fresh sequence numbers, in *other*'s own
        registration order, so they win ties against everything already
        here. Responders registered afterwards win ties against them.
        *other* is left untouched.
        """
        incoming = sorted(
            itertools.chain.from_iterable(other._responders.values()),
            key=lambda r: r.sequence,
        )
        for responder in incoming:
            merged = replace(responder, sequence=next(self._counter))
            self._responders[merged.verb].append(merged)
        return self

    # -- Introspection --

    def responders(self, verb: str | None = None) -> list[Responder]:
        """Responders in priority order for a tie (most recent first)."""
        if verb is None:
            found = itertools.chain.from_iterable(self._responders.values())
        else:
            found = self._responders[Verb.coerce(verb)]
        return sorted(found, key=lambda r: r.sequence, reverse=True)

    def describe(self) -> str:
        """Render the responder table, one line per responder."""
        return "\n".join(f"  {responder}" for responder in self.responders())

    def __len__(self) -> int:
        return sum(len(found) for found in self._responders.values())

    def __repr__(self) -> str:
        return f"Registry({len(self)} responders)"

    # -- Resolution --

    def resolve(self, verb: str, uri: object) -> Responder:
        """Pick the best responder for *verb* and the path of *uri*.

        Raises ``UnmatchedRouteError`` if nothing matches.
        """
        key = Verb.coerce(verb)
        path = request_path(uri)
        best: Responder | None = None
        best_rank: tuple[int, int] | None = None
        for responder in self._responders[key]:
            score = responder.score(path)
            if score is None:
                continue
            rank = (score, -responder.sequence)
            if best_rank is None or rank < best_rank:
                best, best_rank = responder, rank
        if best is None:
            raise UnmatchedRouteError(key, str(uri), self.describe())
        return best

    @property
    def requests(self) -> RequestLog:
        """The request log, created on first access."""
        if self._requests is None:
            self._requests = RequestLog()
        return self._requests

    def dispatch(self, verb: str, uri: object, options: Options) -> Response:
        """Resolve, record, and answer one request.

        Unmatched requests raise before anything is recorded. Handler
        exceptions propagate unchanged.
        """
        key = Verb.coerce(verb)
        responder = self.resolve(key, uri)
        path = request_path(uri)
        self.requests.record(key, path, options)
        logger.debug("==> %s %s", key.upper(), path)
        response = responder.call(uri, options, self.config)
        logger.debug("<== %s", response.status)
        return response
