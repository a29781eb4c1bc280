"""Responders: one (verb, pattern, handler) binding each.

A responder answers a matched request: it extracts path parameters,
hands the handler an explicit ``ResponseBuilder`` to set status and
content type, and turns the handler's return value into a ``Response``.
"""

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fakehttp._internal.types import Encoder, Handler, Options
from fakehttp._internal.urls import request_path
from fakehttp.config import FakeConfig
from fakehttp.http.headers import Headers
from fakehttp.http.response import Response
from fakehttp.routing.pattern import Pattern
from fakehttp.verbs import Verb


class ResponseBuilder:
    """Mutable status, content type, and headers for one handler call.

    Created fresh per request with the defaults already applied, so a
    handler that never touches it produces ``200`` with the configured
    content type::

        @registry.post("/orders")
        def create(params, options, response):
            response.set_status(201)
            return {"id": 1}
    """

    __slots__ = ("_headers", "status")

    def __init__(self, *, status: int = 200, content_type: str = "application/json") -> None:
        self.status = status
        # lowercased name -> (name as last set, value)
        self._headers: dict[str, tuple[str, str]] = {}
        self.set_content_type(content_type)

    def set_status(self, status: int) -> "ResponseBuilder":
        self.status = status
        return self

    @property
    def content_type(self) -> str:
        return self._headers["content-type"][1]

    def set_content_type(self, content_type: str) -> "ResponseBuilder":
        self._headers["content-type"] = ("Content-Type", content_type)
        return self

    def set_header(self, name: str, value: str) -> "ResponseBuilder":
        """Set a response header, replacing any value under the same name.

        Names compare case-insensitively; ``Content-Type`` is the same as
        set_content_type().
        """
        if name.lower() == "content-type":
            return self.set_content_type(value)
        self._headers[name.lower()] = (name, value)
        return self

    @property
    def headers(self) -> Headers:
        return Headers(self._headers.values())


def render_body(result: Any, encoder: Encoder) -> str:
    """Turn a handler return value into a response body.

    Mappings go through *encoder*; ``None`` is empty; bytes are decoded
    as UTF-8; everything else is ``str()`` verbatim.
    """
    if isinstance(result, Mapping):
        return encoder(result)
    if result is None:
        return ""
    if isinstance(result, bytes):
        return result.decode("utf-8")
    return str(result)


def call_handler(
    handler: Handler,
    params: dict[str, str],
    options: Options,
    response: ResponseBuilder,
) -> Any:
    """Invoke a user handler with introspected arguments.

    Handlers may accept zero, one (params), two (params, options), or
    three (params, options, response) positional args.
    """
    args = (params, options, response)
    try:
        sig = inspect.signature(handler)
    except (TypeError, ValueError):
        return handler(*args)

    positional = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return handler(*args)
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return handler(*args[:positional])


@dataclass(frozen=True, slots=True)
class Responder:
    """A frozen (verb, pattern, handler) binding.

    ``sequence`` is assigned by the owning registry and only increases;
    on a specificity tie the higher sequence (more recent) wins.
    """

    verb: Verb
    pattern: Pattern
    handler: Handler
    sequence: int = 0

    def __str__(self) -> str:
        name = getattr(self.handler, "__qualname__", repr(self.handler))
        return f"{self.verb.upper():<6} {self.pattern.template}  -> {name}  (#{self.sequence})"

    def score(self, path: str) -> int | None:
        return self.pattern.score(path)

    def call(self, uri: object, options: Options, config: FakeConfig) -> Response:
        """Run the handler for *uri* and synthesize a response.

        Exceptions raised by the handler propagate unchanged.
        """
        params = self.pattern.match(request_path(uri)) or {}
        builder = ResponseBuilder(content_type=config.content_type)
        result = call_handler(self.handler, params, options, builder)
        return Response(
            status=builder.status,
            version="1.1",
            headers=builder.headers,
            body=render_body(result, config.encoder),
            uri=str(uri),
        )
