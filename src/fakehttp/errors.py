"""fakehttp exception hierarchy.

Shared across the pattern matcher, the registry, and the client facades
so every module raises and catches the same types.
"""


class FakeHTTPError(Exception):
    """Base for all fakehttp-specific errors."""


class PatternError(FakeHTTPError):
    """Raised when a route pattern cannot be parsed.

    Surfaces at registration time, never at request time.
    """


class UnsupportedVerbError(FakeHTTPError, ValueError):
    """Raised for an HTTP verb the fake does not stub."""

    def __init__(self, verb: object) -> None:
        self.verb = verb
        super().__init__(
            f"Unsupported HTTP verb {verb!r}. "
            "Expected one of: get, post, put, patch, delete."
        )


class UnmatchedRouteError(FakeHTTPError):
    """No registered responder matches the request.

    This almost always means the test forgot to stub a route. The message
    names the verb and URI and dumps every registered pattern so the
    missing one is easy to spot.
    """

    def __init__(self, verb: str, uri: str, table: str) -> None:
        self.verb = verb
        self.uri = uri
        self.table = table
        super().__init__(
            f"No route stubbed for {verb.upper()} {uri}\n\n"
            f"Registered responders:\n{table or '  (none)'}"
        )
