"""HTTP verbs the fake can stub."""

from enum import StrEnum

from fakehttp.errors import UnsupportedVerbError


class Verb(StrEnum):
    """The fixed set of stubbable verbs.

    Members are lowercase strings, so ``Verb.POST == "post"`` and a
    ``Verb`` works anywhere a plain key is expected (for example when
    reading the request log).
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"

    @classmethod
    def coerce(cls, value: "str | Verb") -> "Verb":
        """Return the member for *value*, case-insensitively.

        Raises ``UnsupportedVerbError`` for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise UnsupportedVerbError(value)
