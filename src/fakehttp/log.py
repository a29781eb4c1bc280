"""Request log: every resolved call, keyed by path then verb.

Append-only. Reads never create entries, so asserting on a path that was
never requested is side-effect free::

    fake.requests["/orders"]["post"]    # [{"json": {"n": 1}}, ...]
    fake.requests["/never"]["get"]      # []
"""

import copy
from collections.abc import Iterator, Mapping
from typing import Any

from fakehttp._internal.types import Options
from fakehttp.errors import UnsupportedVerbError
from fakehttp.verbs import Verb


class VerbLog(Mapping[str, list[dict[str, Any]]]):
    """Calls made to one path, keyed by verb. Read-only view."""

    __slots__ = ("_calls", "path")

    def __init__(self, path: str, calls: dict[Verb, list[dict[str, Any]]]) -> None:
        self.path = path
        self._calls = calls

    def __getitem__(self, verb: str) -> list[dict[str, Any]]:
        try:
            key = Verb.coerce(verb)
        except UnsupportedVerbError:
            raise KeyError(verb) from None
        return copy.deepcopy(self._calls.get(key, []))

    def __contains__(self, verb: object) -> bool:
        if not isinstance(verb, str):
            return False
        try:
            return Verb.coerce(verb) in self._calls
        except UnsupportedVerbError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._calls)

    def __len__(self) -> int:
        return len(self._calls)

    def __repr__(self) -> str:
        return f"VerbLog({self.path!r}, {dict(self._calls)!r})"


class RequestLog(Mapping[str, VerbLog]):
    """Options of every resolved request, in call order.

    Entries are deep snapshots of the merged options taken at call time.
    Reads hand out copies, so the stored entries never change. Not
    thread-safe.
    """

    __slots__ = ("_by_path", "_order")

    def __init__(self) -> None:
        self._by_path: dict[str, dict[Verb, list[dict[str, Any]]]] = {}
        self._order: list[tuple[Verb, str, dict[str, Any]]] = []

    def record(self, verb: Verb, path: str, options: Options) -> dict[str, Any]:
        """Append one call. Returns a copy of the stored snapshot."""
        snapshot = copy.deepcopy(dict(options))
        self._by_path.setdefault(path, {}).setdefault(verb, []).append(snapshot)
        self._order.append((verb, path, snapshot))
        return copy.deepcopy(snapshot)

    def __getitem__(self, path: str) -> VerbLog:
        return VerbLog(path, self._by_path.get(path, {}))

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_path)

    def __len__(self) -> int:
        return len(self._by_path)

    def __repr__(self) -> str:
        return f"RequestLog({self._by_path!r})"

    @property
    def total(self) -> int:
        """Number of calls recorded across all paths and verbs."""
        return len(self._order)

    def history(self) -> list[tuple[Verb, str, dict[str, Any]]]:
        """Every call as ``(verb, path, options)``, in call order."""
        return copy.deepcopy(self._order)

    def calls(self, verb: str, path: str) -> list[dict[str, Any]]:
        """Options of each call to *verb* *path*, in call order."""
        return self[path][verb]

    def count(self, verb: str | None = None, path: str | None = None) -> int:
        """Number of calls, optionally narrowed to a verb and/or path."""
        wanted = Verb.coerce(verb) if verb is not None else None
        return sum(
            1
            for v, p, _ in self._order
            if (wanted is None or v is wanted) and (path is None or p == path)
        )
