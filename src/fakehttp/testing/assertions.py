"""Assertion helpers for tests that use a fake.

Each assertion produces a clear error message on failure, including
what *was* requested so a wrong path is easy to spot.
"""

import json as json_module
from typing import Any

from fakehttp.client import FakeClient
from fakehttp.http.response import Response
from fakehttp.verbs import Verb


def _requested_summary(fake: FakeClient) -> str:
    history = fake.requests.history()
    if not history:
        return "No requests were made."
    lines = [f"  {verb.upper()} {path}" for verb, path, _ in history]
    return "Requests made:\n" + "\n".join(lines)


def assert_requested(
    fake: FakeClient,
    verb: str,
    path: str,
    *,
    times: int | None = None,
) -> list[dict[str, Any]]:
    """Assert *verb* *path* was requested (exactly *times* times, if given).

    Returns the logged options of each matching call, in call order, so
    the test can go on to inspect bodies or headers.
    """
    key = Verb.coerce(verb)
    calls = fake.requests.calls(key, path)
    if times is None:
        assert calls, (
            f"Expected {key.upper()} {path} to be requested.\n{_requested_summary(fake)}"
        )
    else:
        assert len(calls) == times, (
            f"Expected {key.upper()} {path} to be requested {times} time(s), "
            f"got {len(calls)}.\n{_requested_summary(fake)}"
        )
    return calls


def assert_not_requested(fake: FakeClient, verb: str, path: str) -> None:
    """Assert *verb* *path* was never requested."""
    key = Verb.coerce(verb)
    count = len(fake.requests.calls(key, path))
    assert count == 0, (
        f"Expected {key.upper()} {path} not to be requested, got {count} call(s)."
    )


def assert_status(response: Response, status: int) -> None:
    assert response.status == status, (
        f"Expected status {status}, got {response.status}.\n"
        f"Response body: {response.body[:500]}"
    )


def assert_json(response: Response, expected: Any) -> None:
    """Assert the response is JSON and decodes to *expected*."""
    content_type = response.content_type or ""
    assert "json" in content_type, f"Expected a JSON content type, got {content_type!r}"
    try:
        decoded = json_module.loads(response.body)
    except json_module.JSONDecodeError as exc:
        raise AssertionError(f"Response body is not valid JSON: {response.body[:500]!r}") from exc
    assert decoded == expected, f"Expected JSON {expected!r}, got {decoded!r}"
