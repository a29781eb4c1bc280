"""Tests for fakehttp.testing: request/response assertions and the fixture."""

import pytest

from fakehttp.client import FakeHTTP
from fakehttp.config import FakeConfig
from fakehttp.http.headers import Headers
from fakehttp.http.response import Response
from fakehttp.registry import Registry
from fakehttp.testing import (
    assert_json,
    assert_not_requested,
    assert_requested,
    assert_status,
)


def _routes(registry: Registry) -> None:
    registry.get("/users/:id", lambda params: {"id": params["id"]})
    registry.post("/orders", lambda params, options: options.get("json", {}))


class TestAssertRequested:
    def test_passes_and_returns_calls(self) -> None:
        http = FakeHTTP(_routes)
        http.post("/orders", json={"n": 1})
        calls = assert_requested(http, "post", "/orders")
        assert calls == [{"json": {"n": 1}}]

    def test_times(self) -> None:
        http = FakeHTTP(_routes)
        http.get("/users/1")
        http.get("/users/1")
        assert_requested(http, "GET", "/users/1", times=2)

    def test_fails_with_history(self) -> None:
        http = FakeHTTP(_routes)
        http.get("/users/2")
        with pytest.raises(AssertionError, match="GET /users/2"):
            assert_requested(http, "get", "/users/1")

    def test_fails_on_wrong_count(self) -> None:
        http = FakeHTTP(_routes)
        http.get("/users/1")
        with pytest.raises(AssertionError, match="2 time"):
            assert_requested(http, "get", "/users/1", times=2)

    def test_fails_when_nothing_requested(self) -> None:
        with pytest.raises(AssertionError, match="No requests were made"):
            assert_requested(FakeHTTP(_routes), "get", "/users/1")

    def test_works_on_branches(self) -> None:
        http = FakeHTTP(_routes)
        branch = http.accept("application/json")
        branch.get("/users/3")
        assert_requested(http, "get", "/users/3", times=1)


class TestAssertNotRequested:
    def test_passes(self) -> None:
        assert_not_requested(FakeHTTP(_routes), "delete", "/orders")

    def test_fails(self) -> None:
        http = FakeHTTP(_routes)
        http.post("/orders")
        with pytest.raises(AssertionError, match="not to be requested"):
            assert_not_requested(http, "post", "/orders")


class TestResponseAssertions:
    def test_status(self) -> None:
        assert_status(Response(status=204), 204)
        with pytest.raises(AssertionError, match="Expected status 200, got 404"):
            assert_status(Response(status=404, body="missing"), 200)

    def test_json(self) -> None:
        response = FakeHTTP(_routes).get("/users/4")
        assert_json(response, {"id": "4"})

    def test_json_mismatch(self) -> None:
        response = FakeHTTP(_routes).get("/users/4")
        with pytest.raises(AssertionError, match="Expected JSON"):
            assert_json(response, {"id": "5"})

    def test_json_wrong_content_type(self) -> None:
        response = Response(headers=Headers({"Content-Type": "text/plain"}), body="{}")
        with pytest.raises(AssertionError, match="JSON content type"):
            assert_json(response, {})

    def test_json_invalid_body(self) -> None:
        response = Response(headers=Headers({"Content-Type": "application/json"}), body="nope")
        with pytest.raises(AssertionError, match="not valid JSON"):
            assert_json(response, {})


class TestFakeHttpFixture:
    def test_factory(self, fake_http) -> None:
        http = fake_http(_routes)
        assert isinstance(http, FakeHTTP)
        assert http.get("/users/1").json() == {"id": "1"}

    def test_config(self, fake_http) -> None:
        http = fake_http(_routes, config=FakeConfig(content_type="text/plain"))
        assert http.get("/users/1").content_type == "text/plain"

    def test_independent_fakes(self, fake_http) -> None:
        first, second = fake_http(_routes), fake_http(_routes)
        first.get("/users/1")
        assert second.requests.total == 0
