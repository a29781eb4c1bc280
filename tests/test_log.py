"""Tests for fakehttp.log: the append-only request log."""

import pytest

from fakehttp.errors import UnsupportedVerbError
from fakehttp.log import RequestLog
from fakehttp.verbs import Verb


class TestRecord:
    def test_call_order_is_kept(self) -> None:
        log = RequestLog()
        for n in (1, 2, 3):
            log.record(Verb.POST, "/orders", {"json": {"n": n}})
        assert log["/orders"]["post"] == [
            {"json": {"n": 1}},
            {"json": {"n": 2}},
            {"json": {"n": 3}},
        ]

    def test_snapshot_is_a_copy(self) -> None:
        log = RequestLog()
        options = {"headers": {"A": "1"}}
        log.record(Verb.GET, "/a", options)
        options["timeout"] = 5
        assert log["/a"]["get"] == [{"headers": {"A": "1"}}]

    def test_snapshot_copies_nested_values(self) -> None:
        log = RequestLog()
        options = {"headers": {"A": "1"}}
        log.record(Verb.GET, "/a", options)
        options["headers"]["B"] = "2"
        assert log["/a"]["get"] == [{"headers": {"A": "1"}}]

    def test_entries_cannot_be_edited_through_reads(self) -> None:
        log = RequestLog()
        log.record(Verb.GET, "/a", {"headers": {"A": "1"}})
        log["/a"]["get"][0]["headers"]["B"] = "2"
        log.history()[0][2]["headers"]["C"] = "3"
        log.calls("get", "/a")[0]["x"] = 1
        assert log["/a"]["get"] == [{"headers": {"A": "1"}}]

    def test_verbs_kept_apart(self) -> None:
        log = RequestLog()
        log.record(Verb.GET, "/a", {})
        log.record(Verb.DELETE, "/a", {"x": 1})
        assert log["/a"]["get"] == [{}]
        assert log["/a"]["delete"] == [{"x": 1}]


class TestRead:
    def test_unknown_path_is_empty_and_not_created(self) -> None:
        log = RequestLog()
        assert log["/never"]["get"] == []
        assert "/never" not in log
        assert len(log) == 0

    def test_unknown_verb_is_empty(self) -> None:
        log = RequestLog()
        log.record(Verb.GET, "/a", {})
        assert log["/a"]["post"] == []
        assert "post" not in log["/a"]
        assert "get" in log["/a"]

    def test_verb_lookup_is_case_insensitive(self) -> None:
        log = RequestLog()
        log.record(Verb.GET, "/a", {})
        assert log["/a"]["GET"] == [{}]
        assert log["/a"][Verb.GET] == [{}]

    def test_unsupported_verb_is_key_error(self) -> None:
        log = RequestLog()
        with pytest.raises(KeyError):
            log["/a"]["trace"]
        assert log["/a"].get("trace") is None

    def test_returned_lists_do_not_alias_the_log(self) -> None:
        log = RequestLog()
        log.record(Verb.GET, "/a", {})
        log["/a"]["get"].append({"forged": True})
        assert log["/a"]["get"] == [{}]

    def test_compares_like_nested_dicts(self) -> None:
        log = RequestLog()
        log.record(Verb.POST, "/orders", {"json": {"n": 1}})
        assert log == {"/orders": {"post": [{"json": {"n": 1}}]}}

    def test_iteration(self) -> None:
        log = RequestLog()
        log.record(Verb.GET, "/a", {})
        log.record(Verb.GET, "/b", {})
        assert list(log) == ["/a", "/b"]
        assert list(log["/a"]) == ["get"]


class TestCounting:
    def _log(self) -> RequestLog:
        log = RequestLog()
        log.record(Verb.GET, "/a", {})
        log.record(Verb.POST, "/a", {})
        log.record(Verb.GET, "/b", {})
        return log

    def test_total(self) -> None:
        assert self._log().total == 3

    def test_count(self) -> None:
        log = self._log()
        assert log.count() == 3
        assert log.count("get") == 2
        assert log.count(path="/a") == 2
        assert log.count("post", "/a") == 1
        assert log.count("delete", "/a") == 0

    def test_count_rejects_unknown_verb(self) -> None:
        with pytest.raises(UnsupportedVerbError):
            self._log().count("trace")

    def test_history(self) -> None:
        history = self._log().history()
        assert [(verb, path) for verb, path, _ in history] == [
            (Verb.GET, "/a"),
            (Verb.POST, "/a"),
            (Verb.GET, "/b"),
        ]

    def test_calls(self) -> None:
        assert self._log().calls("post", "/a") == [{}]
