"""Tests for the RE2 path predicate."""

from __future__ import annotations

import pytest

from parma import MatcherError, PathPredicate, Request


class TestPathPredicate:
    def test_static_path(self, captures: list[str]) -> None:
        p = PathPredicate("/search")
        assert p.evaluate(Request(path="/search"), captures) is True
        assert captures == []

    def test_full_match_only(self, captures: list[str]) -> None:
        p = PathPredicate(r"/users/(\d+)")
        assert p.evaluate(Request(path="/users/1/edit"), captures) is False
        assert p.evaluate(Request(path="/api/users/1"), captures) is False
        assert captures == []

    def test_groups_captured_in_order(self, captures: list[str]) -> None:
        p = PathPredicate(r"/(\w+)/(\d+)")
        assert p.evaluate(Request(path="/posts/42"), captures) is True
        assert captures == ["posts", "42"]

    def test_unmatched_optional_group_is_empty(self, captures: list[str]) -> None:
        p = PathPredicate(r"/files(?:/(\w+))?")
        assert p.evaluate(Request(path="/files"), captures) is True
        assert captures == [""]

    def test_group_count(self) -> None:
        assert PathPredicate(r"/(a)/(b)").group_count == 2
        assert PathPredicate("/static").group_count == 0

    def test_invalid_pattern(self) -> None:
        with pytest.raises(MatcherError, match="invalid path pattern"):
            PathPredicate("/users/(")

    def test_backreference_rejected(self) -> None:
        """RE2 has no backreferences."""
        with pytest.raises(MatcherError):
            PathPredicate(r"/(\w+)/\1")

    def test_lookahead_rejected(self) -> None:
        with pytest.raises(MatcherError):
            PathPredicate(r"/(?=admin)\w+")

    def test_equality_ignores_compiled(self) -> None:
        assert PathPredicate("/a") == PathPredicate("/a")
        assert PathPredicate("/a") != PathPredicate("/b")
