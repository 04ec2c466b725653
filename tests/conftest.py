"""Shared fixtures for parma tests."""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import parse_qsl

import pytest

from parma import Request


def _query(qs: str) -> dict[str, str]:
    # Blank values are kept. For repeated keys the last value wins.
    return dict(parse_qsl(qs, keep_blank_values=True))


def _make_request(path: str = "/", method: str = "GET") -> Request:
    clean, _, qs = path.partition("?")
    return Request(method=method, path=clean, params=_query(qs))


@pytest.fixture
def captures() -> list[str]:
    """A fresh capture list, as a single route attempt would own."""
    return []


@pytest.fixture
def query() -> Callable[[str], dict[str, str]]:
    """Resolve a query string into the str -> str mapping a Request carries."""
    return _query


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Build a Request from a path that may carry a query string."""
    return _make_request
