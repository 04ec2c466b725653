"""Test utilities for parma.

Provides a recording handler for use in tests and examples. It exists to
reduce boilerplate when checking which captures a route handed over.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RecordingHandler:
    """A route handler that remembers every call.

    Returns ``result`` (or its own name when unset) so dispatch results
    identify which route won.

    >>> from parma import Request, Route, Router, param
    >>> h = RecordingHandler("search")
    >>> router = Router((Route((param("q"),), h),))
    >>> router.dispatch(Request(params={"q": "cats"}))
    'search'
    >>> h.calls
    [('cats',)]
    """

    name: str
    result: Any = None
    calls: list[tuple[str, ...]] = field(default_factory=list)

    def __call__(self, *captures: str) -> Any:
        self.calls.append(captures)
        return self.name if self.result is None else self.result

    @property
    def called(self) -> bool:
        return bool(self.calls)

    @property
    def last(self) -> tuple[str, ...] | None:
        """Captures of the most recent call, or None if never called."""
        return self.calls[-1] if self.calls else None
