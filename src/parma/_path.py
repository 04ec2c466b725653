"""Path predicate: full-match the request path and capture its groups.

The pattern is compiled with ``google-re2`` for guaranteed linear-time
matching. RE2 does not support backreferences or lookahead/lookbehind
because they require backtracking; patterns using them are rejected at
construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import re2

from parma._router import MatcherError

if TYPE_CHECKING:
    from parma._request import Request
    from parma._types import Captures


@dataclass(frozen=True, slots=True)
class PathPredicate:
    """Regular expression match against the whole request path.

    Uses fullmatch, so ``/users/(\\d+)`` does not match ``/users/1/edit``.
    On a match every group is appended to the captures, left to right.
    An optional group that did not participate is captured as "".

    Raises:
        MatcherError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            msg = f'invalid path pattern "{self.pattern}": {e}'
            raise MatcherError(msg) from e
        object.__setattr__(self, "_compiled", compiled)

    @property
    def group_count(self) -> int:
        """Number of values a successful match captures."""
        return self._compiled.groups

    def evaluate(self, request: Request, captures: Captures, /) -> bool:
        m = self._compiled.fullmatch(request.path)
        if m is None:
            return False
        captures.extend(g if g is not None else "" for g in m.groups())
        return True
