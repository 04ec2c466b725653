"""Predicate composition over a shared capture list.

And chains route predicates with short-circuit evaluation. Every child
receives the same capture list, so captures accumulate in predicate order.
MethodPredicate is the one built-in predicate that never captures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parma._request import Request
    from parma._types import Captures, RoutePredicate


@dataclass(frozen=True, slots=True)
class MethodPredicate:
    """Matches the request method exactly (case-sensitive). Captures nothing."""

    method: str

    def evaluate(self, request: Request, captures: Captures, /) -> bool:
        return request.method == self.method


@dataclass(frozen=True, slots=True)
class And:
    """All predicates must match (logical AND).

    Short-circuits on the first False: later predicates are never
    evaluated, so they never append. Captures appended by the predicates
    before the failing one stay in the list. Empty And returns True.
    """

    predicates: tuple[RoutePredicate, ...]

    def evaluate(self, request: Request, captures: Captures, /) -> bool:
        return all(p.evaluate(request, captures) for p in self.predicates)


def and_predicate(predicates: list[RoutePredicate]) -> RoutePredicate:
    """Compose predicates with AND semantics, optimizing for common cases.

    - Empty -> And(()) (no conditions = match everything)
    - Single -> unwrapped (no wrapping overhead)
    - Multiple -> And(predicates)
    """
    if len(predicates) == 1:
        return predicates[0]
    return And(tuple(predicates))
