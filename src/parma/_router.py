"""Router: first-match-wins route evaluation with positional captures.

Evaluation semantics:
- Routes are tried in declaration order (first-match-wins)
- Each attempt gets a fresh capture list; a failed attempt's list is
  dropped, including any values its predicates appended before failing
- The winning route's captures are passed to its handler positionally
- on_no_match is the Router-level fallback
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from parma._predicate import And

if TYPE_CHECKING:
    from collections.abc import Callable

    from parma._request import Request
    from parma._types import Captures, RoutePredicate

logger = logging.getLogger("parma.router")

MAX_ROUTES = 1024


class MatcherError(Exception):
    """Errors from route and predicate validation."""


class TooManyRoutesError(MatcherError):
    """Router has more routes than MAX_ROUTES."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many routes: {count} exceeds maximum {max_}")


@dataclass(frozen=True, slots=True)
class Route:
    """Pairs route predicates with the handler to call on a match.

    The handler receives the captures as positional arguments, in the
    order the predicates appended them.
    """

    predicates: tuple[RoutePredicate, ...]
    handler: Callable[..., Any]
    name: str | None = None

    def attempt(self, request: Request) -> tuple[str, ...] | None:
        """Evaluate this route against a request.

        Returns the captures on a match, None otherwise.
        """
        captures: Captures = []
        if not And(self.predicates).evaluate(request, captures):
            return None
        return tuple(captures)

    @property
    def label(self) -> str:
        return self.name or getattr(self.handler, "__name__", repr(self.handler))


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """A matched route together with its final captures."""

    route: Route
    captures: tuple[str, ...]

    def call(self) -> Any:
        """Invoke the route handler with the captures as positional args."""
        return self.route.handler(*self.captures)


@dataclass(frozen=True, slots=True)
class Router:
    """Top-level router with first-match-wins semantics.

    Route count validation runs automatically at construction time.
    If the router has more than MAX_ROUTES routes, TooManyRoutesError is
    raised.
    """

    routes: tuple[Route, ...]
    on_no_match: Callable[[Request], Any] | None = None

    def __post_init__(self) -> None:
        if len(self.routes) > MAX_ROUTES:
            raise TooManyRoutesError(len(self.routes), MAX_ROUTES)

    def match(self, request: Request) -> RouteMatch | None:
        """Find the first route that matches the request.

        Later routes are never consulted once one matches.
        """
        for route in self.routes:
            captures = route.attempt(request)
            if captures is not None:
                logger.debug(
                    "route %s matched %s %s with %d capture(s)",
                    route.label,
                    request.method,
                    request.path,
                    len(captures),
                )
                return RouteMatch(route=route, captures=captures)
        logger.debug("no route matched %s %s", request.method, request.path)
        return None

    def dispatch(self, request: Request) -> Any:
        """Match the request and call the winning handler.

        Returns the handler's result. With no match, returns the result of
        on_no_match(request), or None when there is no fallback. Handler
        exceptions propagate unchanged.
        """
        found = self.match(request)
        if found is not None:
            return found.call()
        if self.on_no_match is not None:
            return self.on_no_match(request)
        return None
