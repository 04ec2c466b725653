"""Handler registry for config-driven router construction.

The registry turns a route table (JSON/YAML dict) into a Router without
hand-written wiring:
- RegistryBuilder → .build() → Registry (immutable)
- Handlers are registered by name; route configs refer to them by name
- load_router() walks the config and constructs runtime predicates

Example::

    registry = (
        RegistryBuilder()
        .handler("search", search)
        .handler("not_found", not_found)
        .build()
    )

    config = parse_router_config(yaml.safe_load(text))
    router = registry.load_router(config)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from parma._config import (
    MethodMatchConfig,
    ParamMatchConfig,
    PathMatchConfig,
    RouteConfig,
    RouterConfig,
)
from parma._params import ParamGroup, ParamPredicate
from parma._path import PathPredicate
from parma._predicate import MethodPredicate
from parma._router import MAX_ROUTES, MatcherError, Route, Router, TooManyRoutesError

if TYPE_CHECKING:
    from collections.abc import Callable

    from parma._config import MatchConfig
    from parma._types import RoutePredicate

logger = logging.getLogger("parma.registry")

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_MATCHERS_PER_ROUTE = 64
MAX_KEYS_PER_GROUP = 256
MAX_PATTERN_LENGTH = 4096

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownHandlerError(MatcherError):
    """A route referred to a handler name that is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown handler: {name!r} (registered: {registered})"
        else:
            msg = f"unknown handler: {name!r} (no handlers are registered)"
        super().__init__(msg)


class InvalidConfigError(MatcherError):
    """A config payload was semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class TooManyMatchersError(MatcherError):
    """A route has too many matchers."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(
            f"too many matchers in route: {count} exceeds maximum {max_}"
        )


class TooManyKeysError(MatcherError):
    """A params/params! group has too many keys."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(
            f"too many keys in parameter group: {count} exceeds maximum {max_}"
        )


class PatternTooLongError(MatcherError):
    """A path pattern exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

type Handler = Callable[..., Any]


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register handlers by name, then call build() to produce an immutable
    Registry. Registering the same name twice replaces the first handler.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def handler(self, name: str, fn: Handler) -> RegistryBuilder:
        """Register a route handler under a name."""
        self._handlers[name] = fn
        return self

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        return Registry(_handlers=MappingProxyType(dict(self._handlers)))


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable registry of named handlers.

    Constructed via RegistryBuilder. Use load_router() to compile a
    RouterConfig into a runtime Router.
    """

    _handlers: MappingProxyType[str, Handler] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_router(self, config: RouterConfig) -> Router:
        """Load a Router from configuration.

        Raises:
            UnknownHandlerError: handler or on_no_match name not registered
            InvalidConfigError: path pattern is not valid RE2
            TooManyRoutesError: too many routes
            TooManyMatchersError: too many matchers in one route
            TooManyKeysError: too many keys in one parameter group
            PatternTooLongError: path pattern exceeds length limit
        """
        if len(config.routes) > MAX_ROUTES:
            raise TooManyRoutesError(len(config.routes), MAX_ROUTES)

        routes = tuple(self._load_route(rc) for rc in config.routes)

        on_no_match = None
        if config.on_no_match is not None:
            on_no_match = self._resolve(config.on_no_match)

        logger.debug("loaded router with %d route(s)", len(routes))
        return Router(routes=routes, on_no_match=on_no_match)

    @property
    def handler_count(self) -> int:
        """Number of registered handlers."""
        return len(self._handlers)

    def contains_handler(self, name: str) -> bool:
        """Check if a handler name is registered."""
        return name in self._handlers

    def handler_names(self) -> list[str]:
        """Return all registered handler names (sorted)."""
        return sorted(self._handlers.keys())

    # ── Private loading methods ────────────────────────────────────────────

    def _resolve(self, name: str) -> Handler:
        fn = self._handlers.get(name)
        if fn is None:
            raise UnknownHandlerError(name, list(self._handlers.keys()))
        return fn

    def _load_route(self, config: RouteConfig) -> Route:
        if len(config.match) > MAX_MATCHERS_PER_ROUTE:
            raise TooManyMatchersError(len(config.match), MAX_MATCHERS_PER_ROUTE)
        predicates = tuple(self._load_predicate(mc) for mc in config.match)
        return Route(
            predicates=predicates,
            handler=self._resolve(config.handler),
            name=config.name,
        )

    def _load_predicate(self, config: MatchConfig) -> RoutePredicate:
        match config:
            case ParamMatchConfig(spec=spec, policy=policy):
                if isinstance(spec, ParamGroup) and len(spec.keys) > MAX_KEYS_PER_GROUP:
                    raise TooManyKeysError(len(spec.keys), MAX_KEYS_PER_GROUP)
                return ParamPredicate(spec=spec, policy=policy)
            case PathMatchConfig(pattern=pattern):
                return _compile_path(pattern)
            case MethodMatchConfig(method=method):
                return MethodPredicate(method=method)
            case _:  # pragma: no cover
                msg = f"unknown match config type: {type(config).__name__}"
                raise InvalidConfigError(msg)


def _compile_path(pattern: str) -> PathPredicate:
    """Compile a path pattern, enforcing the length limit."""
    if len(pattern) > MAX_PATTERN_LENGTH:
        raise PatternTooLongError(len(pattern), MAX_PATTERN_LENGTH)
    try:
        return PathPredicate(pattern=pattern)
    except MatcherError as e:
        raise InvalidConfigError(str(e)) from e
