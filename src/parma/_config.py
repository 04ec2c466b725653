"""Config types for route table construction.

A route table is a plain dict (the shape JSON and YAML produce). Config
loading path:
  dict → parse_router_config() → RouterConfig → Registry.load_router() → Router

Relationship to runtime types:

| Config type          | Runtime type       |
|----------------------|--------------------|
| RouterConfig         | Router             |
| RouteConfig          | Route              |
| ParamMatchConfig     | ParamPredicate     |
| PathMatchConfig      | PathPredicate      |
| MethodMatchConfig    | MethodPredicate    |

Matcher entries are single-key dicts named after the route syntax:

    {"param": "foo"}             lenient, one key
    {"param!": "foo"}            strict, one key
    {"params": ["foo", "baz"]}   lenient, ordered group
    {"params!": ["foo", "baz"]}  strict, ordered group
    {"path": "/users/(\\d+)"}
    {"method": "GET"}

Key shapes are checked here, at definition time, so a loaded router never
sees a malformed key set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from parma._params import MatchSpec, ParamGroup, ParamKey
from parma._types import MatchPolicy

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ParamMatchConfig:
    """A parameter matcher: which key(s), and how strict."""

    spec: MatchSpec
    policy: MatchPolicy


@dataclass(frozen=True, slots=True)
class PathMatchConfig:
    """A path pattern (RE2 syntax, full match)."""

    pattern: str


@dataclass(frozen=True, slots=True)
class MethodMatchConfig:
    """An exact request method."""

    method: str


type MatchConfig = ParamMatchConfig | PathMatchConfig | MethodMatchConfig


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """One route: its matchers (ANDed, in order) and a handler name."""

    match: tuple[MatchConfig, ...]
    handler: str
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Configuration for a Router.

    Parsed from JSON/YAML dicts and loaded into a runtime Router via
    Registry.load_router().
    """

    routes: tuple[RouteConfig, ...]
    on_no_match: str | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════

_PARAM_VARIANTS: dict[str, tuple[bool, MatchPolicy]] = {
    # name -> (is_group, policy)
    "param": (False, MatchPolicy.LENIENT),
    "param!": (False, MatchPolicy.STRICT),
    "params": (True, MatchPolicy.LENIENT),
    "params!": (True, MatchPolicy.STRICT),
}

_MATCH_VARIANTS = frozenset({*_PARAM_VARIANTS, "path", "method"})


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


def parse_router_config(data: dict[str, Any]) -> RouterConfig:
    """Parse a dict into a RouterConfig.

    This is the main entry point for config loading.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_routes = data.get("routes")
    if raw_routes is None:
        msg = "missing required field 'routes'"
        raise ConfigParseError(msg)
    if not isinstance(raw_routes, list):
        msg = f"'routes' must be a list, got {type(raw_routes).__name__}"
        raise ConfigParseError(msg)

    routes = tuple(_parse_route(r) for r in raw_routes)

    on_no_match = data.get("on_no_match")
    if on_no_match is not None and not isinstance(on_no_match, str):
        msg = f"'on_no_match' must be a handler name, got {type(on_no_match).__name__}"
        raise ConfigParseError(msg)

    return RouterConfig(routes=routes, on_no_match=on_no_match)


def _parse_route(data: dict[str, Any]) -> RouteConfig:
    """Parse a single route dict."""
    if not isinstance(data, dict):
        msg = f"route must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "handler" not in data:
        msg = "route missing required field 'handler'"
        raise ConfigParseError(msg)
    handler = data["handler"]
    if not isinstance(handler, str) or not handler:
        msg = "route 'handler' must be a non-empty string"
        raise ConfigParseError(msg)

    name = data.get("name")
    if name is not None and not isinstance(name, str):
        msg = f"route 'name' must be a string, got {type(name).__name__}"
        raise ConfigParseError(msg)

    raw_match = data.get("match", [])
    if not isinstance(raw_match, list):
        msg = f"route 'match' must be a list, got {type(raw_match).__name__}"
        raise ConfigParseError(msg)

    matchers = tuple(parse_match(m) for m in raw_match)
    return RouteConfig(match=matchers, handler=handler, name=name)


def parse_match(data: dict[str, Any]) -> MatchConfig:
    """Parse one matcher entry, e.g. ``{"params!": ["foo", "baz"]}``.

    Raises:
        ConfigParseError: If the entry is not a single known variant or
            its value has the wrong shape.
    """
    if not isinstance(data, dict):
        msg = f"matcher must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)
    if len(data) != 1:
        msg = f"matcher must have exactly one key, got {list(data)!r}"
        raise ConfigParseError(msg)

    ((variant, value),) = data.items()
    if variant not in _MATCH_VARIANTS:
        expected = sorted(_MATCH_VARIANTS)
        msg = f"matcher must be one of {expected}, got {variant!r}"
        raise ConfigParseError(msg)

    if variant == "path":
        return PathMatchConfig(pattern=_require_str(variant, value))
    if variant == "method":
        return MethodMatchConfig(method=_require_str(variant, value))

    is_group, policy = _PARAM_VARIANTS[variant]
    spec: MatchSpec
    if is_group:
        spec = ParamGroup(keys=_parse_keys(variant, value))
    else:
        spec = ParamKey(key=_require_str(variant, value))
    return ParamMatchConfig(spec=spec, policy=policy)


def _parse_keys(variant: str, value: Any) -> tuple[str, ...]:
    """A group needs a list of non-empty strings. An empty list is allowed."""
    if not isinstance(value, list):
        msg = f"{variant} value must be a list of strings, got {type(value).__name__}"
        raise ConfigParseError(msg)
    return tuple(_require_str(variant, key) for key in value)


def _require_str(variant: str, value: Any) -> str:
    if not isinstance(value, str):
        msg = f"{variant} value must be a string, got {type(value).__name__}"
        raise ConfigParseError(msg)
    if not value:
        msg = f"{variant} value must not be empty"
        raise ConfigParseError(msg)
    return value
