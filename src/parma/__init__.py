"""parma: parameter capture matchers for a predicate router.

All public types are exported from this module for flat imports:

    from parma import Request, Route, Router, params_strict
"""

__version__ = "0.1.0"

# Config types, see parma._config for details
from parma._config import (
    ConfigParseError,
    MatchConfig,
    MethodMatchConfig,
    ParamMatchConfig,
    PathMatchConfig,
    RouteConfig,
    RouterConfig,
    parse_match,
    parse_router_config,
)

# Parameter matchers
from parma._params import (
    MatchSpec,
    ParamGroup,
    ParamKey,
    ParamPredicate,
    match_group,
    match_single,
    param,
    param_strict,
    params,
    params_strict,
)

# Other predicates
from parma._path import PathPredicate
from parma._predicate import And, MethodPredicate, and_predicate

# Registry, see parma._registry for details
from parma._registry import (
    MAX_KEYS_PER_GROUP,
    MAX_MATCHERS_PER_ROUTE,
    MAX_PATTERN_LENGTH,
    InvalidConfigError,
    PatternTooLongError,
    Registry,
    RegistryBuilder,
    TooManyKeysError,
    TooManyMatchersError,
    UnknownHandlerError,
)
from parma._request import Request

# Routing
from parma._router import (
    MAX_ROUTES,
    MatcherError,
    Route,
    RouteMatch,
    Router,
    TooManyRoutesError,
)
from parma._types import Captures, MatchPolicy, Params, RoutePredicate

__all__ = [
    # Protocols and aliases
    "Captures",
    "MatchPolicy",
    "Params",
    "RoutePredicate",
    "Request",
    # Parameter matchers
    "MatchSpec",
    "ParamKey",
    "ParamGroup",
    "ParamPredicate",
    "match_single",
    "match_group",
    "param",
    "param_strict",
    "params",
    "params_strict",
    # Other predicates
    "PathPredicate",
    "MethodPredicate",
    "And",
    "and_predicate",
    # Routing
    "Route",
    "RouteMatch",
    "Router",
    "MatcherError",
    "TooManyRoutesError",
    "MAX_ROUTES",
    # Config types
    "MatchConfig",
    "ParamMatchConfig",
    "PathMatchConfig",
    "MethodMatchConfig",
    "RouteConfig",
    "RouterConfig",
    "ConfigParseError",
    "parse_match",
    "parse_router_config",
    # Registry
    "RegistryBuilder",
    "Registry",
    "UnknownHandlerError",
    "InvalidConfigError",
    "TooManyMatchersError",
    "TooManyKeysError",
    "PatternTooLongError",
    "MAX_MATCHERS_PER_ROUTE",
    "MAX_KEYS_PER_GROUP",
    "MAX_PATTERN_LENGTH",
]
