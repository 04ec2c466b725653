"""Parameter matchers: presence and non-emptiness tests that capture.

A parameter matcher names one key or an ordered group of keys. Under the
LENIENT policy a key matches when it is present, even if its value is the
empty string. Under STRICT the value must also be non-empty. Every matched
value is appended to the route attempt's capture list, in key order, and
later becomes a positional argument of the route handler.

    param("foo")               # ?foo=bar, ?foo=        -> ("bar",), ("",)
    param_strict("foo")        # ?foo=bar               -> ("bar",)
    params("foo", "baz")       # ?foo=bar&baz=quuz, ?foo=&baz=
    params_strict("foo", "baz")  # ?foo=bar&baz=quuz only

Matched values are passed through as-is. Callers that need a particular
type should convert inside the handler.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from parma._types import MatchPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from parma._request import Request
    from parma._types import Captures, Params


@dataclass(frozen=True, slots=True)
class ParamKey:
    """A single parameter key."""

    key: str


@dataclass(frozen=True, slots=True)
class ParamGroup:
    """An ordered group of parameter keys.

    Order is significant. Duplicates are allowed and each occurrence is
    matched (and captured) on its own.
    """

    keys: tuple[str, ...]


type MatchSpec = ParamKey | ParamGroup


def match_single(
    params: Params, key: str, policy: MatchPolicy, captures: Captures
) -> bool:
    """Match one key and append its value on success.

    A missing key, or an empty value under STRICT, is a plain non-match:
    nothing is appended and False is returned.
    """
    if key not in params:
        return False
    value = params[key]
    if policy is MatchPolicy.STRICT and not value:
        return False
    captures.append(value)
    return True


def match_group(
    params: Params, keys: Iterable[str], policy: MatchPolicy, captures: Captures
) -> bool:
    """Match every key in order, stopping at the first one that fails.

    Values are appended as each key matches. When a later key fails, the
    values captured for the keys before it are left in ``captures``; route
    evaluation drops the whole list for a failed attempt. An empty group
    matches and captures nothing.
    """
    for key in keys:
        if not match_single(params, key, policy, captures):
            return False
    return True


@dataclass(frozen=True, slots=True)
class ParamPredicate:
    """Route predicate over the request's parameters.

    Use the ``param``/``param_strict``/``params``/``params_strict``
    constructors rather than building the MatchSpec by hand.
    """

    spec: MatchSpec
    policy: MatchPolicy = MatchPolicy.LENIENT

    def evaluate(self, request: Request, captures: Captures, /) -> bool:
        return self.match(request.params, captures)

    def match(self, params: Params, captures: Captures) -> bool:
        """Match directly against a parameter mapping."""
        match self.spec:
            case ParamKey(key=key):
                return match_single(params, key, self.policy, captures)
            case ParamGroup(keys=keys):
                return match_group(params, keys, self.policy, captures)
            case _:  # pragma: no cover
                msg = f"unknown match spec: {type(self.spec).__name__}"
                raise TypeError(msg)

    @property
    def keys(self) -> tuple[str, ...]:
        """The keys this predicate captures, in capture order."""
        match self.spec:
            case ParamKey(key=key):
                return (key,)
            case ParamGroup(keys=keys):
                return keys
        return ()  # pragma: no cover


def param(key: str) -> ParamPredicate:
    """Match a parameter that is present, even if empty."""
    return ParamPredicate(ParamKey(key), MatchPolicy.LENIENT)


def param_strict(key: str) -> ParamPredicate:
    """Match a parameter that is present and non-empty."""
    return ParamPredicate(ParamKey(key), MatchPolicy.STRICT)


def params(*keys: str) -> ParamPredicate:
    """Match all given parameters if present, even if empty."""
    return ParamPredicate(ParamGroup(keys), MatchPolicy.LENIENT)


def params_strict(*keys: str) -> ParamPredicate:
    """Match all given parameters if present and non-empty."""
    return ParamPredicate(ParamGroup(keys), MatchPolicy.STRICT)
