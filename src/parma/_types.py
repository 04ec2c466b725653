"""Core protocols and type aliases for parma.

- Params is the read-only parameter mapping a request carries
- Captures is the ordered capture list owned by one route attempt
- MatchPolicy selects between "present" and "present and non-empty"
- RoutePredicate is the port every route constraint implements
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from parma._request import Request

# One resolved string value per key. Multi-valued transports are resolved
# by whoever builds the mapping.
type Params = Mapping[str, str]

# Append-only from a predicate's point of view.
type Captures = list[str]


class MatchPolicy(Enum):
    """How a parameter value must look to count as a match."""

    LENIENT = "lenient"
    """Key present, value may be the empty string."""

    STRICT = "strict"
    """Key present and value non-empty."""


class RoutePredicate(Protocol):
    """A single route constraint.

    Returns True on match. On match the predicate may append values to
    ``captures``; it never reads, reorders or clears the list.
    """

    def evaluate(self, request: Request, captures: Captures, /) -> bool: ...
