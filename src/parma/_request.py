"""Request: the context routes are matched against.

Holds method, path and the already-parsed parameter mapping. Parsing the
query string or form body is the caller's job; the mapping is stored
behind a read-only proxy so predicates cannot mutate it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class Request:
    """Request context for route matching.

    ``params`` accepts any string-keyed, string-valued mapping. A snapshot
    is taken at construction, so later changes to the caller's dict are
    not observed.
    """

    method: str = "GET"
    path: str = "/"
    params: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def param(self, key: str) -> str | None:
        """Get a parameter value by exact key, or None when absent."""
        return self.params.get(key)
