"""Evaluate benchmarks for parma.

Measures the hot path: single and group parameter matches, strict
misses, and first-match-wins scanning across many routes.

Run: pytest tests/bench --benchmark-enable --benchmark-only
"""

from __future__ import annotations

from parma import (
    MatchPolicy,
    PathPredicate,
    Request,
    Route,
    Router,
    match_group,
    param_strict,
    params,
    params_strict,
)

# ── Fixtures ─────────────────────────────────────────────────────────────────


def _noop(*_captures: str) -> None:
    return None


PARAMS = {f"k{i}": f"v{i}" for i in range(32)}


# ── Core scenarios ───────────────────────────────────────────────────────────


def test_bench_param_strict_hit(benchmark):
    predicate = param_strict("k0")
    request = Request(params=PARAMS)
    benchmark(lambda: predicate.evaluate(request, []))


def test_bench_param_strict_miss(benchmark):
    predicate = param_strict("missing")
    request = Request(params=PARAMS)
    benchmark(lambda: predicate.evaluate(request, []))


def test_bench_group_8_keys(benchmark):
    keys = [f"k{i}" for i in range(8)]
    benchmark(lambda: match_group(PARAMS, keys, MatchPolicy.STRICT, []))


def test_bench_group_fail_last_key(benchmark):
    predicate = params(*(f"k{i}" for i in range(31)), "missing")
    request = Request(params=PARAMS)
    benchmark(lambda: predicate.evaluate(request, []))


# ── Router scanning ──────────────────────────────────────────────────────────


def test_bench_router_last_of_100(benchmark):
    routes = tuple(
        Route((PathPredicate(f"/r{i}/(\\d+)"), params_strict("k0", "k1")), _noop)
        for i in range(100)
    )
    router = Router(routes)
    request = Request(path="/r99/7", params=PARAMS)
    result = benchmark(router.match, request)
    assert result is not None
    assert result.captures == ("7", "v0", "v1")


def test_bench_router_miss_100(benchmark):
    routes = tuple(Route((param_strict(f"x{i}"),), _noop) for i in range(100))
    router = Router(routes)
    request = Request(params=PARAMS)
    assert benchmark(router.match, request) is None
