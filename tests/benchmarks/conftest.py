"""Deterministic response generators for performance benchmarks.

All generators produce fixed, reproducible payloads.  No random values.
Three tiers: 10, 100 and 1000 incident records, each compared on six fields
(two of them dot-walked).  Each tier provides a "consistent" pair and a
"drifted" pair where every tenth record carries a changed state.

GraphQL records are emitted in reverse order so alignment does real work.
"""

from __future__ import annotations

from typing import Any

import pytest

FIELDS = (
    "number",
    "state",
    "short_description",
    "priority",
    "caller_id.user_name",
    "caller_id.department.name",
)


def _rest_record(i: int) -> dict[str, Any]:
    return {
        "sys_id": f"{i:08x}",
        "number": f"INC{i:07d}",
        "state": str(i % 7),
        "short_description": f"Issue number {i}",
        "priority": str(1 + i % 5),
        "caller_id.user_name": f"user{i % 50}",
        "caller_id.department.name": f"Dept {i % 8}",
    }


def _leaf(value: Any) -> dict[str, Any]:
    return {"value": value, "displayValue": value}


def _graphql_record(i: int, state: str | None = None) -> dict[str, Any]:
    return {
        "sys_id": _leaf(f"{i:08x}"),
        "number": _leaf(f"INC{i:07d}"),
        "state": _leaf(state if state is not None else str(i % 7)),
        "short_description": _leaf(f"Issue number {i}"),
        "priority": _leaf(str(1 + i % 5)),
        "caller_id": {
            "value": f"u{i % 50}",
            "displayValue": f"User {i % 50}",
            "_reference": {
                "user_name": _leaf(f"user{i % 50}"),
                "department": {
                    "value": f"d{i % 8}",
                    "displayValue": f"Dept {i % 8}",
                    "_reference": {"name": _leaf(f"Dept {i % 8}")},
                },
            },
        },
    }


def make_pair(count: int, drift: bool = False) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return a (REST, GraphQL) response pair for ``count`` incidents."""
    rest = {"result": [_rest_record(i) for i in range(count)]}
    graphql_records = [
        _graphql_record(i, state="drifted" if drift and i % 10 == 0 else None)
        for i in reversed(range(count))
    ]
    graphql = {"data": {"GlideRecord_Query": {"incident": {"_results": graphql_records}}}}
    return rest, graphql


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10_consistent() -> tuple[dict[str, Any], dict[str, Any]]:
    return make_pair(10)


@pytest.fixture
def pair_10_drifted() -> tuple[dict[str, Any], dict[str, Any]]:
    return make_pair(10, drift=True)


@pytest.fixture
def pair_100_consistent() -> tuple[dict[str, Any], dict[str, Any]]:
    return make_pair(100)


@pytest.fixture
def pair_100_drifted() -> tuple[dict[str, Any], dict[str, Any]]:
    return make_pair(100, drift=True)


@pytest.fixture
def pair_1000_consistent() -> tuple[dict[str, Any], dict[str, Any]]:
    """1000 incidents; 6000 comparison units."""
    return make_pair(1000)


@pytest.fixture
def pair_1000_drifted() -> tuple[dict[str, Any], dict[str, Any]]:
    """1000 incidents with 100 drifted states."""
    return make_pair(1000, drift=True)


@pytest.fixture
def fields() -> tuple[str, ...]:
    return FIELDS
