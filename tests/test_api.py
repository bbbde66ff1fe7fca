"""Tests for the public API functions.

Tests cover:
- compare_responses returns a ComparisonResult
- is_consistent with and without allow_known_issues
- consistency_score returns the integer score
- compare_multi_table_responses returns a MultiTableComparisonResult
- Config forwarding
- No state shared between calls
"""

from __future__ import annotations

from typing import Any

from api_consistency import (
    ComparisonConfig,
    ComparisonResult,
    MultiTableComparisonResult,
    compare_multi_table_responses,
    compare_responses,
    consistency_score,
    is_consistent,
)

REST = {"result": [{"sys_id": "1", "number": "INC1", "state": "2"}]}
GRAPHQL = {
    "data": {
        "GlideRecord_Query": {
            "incident": {
                "_results": [
                    {
                        "sys_id": {"value": "1", "displayValue": "1"},
                        "number": {"value": "INC1", "displayValue": "INC1"},
                        "state": {"value": "2", "displayValue": "In Progress"},
                    }
                ]
            }
        }
    }
}


def _graphql_with_state(state: str) -> dict[str, Any]:
    record = {
        "sys_id": {"value": "1"},
        "number": {"value": "INC1"},
        "state": {"value": state},
    }
    return {"data": {"GlideRecord_Query": {"incident": {"_results": [record]}}}}


def _link_case() -> tuple[dict[str, Any], dict[str, Any]]:
    rest = {
        "result": [
            {
                "sys_id": "1",
                "caller_id": {"link": "https://dev/api/now/table/sys_user/u1", "value": "u1"},
            }
        ]
    }
    graphql = {
        "data": {
            "GlideRecord_Query": {
                "incident": {
                    "_results": [
                        {
                            "sys_id": {"value": "1"},
                            "caller_id": {"value": "u1", "displayValue": "John Doe"},
                        }
                    ]
                }
            }
        }
    }
    return rest, graphql


class TestCompareResponses:
    def test_returns_result(self) -> None:
        result = compare_responses(REST, GRAPHQL, "incident", ["number", "state"])
        assert isinstance(result, ComparisonResult)
        assert result.is_equivalent is True

    def test_config_forwarded(self) -> None:
        rest = {"result": [{"number": "INC2", "state": "1"}, {"number": "INC1", "state": "2"}]}
        graphql = {
            "data": {
                "GlideRecord_Query": {
                    "incident": {
                        "_results": [
                            {"number": {"value": "INC1"}, "state": {"value": "2"}},
                            {"number": {"value": "INC2"}, "state": {"value": "1"}},
                        ]
                    }
                }
            }
        }
        config = ComparisonConfig(id_field="number")
        assert compare_responses(rest, graphql, "incident", ["state"], config=config).is_equivalent

    def test_calls_are_independent(self) -> None:
        first = compare_responses(REST, GRAPHQL, "incident", ["state"])
        second = compare_responses(REST, _graphql_with_state("3"), "incident", ["state"])
        assert first.data_consistency == 100
        assert second.data_consistency == 0


class TestIsConsistent:
    def test_consistent(self) -> None:
        assert is_consistent(REST, GRAPHQL, "incident", ["number", "state"]) is True

    def test_inconsistent(self) -> None:
        assert is_consistent(REST, _graphql_with_state("3"), "incident", ["state"]) is False

    def test_known_issues_rejected_by_default(self) -> None:
        rest, graphql = _link_case()
        assert is_consistent(rest, graphql, "incident", ["caller_id"]) is False

    def test_known_issues_accepted_when_allowed(self) -> None:
        rest, graphql = _link_case()
        assert (
            is_consistent(rest, graphql, "incident", ["caller_id"], allow_known_issues=True)
            is True
        )

    def test_allow_known_issues_does_not_hide_errors(self) -> None:
        assert (
            is_consistent(
                REST, _graphql_with_state("3"), "incident", ["state"], allow_known_issues=True
            )
            is False
        )


class TestConsistencyScore:
    def test_perfect(self) -> None:
        assert consistency_score(REST, GRAPHQL, "incident", ["number", "state"]) == 100

    def test_half(self) -> None:
        score = consistency_score(REST, _graphql_with_state("3"), "incident", ["number", "state"])
        assert score == 50
        assert isinstance(score, int)


class TestCompareMultiTableResponses:
    def test_returns_multi_table_result(self) -> None:
        result = compare_multi_table_responses(
            [REST], GRAPHQL, [{"table": "incident", "fields": ["number", "state"]}]
        )
        assert isinstance(result, MultiTableComparisonResult)
        assert isinstance(result, ComparisonResult)
        assert result.is_equivalent is True
        assert result.table_results[0].table_name == "incident_0"
