"""Tests for GraphQLAdapter envelope navigation and reference resolution.

Tests cover:
- Single-table extraction through data -> GlideRecord_Query -> table -> _results
- Malformed envelopes at every level yield [] without raising
- Multi-table access via tables() / records_for()
- value / displayValue unwrapping, including the displayValue fallback
- Dot-walked resolution through _reference hops
- Custom envelope keys from ComparisonConfig
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from api_consistency.adapters import GraphQLAdapter
from api_consistency.algorithm.config import ComparisonConfig


def _envelope(tables: dict[str, list[dict[str, Any]]]) -> dict[str, Any]:
    return {
        "data": {
            "GlideRecord_Query": {
                name: {"_results": records} for name, records in tables.items()
            }
        }
    }


INCIDENT = {
    "sys_id": {"value": "i1", "displayValue": "i1"},
    "number": {"value": "INC0010001", "displayValue": "INC0010001"},
    "caller_id": {
        "value": "u1",
        "displayValue": "John Doe",
        "_reference": {
            "user_name": {"value": "jdoe", "displayValue": "jdoe"},
            "department": {
                "value": "d1",
                "displayValue": "IT",
                "_reference": {"name": {"value": "IT", "displayValue": "IT"}},
            },
        },
    },
    "priority": {"displayValue": "1 - Critical"},
    "close_code": {"value": None, "displayValue": "Solved"},
}


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


class TestExtractRecords:
    def test_extracts_table_results(self) -> None:
        raw = _envelope({"incident": [INCIDENT]})
        assert GraphQLAdapter().extract_records(raw, "incident") == [INCIDENT]

    def test_returns_new_list(self) -> None:
        records = [INCIDENT]
        extracted = GraphQLAdapter().extract_records(_envelope({"incident": records}), "incident")
        extracted.clear()
        assert records == [INCIDENT]

    def test_missing_table(self) -> None:
        raw = _envelope({"problem": [INCIDENT]})
        assert GraphQLAdapter().extract_records(raw, "incident") == []

    def test_no_table_name(self) -> None:
        raw = _envelope({"incident": [INCIDENT]})
        assert GraphQLAdapter().extract_records(raw) == []

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            [],
            "text",
            {},
            {"data": None},
            {"errors": [{"message": "boom"}]},
            {"data": {}},
            {"data": {"GlideRecord_Query": None}},
            {"data": {"GlideRecord_Query": {"incident": None}}},
            {"data": {"GlideRecord_Query": {"incident": {}}}},
            {"data": {"GlideRecord_Query": {"incident": {"_results": {"a": 1}}}}},
        ],
    )
    def test_malformed_yields_empty(self, raw: Any) -> None:
        assert GraphQLAdapter().extract_records(raw, "incident") == []

    def test_malformed_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="api_consistency.adapters.graphql"):
            GraphQLAdapter().extract_records({"data": {}}, "incident")
        assert "GlideRecord_Query" in caplog.text

    def test_custom_envelope_keys(self) -> None:
        config = ComparisonConfig(query_root="Query", records_key="rows")
        raw = {"data": {"Query": {"incident": {"rows": [INCIDENT]}}}}
        assert GraphQLAdapter(config).extract_records(raw, "incident") == [INCIDENT]


class TestMultiTableAccess:
    def test_tables_and_records_for(self) -> None:
        adapter = GraphQLAdapter()
        tables = adapter.tables(_envelope({"incident": [INCIDENT], "problem": []}))
        assert set(tables) == {"incident", "problem"}
        assert adapter.records_for(tables, "incident") == [INCIDENT]
        assert adapter.records_for(tables, "problem") == []

    def test_records_for_missing_alias(self) -> None:
        adapter = GraphQLAdapter()
        tables = adapter.tables(_envelope({"incident": [INCIDENT]}))
        assert adapter.records_for(tables, "change_request") == []

    def test_tables_on_malformed_response(self) -> None:
        assert GraphQLAdapter().tables({"errors": []}) == {}


# ---------------------------------------------------------------------------
# Field resolution
# ---------------------------------------------------------------------------


class TestResolveField:
    def test_plain_field_value(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "number") == "INC0010001"

    def test_reference_field_value_is_id(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "caller_id") == "u1"

    def test_display_value_fallback_when_value_absent(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "priority") == "1 - Critical"

    def test_present_null_value_wins(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "close_code") is None

    def test_one_hop(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "caller_id.user_name") == "jdoe"

    def test_two_hops(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "caller_id.department.name") == "IT"

    def test_missing_leaf(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "caller_id.email") is None

    def test_missing_field(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "assigned_to") is None

    def test_hop_without_reference(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "number.name") is None

    def test_hop_through_missing_field(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "assigned_to.user_name") is None

    def test_non_object_field(self) -> None:
        record = {"number": "INC1"}
        assert GraphQLAdapter().resolve_field(record, "number") is None

    def test_empty_path(self) -> None:
        assert GraphQLAdapter().resolve_field(INCIDENT, "") is None

    def test_custom_reference_marker(self) -> None:
        config = ComparisonConfig(reference_marker="ref")
        record = {"caller_id": {"value": "u1", "ref": {"user_name": {"value": "jdoe"}}}}
        assert GraphQLAdapter(config).resolve_field(record, "caller_id.user_name") == "jdoe"
        assert GraphQLAdapter().resolve_field(record, "caller_id.user_name") is None

    def test_side(self) -> None:
        assert GraphQLAdapter.side == "graphql"
