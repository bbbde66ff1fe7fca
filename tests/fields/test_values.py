"""Tests for RestLink, GraphQLLeaf, GraphQLReference and parse_graphql_field."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from typing import Any

import pytest

from api_consistency.fields import (
    GraphQLLeaf,
    GraphQLReference,
    RestLink,
    parse_graphql_field,
)


class TestRestLink:
    def test_from_wrapper(self) -> None:
        link = RestLink.from_raw({"link": "https://x/sys_user/1", "value": "1"})
        assert link == RestLink(link="https://x/sys_user/1", value="1")

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "1",
            {"value": "1"},
            {"link": "", "value": "1"},
            {"link": "x", "value": ""},
            {"link": "x", "value": None},
            {"link": "x", "value": 1},
        ],
    )
    def test_rejects_other_shapes(self, raw: Any) -> None:
        assert RestLink.from_raw(raw) is None

    def test_frozen(self) -> None:
        link = RestLink(link="x", value="1")
        with pytest.raises(FrozenInstanceError):
            link.value = "2"  # type: ignore[misc]


class TestGraphQLLeaf:
    def test_value_preferred(self) -> None:
        assert GraphQLLeaf(value="1", display_value="One", has_value=True).scalar == "1"

    def test_display_value_when_absent(self) -> None:
        assert GraphQLLeaf(display_value="One").scalar == "One"

    def test_present_null_not_replaced(self) -> None:
        assert GraphQLLeaf(value=None, display_value="One", has_value=True).scalar is None


class TestParseGraphQLField:
    def test_leaf(self) -> None:
        field = parse_graphql_field({"value": "2", "displayValue": "In Progress"})
        assert isinstance(field, GraphQLLeaf)
        assert field.scalar == "2"

    def test_reference(self) -> None:
        nested = {"name": {"value": "IT"}}
        field = parse_graphql_field({"value": "d1", "_reference": nested})
        assert isinstance(field, GraphQLReference)
        assert field.record == nested
        assert field.scalar == "d1"

    def test_null_reference_is_leaf(self) -> None:
        field = parse_graphql_field({"value": "", "_reference": None})
        assert isinstance(field, GraphQLLeaf)

    def test_custom_marker(self) -> None:
        field = parse_graphql_field({"value": "d1", "ref": {}}, reference_marker="ref")
        assert isinstance(field, GraphQLReference)

    @pytest.mark.parametrize("raw", [None, "2", 2, ["2"]])
    def test_non_objects(self, raw: Any) -> None:
        assert parse_graphql_field(raw) is None
