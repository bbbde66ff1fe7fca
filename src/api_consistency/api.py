"""Public API functions for api-consistency.

This module provides the four user-facing functions: compare_responses,
compare_multi_table_responses, is_consistent and consistency_score.  Each call
creates a fresh ``ConsistencyComparator`` to guarantee zero global state
between calls.  Callers that re-run the same comparison (e.g. on every UI
render) should hold a ``ConsistencyComparator`` instead, to reuse its cache.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from api_consistency.algorithm.config import ComparisonConfig
from api_consistency.comparator import ConsistencyComparator
from api_consistency.result import ComparisonResult, MultiTableComparisonResult
from api_consistency.subquery import SubQuery

__all__ = [
    "compare_multi_table_responses",
    "compare_responses",
    "consistency_score",
    "is_consistent",
]


def compare_responses(
    rest_response: Any,
    graphql_response: Any,
    table: str,
    fields: Sequence[str],
    config: ComparisonConfig | None = None,
) -> ComparisonResult:
    """Compare a REST response and a GraphQL response for one table.

    Args:
        rest_response: Parsed REST body (``{"result": [...]}`` or a list).
        graphql_response: Parsed GraphQL body.
        table: Table name / GraphQL alias.
        fields: Field paths to compare.
        config: Engine settings.  Defaults to ``ComparisonConfig()``.

    Returns:
        A ``ComparisonResult`` with the consistency score, counts, issues and
        itemized mismatches.
    """
    comparator = ConsistencyComparator(config=config)
    return comparator.compare(rest_response, graphql_response, table, fields)


def compare_multi_table_responses(
    rest_responses: Sequence[Any],
    graphql_response: Any,
    sub_queries: Sequence[SubQuery | Mapping[str, Any]],
    config: ComparisonConfig | None = None,
) -> MultiTableComparisonResult:
    """Compare one REST response per sub-query against one GraphQL response.

    Args:
        rest_responses: Parsed REST bodies, one per entry of ``sub_queries``.
        graphql_response: Parsed GraphQL body holding every table alias.
        sub_queries: ``SubQuery`` objects or ``{"table", "fields", "filter"}``
            mappings.
        config: Engine settings.  Defaults to ``ComparisonConfig()``.

    Returns:
        A ``MultiTableComparisonResult`` with per-table results and an
        aggregated score.
    """
    comparator = ConsistencyComparator(config=config)
    return comparator.compare_multi_table(rest_responses, graphql_response, sub_queries)


def is_consistent(
    rest_response: Any,
    graphql_response: Any,
    table: str,
    fields: Sequence[str],
    allow_known_issues: bool = False,
    config: ComparisonConfig | None = None,
) -> bool:
    """Return True if both responses carry the same data.

    Args:
        allow_known_issues: Also accept results whose only discrepancies are
            known format differences (``only_known_issues``) as long as the
            record counts match.

    Other arguments are forwarded to ``compare_responses``.
    """
    result = compare_responses(rest_response, graphql_response, table, fields, config=config)
    if result.is_equivalent:
        return True
    return allow_known_issues and result.record_count_match and result.only_known_issues


def consistency_score(
    rest_response: Any,
    graphql_response: Any,
    table: str,
    fields: Sequence[str],
    config: ComparisonConfig | None = None,
) -> int:
    """Return only the 0-100 ``data_consistency`` of ``compare_responses``."""
    result = compare_responses(rest_response, graphql_response, table, fields, config=config)
    return result.data_consistency
