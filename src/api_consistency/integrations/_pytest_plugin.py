"""pytest plugin for api-consistency.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from api_consistency import ComparisonConfig, ComparisonResult, compare_responses


@pytest.fixture(scope="session")
def assert_apis_consistent() -> Any:
    """Fixture that returns a callable REST/GraphQL consistency asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare_responses() which creates a fresh comparator per call).

    Usage in tests::

        def test_incident_list(assert_apis_consistent, rest_body, graphql_body):
            assert_apis_consistent(rest_body, graphql_body, "incident", ["number", "state"])

        def test_reference_fields(assert_apis_consistent, rest_body, graphql_body):
            assert_apis_consistent(
                rest_body, graphql_body, "incident", ["caller_id"], allow_known_issues=True
            )

    Returns:
        A callable ``_assert(rest, graphql, table, fields, allow_known_issues=False,
        config=None) -> ComparisonResult`` that raises ``AssertionError`` listing
        the comparison issues when the responses are not consistent.
    """

    def _assert(
        rest_response: Any,
        graphql_response: Any,
        table: str,
        fields: Sequence[str],
        allow_known_issues: bool = False,
        config: ComparisonConfig | None = None,
    ) -> ComparisonResult:
        """Assert that both responses carry the same data for ``table``.

        Raises:
            AssertionError: When the comparison is not equivalent (or, with
                ``allow_known_issues``, when it has real mismatches or a
                record-count difference).
        """
        result = compare_responses(
            rest_response, graphql_response, table, fields, config=config
        )
        accepted = result.is_equivalent or (
            allow_known_issues and result.record_count_match and result.only_known_issues
        )
        if not accepted:
            details = "; ".join(result.issues) or "no issues reported"
            msg = (
                f"REST and GraphQL responses for {table!r} are not consistent "
                f"(consistency={result.data_consistency}%): {details}"
            )
            raise AssertionError(msg)
        return result

    return _assert
