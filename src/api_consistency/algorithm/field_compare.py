"""Single-field comparison with known-format-difference tolerance.

Outcomes:

- MATCH: the normalized values are equal.
- WARNING: the values differ only by a recognized representational artifact.
  Scored as matching, reported separately from real mismatches.
- MISMATCH: a real data discrepancy.

The one recognized artifact today: REST may return a relationship field as
``{"link": "<url>", "value": "<sys_id>"}`` while GraphQL returns the bare
``"<sys_id>"``.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum, auto
from typing import Any

from api_consistency.algorithm.normalizer import normalize_value
from api_consistency.fields.values import RestLink

__all__ = ["FieldOutcome", "compare_field", "is_known_format_difference"]


class FieldOutcome(StrEnum):
    """Three-way result of comparing one field between aligned records."""

    MATCH = auto()
    WARNING = auto()
    MISMATCH = auto()

    @property
    def matched(self) -> bool:
        """True for outcomes that count toward ``matching_comparisons``."""
        return self is not FieldOutcome.MISMATCH

    @property
    def is_warning(self) -> bool:
        return self is FieldOutcome.WARNING


def _values_equal(a: Any, b: Any) -> bool:
    # bool subclasses int: keep True distinct from 1
    return a == b and isinstance(a, bool) == isinstance(b, bool)


def is_known_format_difference(rest_value: Any, graphql_value: Any) -> bool:
    """True when a REST ``{link, value}`` wrapper carries GraphQL's bare string."""
    link = RestLink.from_raw(rest_value)
    return link is not None and isinstance(graphql_value, str) and link.value == graphql_value


def compare_field(
    rest_value: Any,
    graphql_value: Any,
    normalize: Callable[[Any], Any] = normalize_value,
) -> FieldOutcome:
    """Compare one field's REST and GraphQL values.

    Args:
        rest_value: Raw value resolved from the REST record.
        graphql_value: Raw value resolved from the GraphQL record.
        normalize: Value normalizer applied to both sides first.  Defaults to
            ``normalize_value``; the comparator passes its cached variant.

    Returns:
        The ``FieldOutcome`` for this comparison unit.
    """
    rest_value = normalize(rest_value)
    graphql_value = normalize(graphql_value)

    if _values_equal(rest_value, graphql_value):
        return FieldOutcome.MATCH
    if is_known_format_difference(rest_value, graphql_value):
        return FieldOutcome.WARNING
    return FieldOutcome.MISMATCH
