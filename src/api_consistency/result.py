"""Result dataclasses returned by the comparison entry points.

All results are frozen: they are created once per comparison call and
handed to presentation layers (pass/fail badges, percentage bars, mismatch
tables) as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "ComparisonResult",
    "FieldMismatch",
    "MultiTableComparisonResult",
    "TableResult",
]


@dataclass(frozen=True, slots=True)
class FieldMismatch:
    """One itemized field discrepancy.

    Attributes:
        record_index: Position of the aligned record pair.  In multi-table
            results the index is scoped to ``table``.
        field: Declared field path.
        rest_value: Normalized REST value.
        graphql_value: Normalized GraphQL value.
        is_warning: True for known format differences, which still count as
            matching in the score.
        table: Table identifier (``<table>_<index>``) for multi-table
            comparisons; None for single-table ones.
    """

    record_index: int
    field: str
    rest_value: Any
    graphql_value: Any
    is_warning: bool = False
    table: str | None = None


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Outcome of comparing one REST response against one GraphQL response.

    Attributes:
        is_equivalent: Record counts match, nothing was itemized (warnings
            included) and the consistency is 100.
        record_count_match: Both sides returned the same number of records.
        data_consistency: Integer percentage in [0, 100] of field comparisons
            that matched, floored so any mismatch keeps it below 100.
        issues: Human-readable findings, in the order they were detected.
        rest_record_count: Records extracted from the REST response.
        graphql_record_count: Records extracted from the GraphQL response.
        field_mismatches: Itemized discrepancies, capped (see
            ``ComparisonConfig.max_mismatches``).
        only_known_issues: At least one mismatch and all of them are warnings.
        total_comparisons: Comparison units evaluated (aligned pairs x fields).
        matching_comparisons: Units that matched, warnings included.
        computation_time_ms: Wall-clock duration of the comparison.
    """

    is_equivalent: bool
    record_count_match: bool
    data_consistency: int
    issues: list[str]
    rest_record_count: int
    graphql_record_count: int
    field_mismatches: list[FieldMismatch]
    only_known_issues: bool
    total_comparisons: int = 0
    matching_comparisons: int = 0
    computation_time_ms: float = 0.0

    @property
    def errors(self) -> list[FieldMismatch]:
        """Itemized mismatches that are real data discrepancies."""
        return [m for m in self.field_mismatches if not m.is_warning]

    @property
    def warnings(self) -> list[FieldMismatch]:
        """Itemized mismatches that are known format differences."""
        return [m for m in self.field_mismatches if m.is_warning]


@dataclass(frozen=True, slots=True)
class TableResult:
    """Per-table slice of a multi-table comparison."""

    table_name: str
    rest_record_count: int
    graphql_record_count: int
    data_consistency: int
    field_mismatches: list[FieldMismatch]
    issues: list[str]
    total_comparisons: int = 0
    matching_comparisons: int = 0


@dataclass(frozen=True, slots=True)
class MultiTableComparisonResult(ComparisonResult):
    """``ComparisonResult`` aggregated over several tables.

    The top-level counts and score sum every table's comparison units;
    ``table_results`` keeps one entry per declared sub-query, in order.
    """

    table_results: list[TableResult] = field(default_factory=list)
