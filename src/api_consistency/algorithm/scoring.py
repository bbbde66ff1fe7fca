"""Consistency scoring: per-table tallies and the 0-100 score policy.

Score policy::

    total == 0                 -> 0
    no mismatch itemized       -> 100
    otherwise                  -> floor(matching * 100 / total)

Flooring (never rounding) guarantees that a single real mismatch keeps the
score below 100.  The floor is taken in integer arithmetic so ratios such as
29/100 cannot lose a point to float representation error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from api_consistency.algorithm.field_compare import FieldOutcome
from api_consistency.result import FieldMismatch

__all__ = ["TableTally", "consistency_percentage", "summary_issues"]


def consistency_percentage(matching: int, total: int, itemized: int) -> int:
    """Return the integer consistency score.

    Args:
        matching: Units that matched (known-format warnings included).
        total: Units evaluated.
        itemized: Mismatches recorded in the result (warnings included).
    """
    if total == 0:
        return 0
    if itemized == 0:
        return 100
    return (matching * 100) // total


@dataclass(slots=True)
class TableTally:
    """Mutable accumulator for one table's comparison pass.

    Every unit counts toward the totals; only the first ``max_mismatches``
    non-matching units are itemized.
    """

    max_mismatches: int
    table: str | None = None
    total_comparisons: int = 0
    matching_comparisons: int = 0
    mismatches: list[FieldMismatch] = field(default_factory=list)

    def record(
        self,
        record_index: int,
        field_path: str,
        rest_value: Any,
        graphql_value: Any,
        outcome: FieldOutcome,
    ) -> None:
        self.total_comparisons += 1
        if outcome.matched:
            self.matching_comparisons += 1
        if outcome is FieldOutcome.MATCH:
            return
        if len(self.mismatches) < self.max_mismatches:
            self.mismatches.append(
                FieldMismatch(
                    record_index=record_index,
                    field=field_path,
                    rest_value=rest_value,
                    graphql_value=graphql_value,
                    is_warning=outcome.is_warning,
                    table=self.table,
                )
            )

    @property
    def data_consistency(self) -> int:
        return consistency_percentage(
            self.matching_comparisons, self.total_comparisons, len(self.mismatches)
        )

    @property
    def error_count(self) -> int:
        return sum(1 for m in self.mismatches if not m.is_warning)

    @property
    def warning_count(self) -> int:
        return sum(1 for m in self.mismatches if m.is_warning)


def summary_issues(
    consistency: int,
    matching: int,
    total: int,
    errors: int,
    warnings: int,
    overall: bool = False,
) -> list[str]:
    """Build the score/mismatch issue lines appended after a comparison.

    ``overall=True`` selects the wording used at the top of a multi-table
    result.
    """
    issues: list[str] = []
    if consistency < 100:
        label = "Overall data consistency" if overall else "Data consistency"
        issues.append(
            f"{label}: {consistency}% ({matching}/{total} field comparisons matched)"
        )
    scope = " across all tables" if overall else ""
    prefix = "total " if overall else ""
    if errors > 0:
        issues.append(f"{errors} {prefix}field mismatches found{scope}")
    if warnings > 0:
        issues.append(
            f"{warnings} {prefix}reference field format differences (known issue){scope}"
        )
    return issues
