"""algorithm subpackage: the pure building blocks of a consistency comparison.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from api_consistency.algorithm import FieldOutcome, compare_field

    compare_field("INC1", " INC1 ")                                   # FieldOutcome.MATCH
    compare_field({"link": "https://x/u/1", "value": "1"}, "1")      # FieldOutcome.WARNING
    compare_field("2", "3")                                           # FieldOutcome.MISMATCH
"""

from __future__ import annotations

from api_consistency.algorithm.aligner import align_records, record_sort_key
from api_consistency.algorithm.config import ComparisonConfig
from api_consistency.algorithm.field_compare import (
    FieldOutcome,
    compare_field,
    is_known_format_difference,
)
from api_consistency.algorithm.normalizer import ValueNormalizer, normalize_value
from api_consistency.algorithm.scoring import (
    TableTally,
    consistency_percentage,
    summary_issues,
)

__all__ = [
    "ComparisonConfig",
    "FieldOutcome",
    "TableTally",
    "ValueNormalizer",
    "align_records",
    "compare_field",
    "consistency_percentage",
    "is_known_format_difference",
    "normalize_value",
    "record_sort_key",
    "summary_issues",
]
