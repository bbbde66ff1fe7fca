"""api-consistency - data-consistency scoring for REST vs GraphQL responses."""

from __future__ import annotations

import logging

from api_consistency.algorithm.config import ComparisonConfig
from api_consistency.api import (
    compare_multi_table_responses,
    compare_responses,
    consistency_score,
    is_consistent,
)
from api_consistency.benchmark import ApiMeasurement, BenchmarkScoreboard, Winner
from api_consistency.cache import ComparisonCache
from api_consistency.comparator import ConsistencyComparator
from api_consistency.result import (
    ComparisonResult,
    FieldMismatch,
    MultiTableComparisonResult,
    TableResult,
)
from api_consistency.subquery import SubQuery

# Library logging: the host application decides where records go.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ApiMeasurement",
    "BenchmarkScoreboard",
    "ComparisonCache",
    "ComparisonConfig",
    "ComparisonResult",
    "ConsistencyComparator",
    "FieldMismatch",
    "MultiTableComparisonResult",
    "SubQuery",
    "TableResult",
    "Winner",
    "compare_multi_table_responses",
    "compare_responses",
    "consistency_score",
    "is_consistent",
]
