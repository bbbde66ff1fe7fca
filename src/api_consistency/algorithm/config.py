"""ComparisonConfig: immutable settings for the consistency engine.

The defaults describe the ServiceNow-style payloads the benchmark targets:
records are aligned on ``sys_id``, GraphQL results live under
``data.GlideRecord_Query.<table>._results`` and relationship hops are wrapped
in a ``_reference`` object.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ComparisonConfig:
    """Immutable configuration for a ``ConsistencyComparator``.

    Attributes:
        id_field: Field used to align records on both sides before positional
            comparison.
        query_root: Key under ``data`` that holds the GraphQL table aliases.
        records_key: Key under each GraphQL table alias that holds the records.
        reference_marker: Key that wraps the nested record of a GraphQL
            relationship field.
        max_mismatches: Itemized mismatch cap for a single-table comparison.
        max_mismatches_per_table: Itemized mismatch cap per table in a
            multi-table comparison.
        cache_max_size: Entries held per cache namespace before LRU eviction.
        cache_ttl_seconds: Lifetime of a cache entry.
    """

    id_field: str = "sys_id"
    query_root: str = "GlideRecord_Query"
    records_key: str = "_results"
    reference_marker: str = "_reference"
    max_mismatches: int = 100
    max_mismatches_per_table: int = 50
    cache_max_size: int = 512
    cache_ttl_seconds: float = 300.0

    def __post_init__(self) -> None:
        for name in ("id_field", "query_root", "records_key", "reference_marker"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                msg = f"{name} must be a non-empty string, got {value!r}"
                raise ValueError(msg)
        if self.max_mismatches < 1:
            msg = f"max_mismatches must be >= 1, got {self.max_mismatches}"
            raise ValueError(msg)
        if self.max_mismatches_per_table < 1:
            msg = (
                "max_mismatches_per_table must be >= 1, "
                f"got {self.max_mismatches_per_table}"
            )
            raise ValueError(msg)
        if self.cache_max_size < 1:
            msg = f"cache_max_size must be >= 1, got {self.cache_max_size}"
            raise ValueError(msg)
        if self.cache_ttl_seconds <= 0.0:
            msg = f"cache_ttl_seconds must be > 0, got {self.cache_ttl_seconds}"
            raise ValueError(msg)
