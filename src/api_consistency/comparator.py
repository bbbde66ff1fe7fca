"""ConsistencyComparator: the engine that scores REST vs GraphQL responses.

Wires the side adapters, the aligner, the field comparator and the scorer
into two entry points:

- ``compare()``: one REST response vs one GraphQL response for one table.
- ``compare_multi_table()``: one REST response per declared sub-query vs a
  single GraphQL response holding every table under its alias.

Flow per table::

    extract (adapter) -> align (sys_id sort) -> for each aligned pair,
    for each field: resolve (adapter) -> normalize -> compare_field -> tally

Neither entry point raises on malformed data.  Envelope problems surface as
empty record sets (and therefore record-count issues); arity problems surface
as a zero-score result carrying an explanatory issue.

Each comparator owns one ``ComparisonCache``.  The cache only short-cuts
alignment, string normalization and nested-field resolution; calling
``compare()`` twice with the same inputs always produces equal results.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from api_consistency.adapters import GraphQLAdapter, RestAdapter
from api_consistency.algorithm.aligner import align_records
from api_consistency.algorithm.config import ComparisonConfig
from api_consistency.algorithm.field_compare import compare_field
from api_consistency.algorithm.normalizer import ValueNormalizer
from api_consistency.algorithm.scoring import (
    TableTally,
    consistency_percentage,
    summary_issues,
)
from api_consistency.cache import ComparisonCache, fingerprint
from api_consistency.protocols import Record, ResponseAdapter
from api_consistency.result import (
    ComparisonResult,
    FieldMismatch,
    MultiTableComparisonResult,
    TableResult,
)
from api_consistency.subquery import SubQuery

__all__ = ["ConsistencyComparator"]

logger = logging.getLogger(__name__)


class ConsistencyComparator:
    """Scores how consistently two API styles return the same data.

    Example::

        from api_consistency.comparator import ConsistencyComparator

        cmp = ConsistencyComparator()
        rest = {"result": [{"sys_id": "1", "number": "INC1"}]}
        graphql = {"data": {"GlideRecord_Query": {"incident": {"_results": [
            {"sys_id": {"value": "1"}, "number": {"value": "INC1"}},
        ]}}}}
        result = cmp.compare(rest, graphql, "incident", ["number"])
        result.is_equivalent      # True
        result.data_consistency   # 100

    Args:
        config: Engine settings.  Defaults to ``ComparisonConfig()``.
        cache: Cache to memoize into.  Defaults to a fresh ``ComparisonCache``
            sized from ``config``; pass one explicitly to control its clock or
            share it between comparators.  Entries are keyed by adapter, so
            comparators with different configs never see each other's results.
        rest_adapter: Side A adapter.  Defaults to ``RestAdapter()``.
        graphql_adapter: Side B adapter.  Defaults to ``GraphQLAdapter(config)``.
    """

    def __init__(
        self,
        config: ComparisonConfig | None = None,
        cache: ComparisonCache | None = None,
        rest_adapter: ResponseAdapter | None = None,
        graphql_adapter: GraphQLAdapter | None = None,
    ) -> None:
        self._config: ComparisonConfig = config if config is not None else ComparisonConfig()
        self._cache: ComparisonCache = (
            cache
            if cache is not None
            else ComparisonCache(
                max_size=self._config.cache_max_size,
                ttl=self._config.cache_ttl_seconds,
            )
        )
        self._rest: ResponseAdapter = rest_adapter if rest_adapter is not None else RestAdapter()
        self._graphql: GraphQLAdapter = (
            graphql_adapter if graphql_adapter is not None else GraphQLAdapter(self._config)
        )
        self._normalize = ValueNormalizer(self._cache)

    @property
    def config(self) -> ComparisonConfig:
        return self._config

    @property
    def cache(self) -> ComparisonCache:
        return self._cache

    # ------------------------------------------------------------------
    # Single table
    # ------------------------------------------------------------------

    def compare(
        self,
        rest_response: Any,
        graphql_response: Any,
        table: str,
        fields: Sequence[str],
    ) -> ComparisonResult:
        """Compare one table's REST and GraphQL responses.

        Args:
            rest_response: Parsed REST body (``{"result": [...]}`` or a list).
            graphql_response: Parsed GraphQL body.
            table: Table name / GraphQL alias holding the records.
            fields: Field paths to compare, in order.  Dot-walked paths are
                flat keys on the REST side and reference hops on the GraphQL
                side.

        Returns:
            A ``ComparisonResult``; never raises on malformed responses.
        """
        t0 = time.perf_counter()

        rest_records = self._rest.extract_records(rest_response, table)
        graphql_records = self._graphql.extract_records(graphql_response, table)
        rest_count = len(rest_records)
        graphql_count = len(graphql_records)

        if rest_count == 0 and graphql_count == 0:
            logger.debug("No records on either side for %s; trivially consistent", table)
            return ComparisonResult(
                is_equivalent=True,
                record_count_match=True,
                data_consistency=100,
                issues=[],
                rest_record_count=0,
                graphql_record_count=0,
                field_mismatches=[],
                only_known_issues=False,
                computation_time_ms=(time.perf_counter() - t0) * 1000.0,
            )

        issues: list[str] = []
        record_count_match = rest_count == graphql_count
        if not record_count_match:
            issues.append(
                f"Record count mismatch: REST returned {rest_count}, "
                f"GraphQL returned {graphql_count}"
            )

        tally = self._tally(
            rest_records, graphql_records, fields, self._config.max_mismatches
        )
        consistency = tally.data_consistency
        issues.extend(
            summary_issues(
                consistency,
                tally.matching_comparisons,
                tally.total_comparisons,
                tally.error_count,
                tally.warning_count,
            )
        )

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Compared %s: %d/%d field comparisons matched (%d%%) in %.2f ms",
            table,
            tally.matching_comparisons,
            tally.total_comparisons,
            consistency,
            elapsed_ms,
        )

        return ComparisonResult(
            is_equivalent=_is_equivalent(record_count_match, tally.mismatches, consistency),
            record_count_match=record_count_match,
            data_consistency=consistency,
            issues=issues,
            rest_record_count=rest_count,
            graphql_record_count=graphql_count,
            field_mismatches=list(tally.mismatches),
            only_known_issues=_only_known_issues(tally.mismatches),
            total_comparisons=tally.total_comparisons,
            matching_comparisons=tally.matching_comparisons,
            computation_time_ms=elapsed_ms,
        )

    # ------------------------------------------------------------------
    # Multi table
    # ------------------------------------------------------------------

    def compare_multi_table(
        self,
        rest_responses: Sequence[Any],
        graphql_response: Any,
        sub_queries: Sequence[SubQuery | Mapping[str, Any]],
    ) -> MultiTableComparisonResult:
        """Compare several REST responses against one combined GraphQL response.

        Args:
            rest_responses: One parsed REST body per sub-query, same order.
            graphql_response: The single GraphQL body holding every table
                under its alias.
            sub_queries: Declared sub-queries (``SubQuery`` objects or
                ``{"table", "fields", "filter"}`` mappings).

        Returns:
            A ``MultiTableComparisonResult`` whose score sums every table's
            comparison units.  Arity or descriptor errors yield a zero-score
            result with an explanatory issue; nothing is raised.
        """
        t0 = time.perf_counter()

        if not isinstance(rest_responses, Sequence) or not isinstance(sub_queries, Sequence):
            issue = "REST responses and REST calls must both be sequences"
            logger.warning(issue)
            return _failed_multi_table(issue, t0)

        if len(rest_responses) != len(sub_queries):
            issue = (
                f"Mismatch between REST responses ({len(rest_responses)}) "
                f"and REST calls ({len(sub_queries)})"
            )
            logger.warning(issue)
            return _failed_multi_table(issue, t0)

        queries: list[SubQuery] = []
        for index, raw_query in enumerate(sub_queries):
            try:
                queries.append(SubQuery.coerce(raw_query))
            except (KeyError, TypeError, ValueError) as exc:
                issue = f"Invalid sub-query at position {index}: {exc}"
                logger.warning(issue)
                return _failed_multi_table(issue, t0)

        graphql_tables = self._graphql.tables(graphql_response)

        issues: list[str] = []
        mismatches: list[FieldMismatch] = []
        table_results: list[TableResult] = []
        seen_tables: set[str] = set()
        total_rest = 0
        total_graphql = 0
        total_comparisons = 0
        total_matching = 0

        for index, (query, rest_response) in enumerate(zip(queries, rest_responses, strict=True)):
            identifier = f"{query.table}_{index}"
            rest_records = self._rest.extract_records(rest_response, query.table)
            graphql_records = self._graphql.records_for(graphql_tables, query.table)
            rest_count = len(rest_records)
            graphql_count = len(graphql_records)
            total_rest += rest_count
            total_graphql += graphql_count

            table_issues: list[str] = []
            if query.table in seen_tables:
                table_issues.append(
                    f"Table {query.table} appears multiple times in query - "
                    "GraphQL results may be combined"
                )
            seen_tables.add(query.table)

            if rest_count == 0 and graphql_count == 0:
                tally = TableTally(self._config.max_mismatches_per_table, table=identifier)
                table_consistency = 100
            else:
                if rest_count != graphql_count:
                    table_issues.append(
                        f"Record count mismatch: REST returned {rest_count}, "
                        f"GraphQL returned {graphql_count}"
                    )
                tally = self._tally(
                    rest_records,
                    graphql_records,
                    query.fields,
                    self._config.max_mismatches_per_table,
                    table=identifier,
                )
                table_consistency = tally.data_consistency
                if table_consistency < 100:
                    table_issues.append(
                        f"Data consistency: {table_consistency}% "
                        f"({tally.matching_comparisons}/{tally.total_comparisons} "
                        "field comparisons matched)"
                    )

            total_comparisons += tally.total_comparisons
            total_matching += tally.matching_comparisons
            mismatches.extend(tally.mismatches)

            table_results.append(
                TableResult(
                    table_name=identifier,
                    rest_record_count=rest_count,
                    graphql_record_count=graphql_count,
                    data_consistency=table_consistency,
                    field_mismatches=list(tally.mismatches),
                    issues=table_issues,
                    total_comparisons=tally.total_comparisons,
                    matching_comparisons=tally.matching_comparisons,
                )
            )
            if table_issues:
                issues.append(f"Table {identifier}: {', '.join(table_issues)}")

        record_count_match = total_rest == total_graphql
        if not record_count_match:
            issues.append(
                f"Overall record count mismatch: REST returned {total_rest}, "
                f"GraphQL returned {total_graphql}"
            )

        consistency = consistency_percentage(total_matching, total_comparisons, len(mismatches))
        errors = sum(1 for m in mismatches if not m.is_warning)
        issues.extend(
            summary_issues(
                consistency,
                total_matching,
                total_comparisons,
                errors,
                len(mismatches) - errors,
                overall=True,
            )
        )

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Compared %d tables: %d/%d field comparisons matched (%d%%) in %.2f ms",
            len(queries),
            total_matching,
            total_comparisons,
            consistency,
            elapsed_ms,
        )

        return MultiTableComparisonResult(
            is_equivalent=_is_equivalent(record_count_match, mismatches, consistency),
            record_count_match=record_count_match,
            data_consistency=consistency,
            issues=issues,
            rest_record_count=total_rest,
            graphql_record_count=total_graphql,
            field_mismatches=mismatches,
            only_known_issues=_only_known_issues(mismatches),
            total_comparisons=total_comparisons,
            matching_comparisons=total_matching,
            computation_time_ms=elapsed_ms,
            table_results=table_results,
        )

    # ------------------------------------------------------------------
    # Comparison loop
    # ------------------------------------------------------------------

    def _tally(
        self,
        rest_records: list[Record],
        graphql_records: list[Record],
        fields: Sequence[str],
        max_mismatches: int,
        table: str | None = None,
    ) -> TableTally:
        """Align both sides and run every (record pair, field) comparison unit."""
        id_field = self._config.id_field
        aligned_rest = align_records(rest_records, self._rest, id_field, self._cache)
        aligned_graphql = align_records(graphql_records, self._graphql, id_field, self._cache)

        tally = TableTally(max_mismatches, table=table)
        for index in range(min(len(aligned_rest), len(aligned_graphql))):
            rest_record = aligned_rest[index]
            graphql_record = aligned_graphql[index]
            graphql_key = fingerprint(graphql_record)
            for field_path in fields:
                rest_value = self._normalize(self._rest.resolve_field(rest_record, field_path))
                graphql_value = self._normalize(
                    self._resolve_graphql(graphql_record, graphql_key, field_path)
                )
                outcome = compare_field(rest_value, graphql_value, normalize=self._normalize)
                tally.record(index, field_path, rest_value, graphql_value, outcome)
        return tally

    def _resolve_graphql(self, record: Record, record_key: Hashable, field_path: str) -> Any:
        return self._cache.get_or_compute(
            "resolved",
            (self._graphql, record_key, field_path),
            lambda: self._graphql.resolve_field(record, field_path),
        )


def _is_equivalent(
    record_count_match: bool, mismatches: list[FieldMismatch], consistency: int
) -> bool:
    return record_count_match and not mismatches and consistency == 100


def _only_known_issues(mismatches: list[FieldMismatch]) -> bool:
    return bool(mismatches) and all(m.is_warning for m in mismatches)


def _failed_multi_table(issue: str, t0: float) -> MultiTableComparisonResult:
    return MultiTableComparisonResult(
        is_equivalent=False,
        record_count_match=False,
        data_consistency=0,
        issues=[issue],
        rest_record_count=0,
        graphql_record_count=0,
        field_mismatches=[],
        only_known_issues=False,
        computation_time_ms=(time.perf_counter() - t0) * 1000.0,
        table_results=[],
    )
