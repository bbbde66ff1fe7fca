"""BenchmarkScoreboard: head-to-head verdicts and summary statistics.

Works on numbers the caller already measured (response times, payload sizes,
success flags); nothing here issues a request.

Per run, a side wins only when it succeeded and was strictly faster::

    REST wins     <=> rest.success    and rest.ms    < graphql.ms
    GraphQL wins  <=> graphql.success and graphql.ms < rest.ms
    otherwise tie

The summary reports averages and p95 latencies per side, payload totals,
success rate, GraphQL's latency improvement over REST and the mean data
consistency of the runs that carried a comparison result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto

import numpy as np

from api_consistency.result import ComparisonResult

__all__ = [
    "ApiMeasurement",
    "BenchmarkRun",
    "BenchmarkScoreboard",
    "BenchmarkSummary",
    "Winner",
    "decide_winner",
]


class Winner(StrEnum):
    REST = auto()
    GRAPHQL = auto()
    TIE = auto()


@dataclass(frozen=True, slots=True)
class ApiMeasurement:
    """Measured cost of one side of a benchmark run.

    Attributes:
        response_time_ms: Total response time (summed over ``request_count``
            calls for multi-table REST runs).
        payload_size: Total response payload in bytes.
        request_count: Number of HTTP calls this side needed.
        success: Whether every call succeeded.
        all_response_times: Individual timings of repeated calls, if any.
    """

    response_time_ms: float
    payload_size: int
    request_count: int = 1
    success: bool = True
    all_response_times: tuple[float, ...] = ()


def decide_winner(rest: ApiMeasurement, graphql: ApiMeasurement) -> Winner:
    """Return which side won a run (successful and strictly faster)."""
    if rest.success and rest.response_time_ms < graphql.response_time_ms:
        return Winner.REST
    if graphql.success and graphql.response_time_ms < rest.response_time_ms:
        return Winner.GRAPHQL
    return Winner.TIE


@dataclass(frozen=True, slots=True)
class BenchmarkRun:
    test_id: str
    rest: ApiMeasurement
    graphql: ApiMeasurement
    winner: Winner
    comparison: ComparisonResult | None = None


@dataclass(frozen=True, slots=True)
class BenchmarkSummary:
    """Aggregate statistics over every recorded run.

    Attributes:
        improvement: Percent by which GraphQL's average latency beats REST's
            (negative when GraphQL is slower; 0 when REST averages 0 ms).
        success_rate: Percent of runs where both sides succeeded.
        average_consistency: Mean ``data_consistency`` over runs with a
            comparison result; None when no run carried one.
    """

    total_tests: int = 0
    rest_wins: int = 0
    graphql_wins: int = 0
    ties: int = 0
    average_rest_response_time: float = 0.0
    average_graphql_response_time: float = 0.0
    p95_rest_response_time: float = 0.0
    p95_graphql_response_time: float = 0.0
    total_rest_payload_size: int = 0
    total_graphql_payload_size: int = 0
    success_rate: float = 0.0
    improvement: float = 0.0
    average_consistency: float | None = None


@dataclass
class BenchmarkScoreboard:
    """Accumulates benchmark runs and summarizes them.

    Example::

        board = BenchmarkScoreboard()
        board.record("incidents", ApiMeasurement(120.0, 5_000), ApiMeasurement(80.0, 2_000))
        board.summary().graphql_wins   # 1
    """

    runs: list[BenchmarkRun] = field(default_factory=list)

    def record(
        self,
        test_id: str,
        rest: ApiMeasurement,
        graphql: ApiMeasurement,
        comparison: ComparisonResult | None = None,
    ) -> BenchmarkRun:
        run = BenchmarkRun(
            test_id=test_id,
            rest=rest,
            graphql=graphql,
            winner=decide_winner(rest, graphql),
            comparison=comparison,
        )
        self.runs.append(run)
        return run

    def clear(self) -> None:
        self.runs.clear()

    def summary(self) -> BenchmarkSummary:
        """Return statistics over every recorded run (all zeros when empty)."""
        if not self.runs:
            return BenchmarkSummary()

        rest_times = np.array([r.rest.response_time_ms for r in self.runs], dtype=float)
        graphql_times = np.array([r.graphql.response_time_ms for r in self.runs], dtype=float)
        winners = [r.winner for r in self.runs]
        successes = [r.rest.success and r.graphql.success for r in self.runs]
        consistencies = [
            r.comparison.data_consistency for r in self.runs if r.comparison is not None
        ]

        avg_rest = float(np.mean(rest_times))
        avg_graphql = float(np.mean(graphql_times))
        improvement = (avg_rest - avg_graphql) / avg_rest * 100.0 if avg_rest > 0 else 0.0

        return BenchmarkSummary(
            total_tests=len(self.runs),
            rest_wins=winners.count(Winner.REST),
            graphql_wins=winners.count(Winner.GRAPHQL),
            ties=winners.count(Winner.TIE),
            average_rest_response_time=avg_rest,
            average_graphql_response_time=avg_graphql,
            p95_rest_response_time=float(np.percentile(rest_times, 95)),
            p95_graphql_response_time=float(np.percentile(graphql_times, 95)),
            total_rest_payload_size=sum(r.rest.payload_size for r in self.runs),
            total_graphql_payload_size=sum(r.graphql.payload_size for r in self.runs),
            success_rate=float(np.mean(successes)) * 100.0,
            improvement=improvement,
            average_consistency=(
                float(np.mean(consistencies)) if consistencies else None
            ),
        )
