"""GraphQLAdapter: records and fields from a GraphQL query API response.

Envelope::

    {"data": {"GlideRecord_Query": {"<table or alias>": {"_results": [...]}}}}

Every field of a record is a ``{"value", "displayValue"}`` pair.  A
relationship field additionally nests the related record under the reference
marker, so ``caller_id.department.name`` is resolved by descending::

    record["caller_id"]["_reference"]["department"]["_reference"]["name"]["value"]

The query-root key, records key and reference marker come from
``ComparisonConfig``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from api_consistency.algorithm.config import ComparisonConfig
from api_consistency.errors import MalformedResponseError
from api_consistency.fields.paths import FieldPath
from api_consistency.fields.values import GraphQLReference, parse_graphql_field
from api_consistency.protocols import Record

__all__ = ["GraphQLAdapter"]

logger = logging.getLogger(__name__)


class GraphQLAdapter:
    """Side B adapter for GraphQL query API responses.

    A single GraphQL response can hold several tables (one per alias).
    ``extract_records`` pulls one of them; multi-table callers fetch the
    alias mapping once with ``tables()`` and then call ``records_for()`` per
    alias.

    Args:
        config: Supplies ``query_root``, ``records_key`` and
            ``reference_marker``.  Defaults to ``ComparisonConfig()``.
    """

    side = "graphql"

    def __init__(self, config: ComparisonConfig | None = None) -> None:
        self._config = config if config is not None else ComparisonConfig()

    # Cache keys include the adapter, so equality tracks the config it reads with.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphQLAdapter):
            return NotImplemented
        return type(self) is type(other) and self._config == other._config

    def __hash__(self) -> int:
        return hash((type(self), self._config))

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def extract_records(self, raw: Any, table: str | None = None) -> list[Record]:
        """Return the records of ``table`` in a GraphQL response.

        Any missing or non-object level of the envelope yields ``[]`` and a
        logged warning; this method never raises.
        """
        if table is None:
            logger.warning("Could not extract GraphQL records: no table name given")
            return []
        try:
            return self._table_records(self._query_root(raw), table)
        except MalformedResponseError as exc:
            logger.warning("Could not extract GraphQL records for %s: %s", table, exc.reason)
            return []

    def tables(self, raw: Any) -> Mapping[str, Any]:
        """Return the alias -> table payload mapping under the query root.

        Returns an empty mapping (and logs a warning) when the envelope is
        malformed.
        """
        try:
            return self._query_root(raw)
        except MalformedResponseError as exc:
            logger.warning("Could not parse GraphQL multi-table response: %s", exc.reason)
            return {}

    def records_for(self, tables: Mapping[str, Any], table: str) -> list[Record]:
        """Return the records of one alias from a ``tables()`` mapping, or ``[]``."""
        try:
            return self._table_records(tables, table)
        except MalformedResponseError as exc:
            logger.debug("No GraphQL records for %s: %s", table, exc.reason)
            return []

    def _query_root(self, raw: Any) -> Mapping[str, Any]:
        if not isinstance(raw, Mapping):
            raise MalformedResponseError(
                self.side, f"expected an object, got {type(raw).__name__}"
            )
        data = raw.get("data")
        if not isinstance(data, Mapping):
            raise MalformedResponseError(self.side, "missing 'data' object")
        root = data.get(self._config.query_root)
        if not isinstance(root, Mapping):
            raise MalformedResponseError(
                self.side, f"missing '{self._config.query_root}' object"
            )
        return root

    def _table_records(self, tables: Mapping[str, Any], table: str) -> list[Record]:
        payload = tables.get(table)
        if not isinstance(payload, Mapping):
            raise MalformedResponseError(self.side, f"missing '{table}' object")
        records = payload.get(self._config.records_key)
        if not isinstance(records, list):
            raise MalformedResponseError(
                self.side, f"missing '{self._config.records_key}' array for '{table}'"
            )
        return list(records)

    # ------------------------------------------------------------------
    # Field resolution
    # ------------------------------------------------------------------

    def resolve_field(self, record: Record, field_path: str) -> Any:
        """Return the comparable value of a (possibly dot-walked) field.

        Every segment but the last must be a relationship carrying the
        reference marker; the last segment's ``value`` is returned, falling
        back to ``displayValue`` when ``value`` is absent.  Any broken hop
        yields None.
        """
        if not field_path or not isinstance(record, Mapping):
            return None

        path = FieldPath.parse(field_path)
        current: Mapping[str, Any] = record
        for hop in path.hops:
            field = parse_graphql_field(current.get(hop), self._config.reference_marker)
            if not isinstance(field, GraphQLReference):
                return None
            current = field.record

        leaf = parse_graphql_field(current.get(path.leaf), self._config.reference_marker)
        if leaf is None:
            return None
        return leaf.scalar
