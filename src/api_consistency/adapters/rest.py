"""RestAdapter: records and fields from a REST table API response.

Envelope: ``{"result": [record, ...]}`` or a bare ``[record, ...]``.

Field lookup is always a flat key lookup, dot-walked paths included: the REST
API is queried with ``sysparm_fields=caller_id.user_name`` and answers with the
literal key ``"caller_id.user_name"``, so no traversal is needed (or correct).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from api_consistency.errors import MalformedResponseError
from api_consistency.protocols import Record

__all__ = ["RestAdapter"]

logger = logging.getLogger(__name__)


class RestAdapter:
    """Side A adapter for REST table API responses.

    Example::

        adapter = RestAdapter()
        records = adapter.extract_records({"result": [{"number": "INC1"}]})
        adapter.resolve_field(records[0], "number")   # "INC1"
    """

    side = "rest"

    # Stateless: every instance of one class reads records the same way.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RestAdapter):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def extract_records(self, raw: Any, table: str | None = None) -> list[Record]:
        """Return the records of a REST response, or ``[]`` if it is malformed.

        Args:
            raw: Parsed JSON body of the REST call.
            table: Unused; REST responses carry exactly one table.

        Returns:
            A new list holding the response's records in their native order.
        """
        try:
            return self._records(raw)
        except MalformedResponseError as exc:
            logger.warning("Could not extract REST records: %s", exc.reason)
            return []

    def _records(self, raw: Any) -> list[Record]:
        if isinstance(raw, list):
            return list(raw)
        if not isinstance(raw, Mapping):
            raise MalformedResponseError(
                self.side, f"expected an object or array, got {type(raw).__name__}"
            )
        result = raw.get("result")
        if not isinstance(result, list):
            raise MalformedResponseError(self.side, "missing 'result' array")
        return list(result)

    def resolve_field(self, record: Record, field_path: str) -> Any:
        """Return the raw value stored under ``field_path`` (no traversal)."""
        if not isinstance(record, Mapping):
            return None
        return record.get(field_path)
