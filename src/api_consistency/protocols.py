"""ResponseAdapter Protocol: one implementation per API response style.

An adapter knows how to pull records out of its API's response envelope and
how to read a (possibly dot-walked) field from one of those records.  The
comparator never branches on the response style itself; it holds one adapter
per side.

Custom adapters need no base class.  Any object with a conformant ``side``
attribute and the two methods below passes ``isinstance`` checks::

    from api_consistency.protocols import ResponseAdapter

    class CsvAdapter:
        side = "csv"

        def extract_records(self, raw, table=None):
            return list(raw)

        def resolve_field(self, record, field_path):
            return record.get(field_path)

    assert isinstance(CsvAdapter(), ResponseAdapter)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

Record = Mapping[str, Any]


@runtime_checkable
class ResponseAdapter(Protocol):
    """Structural protocol for response-style adapters.

    ``extract_records`` must never raise: malformed envelopes yield ``[]``.
    ``resolve_field`` must never raise: unresolvable paths yield ``None``.
    Adapters are part of cache keys, so they must be hashable and compare equal
    only when they resolve fields the same way.  Identity equality qualifies.
    """

    side: str

    def extract_records(self, raw: Any, table: str | None = None) -> list[Record]: ...

    def resolve_field(self, record: Record, field_path: str) -> Any: ...
