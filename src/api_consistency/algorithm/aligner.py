"""Record alignment by identifier sort.

The REST and GraphQL APIs may return the same records in different native
orders.  Sorting each side independently on the same identifier (``sys_id``
by default) makes index ``i`` on one side describe the same entity as index
``i`` on the other, without asking the caller for a join key.

Records without an identifier sort under the empty-string key, so they group
together at the front.  If a result set has no identifier at all, every
record lands in that bucket and comparison degrades to native positional
order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api_consistency.cache import fingerprint

if TYPE_CHECKING:
    from api_consistency.cache import ComparisonCache
    from api_consistency.protocols import Record, ResponseAdapter

__all__ = ["align_records", "record_sort_key"]


def record_sort_key(record: Record, adapter: ResponseAdapter, id_field: str) -> str:
    """Return the string the record is ordered by (``""`` when it has no id)."""
    value: Any = adapter.resolve_field(record, id_field)
    if value is None or value == "":
        return ""
    return value if isinstance(value, str) else str(value)


def align_records(
    records: list[Record],
    adapter: ResponseAdapter,
    id_field: str = "sys_id",
    cache: ComparisonCache | None = None,
) -> list[Record]:
    """Return ``records`` stably sorted by identifier.

    Args:
        records: Records in native API order.  Not mutated.
        adapter: The side's adapter, used to read the identifier (flat lookup
            for REST, ``{value, displayValue}`` unwrapping for GraphQL).
        id_field: Identifier field path.
        cache: Optional cache.  Entries hold the sort permutation and are keyed
            by the adapter, the identifier and the full structural
            fingerprint of ``records``.  Adapters compare equal only when
            they read identifiers the same way.

    Returns:
        A new list of the caller's own record objects; repeated calls on
        equal input return equal lists.
    """
    if not records:
        return []

    def _order() -> tuple[int, ...]:
        keys = [record_sort_key(r, adapter, id_field) for r in records]
        return tuple(sorted(range(len(records)), key=keys.__getitem__))

    if cache is None:
        order = _order()
    else:
        key = (adapter, id_field, fingerprint(records))
        order = cache.get_or_compute("aligned", key, _order)
    return [records[i] for i in order]
