"""SubQuery: one declared table of a multi-table comparison."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["SubQuery"]


@dataclass(frozen=True, slots=True)
class SubQuery:
    """A table (or GraphQL alias) and the field paths compared for it.

    Attributes:
        table: Table name; also the GraphQL alias the records live under.
        fields: Declared field paths, in comparison order.
        filter: Encoded query filter the request was built with.  Carried for
            reporting only; it plays no part in comparison.
    """

    table: str
    fields: tuple[str, ...]
    filter: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.table, str) or not self.table:
            msg = f"table must be a non-empty string, got {self.table!r}"
            raise ValueError(msg)
        # Accept any iterable of paths but store an immutable tuple
        object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def coerce(cls, value: SubQuery | Mapping[str, Any]) -> SubQuery:
        """Return ``value`` as a ``SubQuery``.

        Mappings use the collaborator's ``{"table", "fields", "filter"}`` shape.
        """
        if isinstance(value, SubQuery):
            return value
        return cls(
            table=value["table"],
            fields=tuple(value.get("fields") or ()),
            filter=value.get("filter"),
        )
