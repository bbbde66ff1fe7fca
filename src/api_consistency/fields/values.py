"""Typed views over the field values each API style emits.

The two response styles encode the same data differently:

- REST (side A) stores scalars directly.  Relationship fields are either a
  plain id string or a ``{"link": ..., "value": ...}`` wrapper.
- GraphQL (side B) wraps every leaf in ``{"value": ..., "displayValue": ...}``.
  Relationship fields additionally carry the related record under a
  reference marker key (``"_reference"`` by default).

Raw JSON is parsed into these small frozen types at the point of use, so the
resolver and comparator match on types instead of probing nested dicts.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = [
    "GraphQLField",
    "GraphQLLeaf",
    "GraphQLReference",
    "RestLink",
    "parse_graphql_field",
]


@dataclass(frozen=True, slots=True)
class RestLink:
    """A REST relationship wrapper: ``{"link": <url>, "value": <sys_id>}``."""

    link: str
    value: str

    @classmethod
    def from_raw(cls, raw: Any) -> RestLink | None:
        """Return a ``RestLink`` when ``raw`` has the wrapper shape, else None.

        Both members must be present and non-empty and ``value`` must be a
        string; a wrapper with an empty ``value`` carries nothing to compare.
        """
        if not isinstance(raw, Mapping):
            return None
        link = raw.get("link")
        value = raw.get("value")
        if not link or not isinstance(value, str) or not value:
            return None
        return cls(link=str(link), value=value)


@dataclass(frozen=True, slots=True)
class GraphQLLeaf:
    """A GraphQL ``{value, displayValue}`` pair.

    Attributes:
        value: The raw ``value`` member (may be None).
        display_value: The ``displayValue`` member (may be None).
        has_value: Whether the ``value`` key was present at all.  A present
            ``null`` value wins over ``displayValue``; only an absent one falls
            back.
    """

    value: Any = None
    display_value: Any = None
    has_value: bool = False

    @property
    def scalar(self) -> Any:
        """The comparable value: ``value`` if present, else ``displayValue``."""
        return self.value if self.has_value else self.display_value


@dataclass(frozen=True, slots=True)
class GraphQLReference:
    """A GraphQL relationship field wrapping a nested record.

    Reference fields still carry their own ``value``/``displayValue`` (the
    related record's id and label), exposed through ``leaf``.
    """

    leaf: GraphQLLeaf
    record: Mapping[str, Any]

    @property
    def scalar(self) -> Any:
        return self.leaf.scalar


GraphQLField = GraphQLLeaf | GraphQLReference


def parse_graphql_field(raw: Any, reference_marker: str = "_reference") -> GraphQLField | None:
    """Classify one raw GraphQL field value.

    Args:
        raw: The value stored under a field name in a GraphQL record.
        reference_marker: Key that holds the nested record of a relationship.

    Returns:
        ``GraphQLReference`` when ``raw`` is an object whose marker holds an
        object, ``GraphQLLeaf`` for any other object, and None for missing or
        non-object values.
    """
    if not isinstance(raw, Mapping):
        return None
    leaf = GraphQLLeaf(
        value=raw.get("value"),
        display_value=raw.get("displayValue"),
        has_value="value" in raw,
    )
    nested = raw.get(reference_marker)
    if isinstance(nested, Mapping):
        return GraphQLReference(leaf=leaf, record=nested)
    return leaf
