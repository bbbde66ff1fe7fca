"""Field primitives shared by the adapters and the comparator.

Re-exports:
- FieldPath: parsed dot-walked field reference
- RestLink: REST relationship wrapper ``{link, value}``
- GraphQLLeaf / GraphQLReference: GraphQL ``{value, displayValue}`` leaf and
  relationship wrapper
- parse_graphql_field: classifies a raw GraphQL field value
"""

from api_consistency.fields.paths import FieldPath
from api_consistency.fields.values import (
    GraphQLField,
    GraphQLLeaf,
    GraphQLReference,
    RestLink,
    parse_graphql_field,
)

__all__ = [
    "FieldPath",
    "GraphQLField",
    "GraphQLLeaf",
    "GraphQLReference",
    "RestLink",
    "parse_graphql_field",
]
