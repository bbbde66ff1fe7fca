"""Adapters subpackage: one ``ResponseAdapter`` per API response style.

- RestAdapter: side A, ``{"result": [...]}`` or bare-array envelopes with
  flat (pre-flattened) field keys.
- GraphQLAdapter: side B, ``data.<query root>.<alias>.<records key>``
  envelopes with ``{value, displayValue}`` leaves and nested references.

Both satisfy ``api_consistency.protocols.ResponseAdapter`` structurally.
"""

from api_consistency.adapters.graphql import GraphQLAdapter
from api_consistency.adapters.rest import RestAdapter

__all__ = ["GraphQLAdapter", "RestAdapter"]
