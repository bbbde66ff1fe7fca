"""Scalar value normalization shared by both response styles.

The REST and GraphQL APIs disagree on how absent data is spelled: one side
returns ``""`` where the other returns ``null``.  Normalization collapses both
to ``None`` and strips surrounding whitespace so the two can be compared with
plain equality.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from api_consistency.cache import ComparisonCache

__all__ = ["ValueNormalizer", "normalize_value"]


def normalize_value(value: Any) -> Any:
    """Return the canonical form of a field value.

    - ``None`` stays ``None``.
    - Strings are stripped; an empty result becomes ``None``.
    - Everything else passes through unchanged.

    The function is idempotent: ``normalize_value(normalize_value(v)) ==
    normalize_value(v)``.
    """
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    return value


class ValueNormalizer:
    """``normalize_value`` memoized through a ``ComparisonCache`` namespace.

    Only strings go through the cache; other values are returned untouched so
    cache keys stay hashable and cheap.
    """

    def __init__(self, cache: ComparisonCache | None = None) -> None:
        self._cache = cache

    def __call__(self, value: Any) -> Any:
        if self._cache is None or not isinstance(value, str):
            return normalize_value(value)
        return self._cache.get_or_compute(
            "normalize", value, lambda: normalize_value(value)
        )
