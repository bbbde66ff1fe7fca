"""FieldPath: a parsed dot-walked field reference such as ``caller_id.department.name``."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["FieldPath"]


@dataclass(frozen=True, slots=True)
class FieldPath:
    """A dot-separated field path.

    Attributes:
        raw: The path exactly as the caller declared it.
        segments: ``raw`` split on ``"."``.
    """

    raw: str
    segments: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str) -> FieldPath:
        return cls(raw=raw, segments=tuple(raw.split(".")))

    @property
    def hops(self) -> tuple[str, ...]:
        """Relationship segments walked before the leaf (empty for a plain field)."""
        return self.segments[:-1]

    @property
    def leaf(self) -> str:
        return self.segments[-1]

    def __str__(self) -> str:
        return self.raw
