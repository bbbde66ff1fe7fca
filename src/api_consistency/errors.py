"""Exceptions raised inside the adapters.

None of these escape the public comparison functions: adapters catch them at
their ``extract_records`` boundary, log the reason and return no records.
"""

from __future__ import annotations

__all__ = ["MalformedResponseError"]


class MalformedResponseError(ValueError):
    """A raw API response does not match the envelope its adapter expects.

    Attributes:
        side: Response style that failed to parse ("rest" or "graphql").
        reason: Human-readable description of the first missing piece.
    """

    def __init__(self, side: str, reason: str) -> None:
        self.side = side
        self.reason = reason
        super().__init__(f"{side} response is malformed: {reason}")
