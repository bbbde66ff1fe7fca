"""ComparisonCache: TTL + LRU memoization owned by one comparator instance.

Holds one ``cachetools.TTLCache`` per namespace (record sort orders, normalized
strings, resolved GraphQL fields).  Entries are evicted silently when a
namespace exceeds ``max_size`` (least recently used first) or when they are
older than ``ttl`` seconds.  The cache is a pure performance detail: every
value it returns is exactly what a cold computation would have produced.

Each ``ComparisonCache`` instance owns its own ``TTLCache`` objects, so two
comparators never observe each other's entries.  A cache handed to several
comparators keys every entry by the adapter that produced it, so only
adapters reading with the same configuration share results.  All access
goes through a re-entrant lock, which keeps the cache safe when a comparator
is shared between threads.

Expired entries are dropped lazily on access.  Long-lived hosts (a UI that
re-renders the same comparison) can additionally start a background sweeper
that calls ``expire()`` on a fixed interval::

    from api_consistency.cache import ComparisonCache

    cache = ComparisonCache(max_size=512, ttl=300.0)
    cache.start_sweeper(interval=300.0)
    ...
    cache.stop_sweeper()
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Hashable, Mapping
from typing import Any, TypeVar

from cachetools import TTLCache

__all__ = ["ComparisonCache", "fingerprint"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()

_SCALARS = (str, int, float, bool, type(None))


def fingerprint(value: Any) -> Hashable:
    """Return a hashable, type-preserving structural form of a JSON-like value.

    Every node is tagged with its type name, so ``[1]`` and ``(1,)``, ``1`` and
    ``"1"`` or ``1`` and ``True`` get distinct fingerprints.  Mapping key order
    is preserved, so two payloads that differ only in key order are distinct
    too.  Leaves that are neither JSON scalars nor containers are tagged with
    their qualified type name and ``repr``.
    """
    if isinstance(value, _SCALARS):
        return (type(value).__name__, value)
    if isinstance(value, Mapping):
        items = tuple((fingerprint(k), fingerprint(v)) for k, v in value.items())
        return (type(value).__qualname__, items)
    if isinstance(value, (list, tuple)):
        return (type(value).__qualname__, tuple(fingerprint(v) for v in value))
    if isinstance(value, (set, frozenset)):
        return (type(value).__qualname__, frozenset(fingerprint(v) for v in value))
    return (type(value).__qualname__, repr(value))


class ComparisonCache:
    """Namespaced TTL/LRU cache with hit/miss statistics.

    Args:
        max_size: Maximum number of entries held per namespace.  Defaults to 512.
        ttl: Entry lifetime in seconds.  Defaults to 300 (five minutes).
        timer: Clock used for expiry.  Defaults to ``time.monotonic``; tests
            inject a fake clock to exercise expiry without sleeping.
    """

    def __init__(
        self,
        max_size: int = 512,
        ttl: float = 300.0,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_size = max_size
        self._ttl = ttl
        self._timer = timer
        self._namespaces: dict[str, TTLCache[Hashable, Any]] = {}
        self._lock = threading.RLock()
        self._sweeper: threading.Timer | None = None
        self._sweep_interval: float | None = None
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """Maximum number of entries per namespace."""
        return self._max_size

    @property
    def ttl(self) -> float:
        """Entry lifetime in seconds."""
        return self._ttl

    @property
    def curr_size(self) -> int:
        """Number of live entries across all namespaces."""
        with self._lock:
            return sum(int(ns.currsize) for ns in self._namespaces.values())

    @property
    def sweeper_running(self) -> bool:
        """Whether the background expiry sweeper is scheduled."""
        with self._lock:
            return self._sweeper is not None

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _namespace(self, name: str) -> TTLCache[Hashable, Any]:
        ns = self._namespaces.get(name)
        if ns is None:
            ns = TTLCache(maxsize=self._max_size, ttl=self._ttl, timer=self._timer)
            self._namespaces[name] = ns
        return ns

    def get_or_compute(self, namespace: str, key: Hashable, factory: Callable[[], T]) -> T:
        """Return the cached value for ``key`` or compute, store and return it.

        ``None`` is a legitimate cached value (an unresolvable field path), so
        presence is tracked with a sentinel rather than truthiness.
        """
        with self._lock:
            ns = self._namespace(namespace)
            cached = ns.get(key, _MISSING)
            if cached is not _MISSING:
                self.hits += 1
                return cached  # type: ignore[no-any-return]
            self.misses += 1
            value = factory()
            ns[key] = value
            return value

    def clear(self) -> None:
        """Drop every entry and reset statistics."""
        with self._lock:
            for ns in self._namespaces.values():
                ns.clear()
            self.hits = 0
            self.misses = 0

    def expire(self) -> int:
        """Remove expired entries from every namespace.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            removed = 0
            for ns in self._namespaces.values():
                before = int(ns.currsize)
                ns.expire()
                removed += before - int(ns.currsize)
        if removed:
            logger.debug("Expired %d comparison cache entries", removed)
        return removed

    # ------------------------------------------------------------------
    # Background sweeper
    # ------------------------------------------------------------------

    def start_sweeper(self, interval: float | None = None) -> None:
        """Start a daemon timer that calls ``expire()`` every ``interval`` seconds.

        Defaults to the cache TTL.  Calling it again while running is a no-op.
        """
        with self._lock:
            if self._sweeper is not None:
                return
            self._sweep_interval = interval if interval is not None else self._ttl
            self._schedule()

    def stop_sweeper(self) -> None:
        """Cancel the background sweeper if it is running."""
        with self._lock:
            if self._sweeper is not None:
                self._sweeper.cancel()
            self._sweeper = None
            self._sweep_interval = None

    def _schedule(self) -> None:
        assert self._sweep_interval is not None
        sweeper = threading.Timer(self._sweep_interval, self._sweep)
        sweeper.daemon = True
        self._sweeper = sweeper
        sweeper.start()

    def _sweep(self) -> None:
        self.expire()
        with self._lock:
            # stop_sweeper() may have run while expire() was in progress
            if self._sweeper is not None:
                self._schedule()
