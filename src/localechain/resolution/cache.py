"""Thread-safe memo of resolved handles and family chains.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - Plain dicts, no eviction: bundle definitions are static for the
      lifetime of a resolver
    - First writer wins: concurrent misses may compute duplicate handles,
      but only the first one stored is ever handed out

Cache Key Structure:
    Handles: (base_name, requested, default)
    - base_name: str
    - requested: Locale
    - default: Locale (selection depends on it, so it is part of the key)

    Chains: SelectedFamily
    - Requests that select the same family (fr_CA and fr_BE both landing on
      fr) share one HierarchyChain

The cache is a pure latency optimization. A resolver without one answers
identically.

Python 3.13+.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from localechain.core import Locale
    from localechain.resolution.handle import ResolvedHandle
    from localechain.resolution.hierarchy import HierarchyChain
    from localechain.resolution.selector import SelectedFamily

__all__ = ["ResolutionCache"]

logger = logging.getLogger(__name__)

_CacheKey: TypeAlias = "tuple[str, Locale, Locale]"


class ResolutionCache:
    """Memoizes ResolvedHandle per request and HierarchyChain per family.

    Resolution itself runs outside the lock; only lookups and the
    put-if-absent write are serialized.

    Attributes:
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
        discarded_writes: Redundant handles dropped by put_if_absent
    """

    __slots__ = ("_chains", "_discarded_writes", "_entries", "_hits", "_lock", "_misses")

    def __init__(self) -> None:
        self._entries: dict[_CacheKey, ResolvedHandle] = {}
        self._chains: dict[SelectedFamily, HierarchyChain] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0
        self._discarded_writes = 0

    def get(
        self, base_name: str, requested: Locale, default: Locale
    ) -> ResolvedHandle | None:
        """Get cached handle if present.

        Thread-safe. Returns None on cache miss.
        """
        key = (base_name, requested, default)
        with self._lock:
            handle = self._entries.get(key)
            if handle is None:
                self._misses += 1
            else:
                self._hits += 1
            return handle

    def put_if_absent(
        self,
        base_name: str,
        requested: Locale,
        default: Locale,
        handle: ResolvedHandle,
    ) -> ResolvedHandle:
        """Store ``handle`` unless another writer got there first.

        Thread-safe. At most one effective write per key.

        Returns:
            The canonical handle for the key (the stored one)
        """
        key = (base_name, requested, default)
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                self._discarded_writes += 1
                return existing
            self._entries[key] = handle

        logger.debug(
            "Cached %s for (%s, %s, default=%s)",
            handle.bundle_name,
            base_name,
            requested.tag or "<root>",
            default.tag or "<root>",
        )
        return handle

    def get_chain(self, family: SelectedFamily) -> HierarchyChain | None:
        """Get the cached ancestor chain of a selected family, if any.

        Thread-safe. Not counted in hits/misses, which track requests.
        """
        with self._lock:
            return self._chains.get(family)

    def put_chain_if_absent(
        self, family: SelectedFamily, chain: HierarchyChain
    ) -> HierarchyChain:
        """Store ``chain`` for ``family`` unless one is already cached.

        Thread-safe. First writer wins, like put_if_absent().

        Returns:
            The canonical chain for the family
        """
        with self._lock:
            return self._chains.setdefault(family, chain)

    def clear(self) -> None:
        """Clear all cached handles and chains.

        Thread-safe. Only needed when the backing store changes.
        """
        with self._lock:
            self._entries.clear()
            self._chains.clear()
            # Reset metrics on clear
            self._hits = 0
            self._misses = 0
            self._discarded_writes = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe. Returns current metrics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached handles
            - chains (int): Current number of cached family chains
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
            - discarded_writes (int): Redundant handles dropped by put_if_absent
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._entries),
                "chains": len(self._chains),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
                "discarded_writes": self._discarded_writes,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def hits(self) -> int:
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        with self._lock:
            return self._misses

    @property
    def discarded_writes(self) -> int:
        with self._lock:
            return self._discarded_writes
