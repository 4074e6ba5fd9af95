"""Resolved handle: the public result of bundle resolution.

A ResolvedHandle pins one selected family and its ancestor chain. Every
key lookup through the handle walks that chain and nothing else.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from localechain.diagnostics import KeysUnsupportedError, MissingKeyError
from localechain.resolution.resolver import resolve_key
from localechain.store.protocol import KeyEnumerableStore

if TYPE_CHECKING:
    from localechain.core import Locale
    from localechain.resolution.hierarchy import HierarchyChain
    from localechain.resolution.selector import SelectedFamily
    from localechain.store import BundleStore

__all__ = ["ResolvedHandle"]


class ResolvedHandle:
    """Immutable reference to a selected family root and its chain.

    Handles are cheap to share across threads: they hold no mutable state
    and delegate every lookup to the store.

    Example:
        >>> handle = resolver.resolve("Zoo", "fr_FR", "en_US")
        >>> handle.selected_tag()
        'fr_FR'
        >>> handle.get("greeting")
        'Salut'
        >>> handle.locate("name")
        'fr'
        >>> handle.get("favorite")
        Traceback (most recent call last):
        MissingKeyError: Key 'favorite' not found in bundle 'Zoo_fr_FR' or its ancestors
    """

    __slots__ = ("_chain", "_store")

    _chain: HierarchyChain
    _store: BundleStore

    def __init__(self, chain: HierarchyChain, store: BundleStore) -> None:
        """Initialize handle.

        Args:
            chain: Ancestor chain of the selected family
            store: Bundle store used for key lookups
        """
        object.__setattr__(self, "_chain", chain)
        object.__setattr__(self, "_store", store)

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"ResolvedHandle is immutable; cannot set {name!r}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"ResolvedHandle is immutable; cannot delete {name!r}"
        raise AttributeError(msg)

    @property
    def family(self) -> SelectedFamily:
        """Selected family root."""
        return self._chain.family

    @property
    def chain(self) -> HierarchyChain:
        """Ancestor chain used for key lookups."""
        return self._chain

    @property
    def base_name(self) -> str:
        return self._chain.family.base_name

    @property
    def locale(self) -> Locale:
        """Locale of the selected family root."""
        return self._chain.family.locale

    @property
    def bundle_name(self) -> str:
        """Selected bundle name, e.g. 'Zoo_fr'."""
        return self._chain.family.bundle_name

    def selected_tag(self) -> str:
        """Tag of the selected family root ('' for root)."""
        return self._chain.family.selected_tag

    def get(self, key: str) -> str:
        """Resolve ``key`` within the selected family's chain.

        Raises:
            MissingKeyError: If no bundle in the chain defines the key
        """
        return resolve_key(self._chain, key, self._store).value

    def get_or_default(self, key: str, default: str) -> str:
        """Resolve ``key``, returning ``default`` when it is missing."""
        try:
            return self.get(key)
        except MissingKeyError:
            return default

    def locate(self, key: str) -> str:
        """Tag of the bundle that supplies ``key``.

        Raises:
            MissingKeyError: If no bundle in the chain defines the key
        """
        return resolve_key(self._chain, key, self._store).tag

    def has_key(self, key: str) -> bool:
        """True if some bundle in the chain defines ``key``."""
        try:
            resolve_key(self._chain, key, self._store)
        except MissingKeyError:
            return False
        return True

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_key(key)

    def keys(self) -> frozenset[str]:
        """All keys reachable through the chain.

        Union of every bundle in the chain, matching what get() can answer.

        Raises:
            KeysUnsupportedError: If the store cannot enumerate keys
        """
        store = self._store
        if not isinstance(store, KeyEnumerableStore):
            raise KeysUnsupportedError(store)
        found: set[str] = set()
        for variant in self._chain:
            found.update(store.keys(self.base_name, variant.tag))
        return frozenset(found)

    def __repr__(self) -> str:
        return (
            f"ResolvedHandle(bundle={self.bundle_name!r}, "
            f"chain={self._chain.tags!r})"
        )
