"""Bundle resolution with locale fallback.

BundleResolver is the public entry point. It owns an injected BundleStore
and a ResolutionCache and runs the two-phase algorithm:

1. Selection: build the candidate sequence (requested, then default, then
   root) and pick the first bundle that exists.
2. Value lookup: through the returned ResolvedHandle, walk only the
   selected family's own ancestor chain.

Key architectural decisions:
- Protocol-based BundleStore (dependency inversion)
- Explicit cache instance, no process-wide registry
- Errors propagate to the caller; nothing is swallowed here

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localechain.constants import FALLBACK_SYSTEM_LOCALE
from localechain.core import Locale, as_locale
from localechain.diagnostics import InvalidLocaleError
from localechain.locale_utils import get_system_locale
from localechain.resolution.cache import ResolutionCache
from localechain.resolution.candidates import build_candidates
from localechain.resolution.handle import ResolvedHandle
from localechain.resolution.hierarchy import ancestors_of
from localechain.resolution.selector import select
from localechain.store.protocol import BundleStore

if TYPE_CHECKING:
    from collections.abc import Callable

    from localechain.core import LocaleLike
    from localechain.resolution.hierarchy import HierarchyChain
    from localechain.resolution.selector import SelectedFamily

__all__ = ["BundleResolver", "SelectionInfo"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectionInfo:
    """Information about a selection that did not land on the requested locale.

    Provided to the on_fallback callback when the selected family is not
    the requested locale's own bundle (a less specific variant, a default
    locale variant, or root).

    Attributes:
        base_name: Bundle family base name
        requested_locale: Locale asked for
        default_locale: Default locale used for the candidate sequence
        selected_tag: Tag of the family actually selected

    Example:
        >>> def log_fallback(info: SelectionInfo) -> None:
        ...     print(f"{info.base_name}: wanted {info.requested_locale}, "
        ...           f"got {info.selected_tag or '<root>'}")
        >>> resolver = BundleResolver(store, on_fallback=log_fallback)
    """

    base_name: str
    requested_locale: Locale
    default_locale: Locale
    selected_tag: str


class BundleResolver:
    """Locale-aware resource resolution against a bundle store.

    Example - Selection then per-key lookup:
        >>> store = DictBundleStore({"Zoo": {
        ...     "": {"close": "The zoo is closed"},
        ...     "en": {"favorite": "Our favorite animal is the lion"},
        ...     "fr": {"name": "Zoo Francais"},
        ... }})
        >>> resolver = BundleResolver(store, default_locale="en_US")
        >>> handle = resolver.resolve("Zoo", "fr")
        >>> handle.selected_tag()
        'fr'
        >>> handle.get("close")
        'The zoo is closed'
        >>> "favorite" in handle  # en is not in the fr hierarchy
        False

    Attributes:
        store: Bundle store used for selection and lookups
        default_locale: Configured default locale (None: detect from system)
    """

    __slots__ = ("_cache", "_default_locale", "_on_fallback", "_store")

    def __init__(
        self,
        store: BundleStore,
        *,
        default_locale: LocaleLike | None = None,
        enable_cache: bool = True,
        cache: ResolutionCache | None = None,
        on_fallback: Callable[[SelectionInfo], None] | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            store: Bundle store implementing the BundleStore protocol
            default_locale: Default locale for the candidate sequence. When
                None, each resolve() without an explicit default detects the
                system locale.
            enable_cache: Memoize handles per request (default: True)
            cache: Cache instance to use (shareable between resolvers over
                the same store). Requires enable_cache=True.
            on_fallback: Optional callback invoked when the selected family
                is not the requested locale's own bundle.

        Raises:
            TypeError: If store does not implement BundleStore
            ValueError: If cache is given with enable_cache=False
            InvalidLocaleError: If default_locale is malformed
        """
        if not isinstance(store, BundleStore):
            msg = f"store must implement BundleStore, got {type(store).__name__}"
            raise TypeError(msg)

        if cache is not None and not enable_cache:
            msg = "cache instance provided but enable_cache=False"
            raise ValueError(msg)

        self._store = store
        self._default_locale: Locale | None = (
            as_locale(default_locale) if default_locale is not None else None
        )
        self._cache: ResolutionCache | None = (
            (cache if cache is not None else ResolutionCache()) if enable_cache else None
        )
        self._on_fallback = on_fallback

    @property
    def store(self) -> BundleStore:
        return self._store

    @property
    def default_locale(self) -> Locale | None:
        """Configured default locale, or None when detected per call."""
        return self._default_locale

    @property
    def cache(self) -> ResolutionCache | None:
        return self._cache

    @property
    def cache_enabled(self) -> bool:
        return self._cache is not None

    def _effective_default(self, default: LocaleLike | None) -> Locale:
        """Explicit default, then configured default, then system locale."""
        if default is not None:
            return as_locale(default)
        if self._default_locale is not None:
            return self._default_locale

        system_code = get_system_locale()
        try:
            return Locale.parse(system_code)
        except InvalidLocaleError as e:
            logger.warning(
                "Unusable system locale '%s': %s. Falling back to %s",
                system_code,
                e,
                FALLBACK_SYSTEM_LOCALE,
            )
            return Locale.parse(FALLBACK_SYSTEM_LOCALE)

    def _chain_for(self, family: SelectedFamily) -> HierarchyChain:
        """Ancestor chain of ``family``, shared across requests when cached."""
        if self._cache is None:
            return ancestors_of(family, self._store)
        chain = self._cache.get_chain(family)
        if chain is None:
            chain = self._cache.put_chain_if_absent(family, ancestors_of(family, self._store))
        return chain

    def resolve(
        self,
        base_name: str,
        requested: LocaleLike,
        default: LocaleLike | None = None,
    ) -> ResolvedHandle:
        """Select the bundle family answering a request.

        Args:
            base_name: Bundle family base name (e.g., 'Zoo')
            requested: Locale asked for
            default: Default locale; overrides the resolver's default

        Returns:
            ResolvedHandle for the selected family (canonical per key when
            caching is enabled)

        Raises:
            NoBundleFoundError: If no candidate exists, not even root
            InvalidLocaleError: If a locale tag is malformed
            ValueError: If base_name is empty
        """
        requested_locale = as_locale(requested)
        default_locale = self._effective_default(default)

        handle = None
        if self._cache is not None:
            handle = self._cache.get(base_name, requested_locale, default_locale)

        if handle is None:
            candidates = build_candidates(base_name, requested_locale, default_locale)
            family = select(base_name, candidates, self._store)
            handle = ResolvedHandle(self._chain_for(family), self._store)
            if self._cache is not None:
                handle = self._cache.put_if_absent(
                    base_name, requested_locale, default_locale, handle
                )

        if self._on_fallback is not None and handle.selected_tag() != requested_locale.tag:
            self._on_fallback(
                SelectionInfo(
                    base_name=base_name,
                    requested_locale=requested_locale,
                    default_locale=default_locale,
                    selected_tag=handle.selected_tag(),
                )
            )

        return handle

    def get_string(
        self,
        base_name: str,
        key: str,
        requested: LocaleLike,
        default: LocaleLike | None = None,
    ) -> str:
        """Resolve a single key in one call.

        Equivalent to ``resolve(base_name, requested, default).get(key)``.

        Raises:
            NoBundleFoundError: If no candidate exists, not even root
            MissingKeyError: If the selected family's chain lacks the key
        """
        return self.resolve(base_name, requested, default).get(key)

    def clear_cache(self) -> None:
        """Drop all cached handles (no-op when caching is disabled)."""
        if self._cache is not None:
            self._cache.clear()
            logger.debug("Resolution cache manually cleared")

    def get_cache_stats(self) -> dict[str, int | float] | None:
        """Cache statistics, or None if caching is disabled."""
        if self._cache is None:
            return None
        return self._cache.get_stats()

    def __repr__(self) -> str:
        default = self._default_locale.tag if self._default_locale is not None else None
        return (
            f"BundleResolver(store={type(self._store).__name__}, "
            f"default_locale={default!r}, cache_enabled={self.cache_enabled})"
        )
