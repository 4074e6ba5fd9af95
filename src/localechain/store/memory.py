"""In-memory bundle store.

Holds bundle contents as nested mappings:

    {base_name: {tag: {key: value}}}

Implements both BundleStore and KeyEnumerableStore. Suitable for embedded
resources, tests and as a reference for custom stores.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from threading import RLock
from typing import TYPE_CHECKING, TypeAlias

from localechain.constants import TAG_SEPARATOR
from localechain.core import as_locale
from localechain.store.types import ABSENT, Present

if TYPE_CHECKING:
    from localechain.core import LocaleLike
    from localechain.store.types import Lookup

__all__ = ["DictBundleStore"]

logger = logging.getLogger(__name__)

_Entries: TypeAlias = dict[str, str]


class DictBundleStore:
    """Thread-safe in-memory bundle store.

    Tags are normalized through ``Locale`` on the way in, so ``"fr-fr"``,
    ``"fr_FR"`` and ``Locale("fr", "FR")`` all address the same bundle.
    Registering a bundle that already exists merges the new entries over
    the old ones.

    Example:
        >>> store = DictBundleStore({
        ...     "Zoo": {
        ...         "": {"name": "Default Zoo", "close": "The zoo is closed"},
        ...         "fr": {"name": "Zoo Francais"},
        ...     }
        ... })
        >>> store.exists("Zoo", "fr")
        True
        >>> store.get_value("Zoo", "fr", "close")
        Absent()
    """

    __slots__ = ("_bundles", "_lock")

    def __init__(
        self,
        bundles: Mapping[str, Mapping[LocaleLike, Mapping[str, str]]] | None = None,
    ) -> None:
        """Initialize store, optionally pre-populated.

        Args:
            bundles: Mapping of base name -> locale tag -> key/value entries

        Raises:
            InvalidLocaleError: If a tag is malformed
            TypeError: If a key or value is not a string
            ValueError: If a base name is empty
        """
        self._bundles: dict[str, dict[str, _Entries]] = {}
        self._lock = RLock()
        if bundles:
            for base_name, families in bundles.items():
                for locale, entries in families.items():
                    self.add_bundle(base_name, locale, entries)

    @staticmethod
    def _validate_entries(entries: Mapping[str, str]) -> _Entries:
        validated: _Entries = {}
        for key, value in entries.items():
            if not isinstance(key, str) or not isinstance(value, str):
                msg = (
                    f"Bundle entries must map str to str, "
                    f"got {type(key).__name__} -> {type(value).__name__}"
                )
                raise TypeError(msg)
            validated[key] = value
        return validated

    def add_bundle(
        self,
        base_name: str,
        locale: LocaleLike,
        entries: Mapping[str, str] | None = None,
    ) -> None:
        """Register (or extend) bundle ``(base_name, locale)``.

        An empty ``entries`` still registers the bundle, so it exists for
        selection even though it defines no keys.

        Args:
            base_name: Bundle family base name
            locale: Locale or tag ('' for the root bundle)
            entries: Key/value pairs to add

        Raises:
            InvalidLocaleError: If the locale tag is malformed
            TypeError: If a key or value is not a string
            ValueError: If base_name is empty
        """
        if not base_name:
            msg = "Bundle base name cannot be empty"
            raise ValueError(msg)

        tag = as_locale(locale).tag
        validated = self._validate_entries(entries or {})

        with self._lock:
            family = self._bundles.setdefault(base_name, {})
            family.setdefault(tag, {}).update(validated)

        logger.info(
            "Registered bundle %s (%d entries)",
            self._bundle_name(base_name, tag),
            len(validated),
        )

    @staticmethod
    def _bundle_name(base_name: str, tag: str) -> str:
        return f"{base_name}{TAG_SEPARATOR}{tag}" if tag else base_name

    def exists(self, base_name: str, tag: str) -> bool:
        """Report whether bundle ``(base_name, tag)`` is registered."""
        with self._lock:
            return tag in self._bundles.get(base_name, {})

    def get_value(self, base_name: str, tag: str, key: str) -> Lookup:
        """Look up ``key`` in exactly one bundle."""
        with self._lock:
            entries = self._bundles.get(base_name, {}).get(tag)
            if entries is None or key not in entries:
                return ABSENT
            return Present(entries[key])

    def keys(self, base_name: str, tag: str) -> frozenset[str]:
        """Keys defined directly in bundle ``(base_name, tag)``."""
        with self._lock:
            return frozenset(self._bundles.get(base_name, {}).get(tag, {}))

    def tags(self, base_name: str) -> tuple[str, ...]:
        """Tags registered for ``base_name``, in registration order."""
        with self._lock:
            return tuple(self._bundles.get(base_name, {}))

    def bundle_names(self, base_name: str) -> tuple[str, ...]:
        """Bundle names registered for ``base_name`` (e.g., 'Zoo_fr_FR')."""
        return tuple(self._bundle_name(base_name, tag) for tag in self.tags(base_name))

    def __repr__(self) -> str:
        with self._lock:
            counts = {name: len(family) for name, family in self._bundles.items()}
        return f"DictBundleStore(bundles={counts!r})"
