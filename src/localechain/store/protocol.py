"""Bundle store protocols consumed by the resolution core.

The core needs only two questions answered per candidate bundle: does it
exist, and what does it map a key to. Storage, parsing and I/O belong to
the implementation.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from localechain.store.types import Lookup

__all__ = ["BundleStore", "KeyEnumerableStore"]


@runtime_checkable
class BundleStore(Protocol):
    """Protocol for answering existence and key lookups per bundle.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom stores backed by
    flat files, embedded maps or network fetches.

    Tags are the ``Locale.tag`` form: ``"fr_FR"``, ``"fr"``, ``""`` (root).
    The root bundle of every base name is expected to exist; selection
    treats its absence as a deployment defect.

    Example:
        >>> class EnvStore:
        ...     def exists(self, base_name: str, tag: str) -> bool:
        ...         return tag in ("", "en")
        ...     def get_value(self, base_name: str, tag: str, key: str) -> Lookup:
        ...         return ABSENT
        ...
        >>> resolver = BundleResolver(EnvStore())
    """

    def exists(self, base_name: str, tag: str) -> bool:
        """Report whether bundle ``(base_name, tag)`` is available.

        Args:
            base_name: Bundle family base name (e.g., 'Zoo')
            tag: Locale tag ('' for the root bundle)

        Returns:
            True if the bundle exists
        """
        ...

    def get_value(self, base_name: str, tag: str, key: str) -> Lookup:
        """Look up ``key`` in bundle ``(base_name, tag)`` only.

        Must not consult any other bundle; fallback is the core's job.

        Args:
            base_name: Bundle family base name
            tag: Locale tag ('' for the root bundle)
            key: Resource key

        Returns:
            Present(value) if defined in this bundle, else ABSENT
        """
        ...


@runtime_checkable
class KeyEnumerableStore(BundleStore, Protocol):
    """Bundle store that can also list the keys defined in one bundle."""

    def keys(self, base_name: str, tag: str) -> Iterable[str]:
        """Keys defined directly in bundle ``(base_name, tag)``.

        Args:
            base_name: Bundle family base name
            tag: Locale tag ('' for the root bundle)

        Returns:
            Iterable of keys (empty if the bundle does not exist)
        """
        ...
