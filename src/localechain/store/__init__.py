"""Bundle store package.

The resolution core consumes stores through the BundleStore protocol;
DictBundleStore is the bundled in-memory implementation.

Submodules:
    types    - Present/Absent lookup result sum type
    protocol - BundleStore and KeyEnumerableStore protocols
    memory   - DictBundleStore

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localechain.store.memory import DictBundleStore
from localechain.store.protocol import BundleStore, KeyEnumerableStore
from localechain.store.types import ABSENT, Absent, Lookup, Present

__all__ = [
    # Protocols
    "BundleStore",
    "KeyEnumerableStore",
    # Implementations
    "DictBundleStore",
    # Lookup results
    "ABSENT",
    "Absent",
    "Lookup",
    "Present",
]
