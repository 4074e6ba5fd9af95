"""localechain - Locale-aware resource bundle resolution.

Resolves keyed string lookups against bundle families arranged in a
locale hierarchy. Selection probes the requested locale, then the default
locale, then the root bundle; value lookup then stays inside the selected
family's own ancestor chain.

Public API:
    BundleResolver - Selection and cached resolution against a store
    ResolvedHandle - Per-request handle answering get(key)
    Locale - Immutable language/region value type
    DictBundleStore - In-memory bundle store
    BundleStore - Protocol for custom stores

Exceptions:
    BundleError - Base exception class
    NoBundleFoundError - Not even the root bundle exists
    MissingKeyError - Key absent from the selected family's hierarchy
    InvalidLocaleError - Malformed locale value

Submodules:
    localechain.resolution - Candidate builder, selector, hierarchy, cache
    localechain.store - Store protocols and lookup result types
    localechain.diagnostics - Error codes, diagnostics and formatters
    localechain.locale_utils - Tag normalization, Babel interop, system locale
"""

from .core import ROOT_LOCALE, Locale
from .diagnostics import (
    BundleError,
    InvalidLocaleError,
    KeysUnsupportedError,
    MissingKeyError,
    NoBundleFoundError,
)
from .resolution import BundleResolver, ResolutionCache, ResolvedHandle, SelectionInfo
from .store import ABSENT, Absent, BundleStore, DictBundleStore, Present

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localechain")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ABSENT",
    "ROOT_LOCALE",
    "Absent",
    "BundleError",
    "BundleResolver",
    "BundleStore",
    "DictBundleStore",
    "InvalidLocaleError",
    "KeysUnsupportedError",
    "Locale",
    "MissingKeyError",
    "NoBundleFoundError",
    "Present",
    "ResolutionCache",
    "ResolvedHandle",
    "SelectionInfo",
    "__version__",
]
