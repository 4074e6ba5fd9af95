"""Bundle resolution package.

Provides the two-phase resolution stack: candidate probing and family
selection, then per-key lookup within the selected family's hierarchy.

Submodules:
    candidates   - build_candidates() probe sequence
    selector     - select() and SelectedFamily
    hierarchy    - ancestors_of() and HierarchyChain
    resolver     - resolve_key() and ResolvedValue
    cache        - ResolutionCache (first-writer-wins memo)
    handle       - ResolvedHandle (public lookup surface)
    orchestrator - BundleResolver and SelectionInfo

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localechain.resolution.cache import ResolutionCache
from localechain.resolution.candidates import build_candidates
from localechain.resolution.handle import ResolvedHandle
from localechain.resolution.hierarchy import HierarchyChain, ancestors_of
from localechain.resolution.orchestrator import BundleResolver, SelectionInfo
from localechain.resolution.resolver import ResolvedValue, resolve_key
from localechain.resolution.selector import SelectedFamily, select

__all__ = [
    # Main entry point
    "BundleResolver",
    "SelectionInfo",
    # Public handle
    "ResolvedHandle",
    # Building blocks
    "build_candidates",
    "select",
    "SelectedFamily",
    "ancestors_of",
    "HierarchyChain",
    "resolve_key",
    "ResolvedValue",
    # Memoization
    "ResolutionCache",
]
