"""Candidate sequence construction for bundle selection.

The candidate sequence is the probe order used only to pick which bundle
family answers a request:

    requested degenerations -> default degenerations -> root

For requested ``fr_FR`` and default ``en_US`` the sequence is
``fr_FR, fr, en_US, en, <root>``.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from localechain.core import ROOT_LOCALE

if TYPE_CHECKING:
    from localechain.core import Locale

__all__ = ["build_candidates"]


def build_candidates(
    base_name: str, requested: Locale, default: Locale
) -> tuple[Locale, ...]:
    """Build the ordered, duplicate-free probe sequence for a request.

    Pure function: no I/O, same inputs always give the same sequence.
    Each locale contributes its region-qualified form only when it has a
    region. Root appears exactly once, last. A variant present in both
    chains is kept at its first position.

    Args:
        base_name: Bundle family base name
        requested: Locale asked for by the caller
        default: Fallback locale (typically the process default)

    Returns:
        Candidate locales in probe order

    Raises:
        ValueError: If base_name is empty

    Example:
        >>> [c.tag for c in build_candidates("Zoo", Locale("fr", "FR"), Locale("en", "US"))]
        ['fr_FR', 'fr', 'en_US', 'en', '']
        >>> [c.tag for c in build_candidates("Zoo", Locale("en"), Locale("en", "US"))]
        ['en', 'en_US', '']
    """
    if not base_name:
        msg = "Bundle base name cannot be empty"
        raise ValueError(msg)

    # dict.fromkeys() removes duplicates while maintaining insertion order
    ordered = dict.fromkeys(
        variant
        for variant in (*requested.degenerate(), *default.degenerate())
        if not variant.is_root
    )
    return (*ordered, ROOT_LOCALE)
