"""Core value types shared by the store and resolution layers.

Exports:
    Locale: Immutable language/region pair with its degeneration chain
    ROOT_LOCALE: The root locale (no language, no region)
    LocaleLike: Locale or tag string accepted by the public API
    as_locale: Coerce LocaleLike to Locale

Python 3.13+.
"""

from .locale import ROOT_LOCALE, Locale, LocaleLike, as_locale

__all__ = ["ROOT_LOCALE", "Locale", "LocaleLike", "as_locale"]
