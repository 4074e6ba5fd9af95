"""Locale utilities for tag normalization and Babel interop.

Centralizes locale format normalization used throughout the codebase.
All locale handling normalizes at the system boundary, then uses the
normalized form for cache keys and store lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from localechain.constants import (
    FALLBACK_SYSTEM_LOCALE,
    LOCALE_ENV_VARS,
    PSEUDO_LOCALES,
    TAG_SEPARATOR,
)

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 style tag to the underscore form used for bundles.

    BCP-47 uses hyphens (en-US), while bundle names and Babel use
    underscores (en_US). Encoding suffixes such as ".UTF-8" and modifiers
    such as "@euro" are stripped. Case is left untouched; Locale applies
    case rules itself.

    Args:
        locale_code: Locale code (e.g., "en-US", "pt_BR.UTF-8")

    Returns:
        Underscore-separated locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("fr")
        'fr'
    """
    code = locale_code.split(".", 1)[0].split("@", 1)[0]
    return code.strip().replace("-", TAG_SEPARATOR)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> BabelLocale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("fr-FR")
        >>> locale.language
        'fr'
        >>> locale.territory
        'FR'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop all cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in underscore form.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        code = normalize_locale(system_locale) if system_locale else ""
        if code and code not in PSEUDO_LOCALES:
            return code
    except (ValueError, AttributeError):
        logger.debug("locale.getlocale() failed, consulting environment")

    for var in LOCALE_ENV_VARS:
        value = os.environ.get(var)
        code = normalize_locale(value) if value else ""
        if code and code not in PSEUDO_LOCALES:
            return code

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    logger.debug("No system locale detected, using %s", FALLBACK_SYSTEM_LOCALE)
    return FALLBACK_SYSTEM_LOCALE
