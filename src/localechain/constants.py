"""Shared constants for localechain.

Centralizes the tag vocabulary used by the locale model, the candidate
builder and the bundle stores. Placing constants here avoids circular
imports between core, store and resolution packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Tag vocabulary
    "ROOT_TAG",
    "TAG_SEPARATOR",
    "ROOT_ALIASES",
    # Tag shape limits
    "MIN_LANGUAGE_LENGTH",
    "MAX_LANGUAGE_LENGTH",
    # System locale detection
    "FALLBACK_SYSTEM_LOCALE",
    "LOCALE_ENV_VARS",
    "PSEUDO_LOCALES",
]

# ============================================================================
# TAG VOCABULARY
# ============================================================================

# Tag of the root bundle. The root bundle is stored under the bare base name
# (e.g. "Zoo") and terminates every degeneration chain.
ROOT_TAG: str = ""

# Separator between language and region in stored tags and bundle names.
# Bundle "Zoo" + tag "fr_FR" -> bundle name "Zoo_fr_FR".
TAG_SEPARATOR: str = "_"

# Spellings accepted by Locale.parse() for the root locale.
ROOT_ALIASES: frozenset[str] = frozenset({"", "root", "und"})

# ============================================================================
# TAG SHAPE LIMITS
# ============================================================================

# ISO 639 language subtags are 2-3 letters; BCP 47 reserves up to 8.
MIN_LANGUAGE_LENGTH: int = 2
MAX_LANGUAGE_LENGTH: int = 8

# ============================================================================
# SYSTEM LOCALE DETECTION
# ============================================================================

# Returned by get_system_locale() when nothing can be detected.
FALLBACK_SYSTEM_LOCALE: str = "en_US"

# Environment variables consulted in precedence order.
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")

# POSIX pseudo-locales that carry no language information.
PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})
