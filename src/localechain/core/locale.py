"""Locale value type and its degeneration chain.

A Locale is an immutable language/region pair. Its degeneration is the
fixed, total order in which it sheds specificity:

    language_REGION -> language -> root

The degeneration drives both candidate probing (selection) and the
ancestor chain of a selected family (value lookup).

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from localechain.constants import (
    MAX_LANGUAGE_LENGTH,
    MIN_LANGUAGE_LENGTH,
    ROOT_ALIASES,
    ROOT_TAG,
    TAG_SEPARATOR,
)
from localechain.diagnostics import ErrorTemplate, InvalidLocaleError
from localechain.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = ["ROOT_LOCALE", "Locale", "LocaleLike", "as_locale"]


def _is_ascii_alpha(value: str) -> bool:
    return value.isascii() and value.isalpha()


def _validate_language(language: str) -> None:
    if not language:
        return
    if not (
        MIN_LANGUAGE_LENGTH <= len(language) <= MAX_LANGUAGE_LENGTH
        and _is_ascii_alpha(language)
    ):
        raise InvalidLocaleError(ErrorTemplate.invalid_language(language), value=language)


def _validate_region(region: str) -> None:
    if not region:
        return
    if len(region) == 2 and _is_ascii_alpha(region):
        return
    if len(region) == 3 and region.isascii() and region.isdigit():
        return
    raise InvalidLocaleError(ErrorTemplate.invalid_region(region), value=region)


@dataclass(frozen=True, slots=True)
class Locale:
    """Immutable language/region pair.

    Language is normalized to lowercase and region to uppercase at
    construction. An empty string means the component is absent; a Locale
    with neither is the root locale. A region without a language is
    permitted (tag ``_US``). The root spellings ``root`` and ``und`` as a
    language are the same as no language, matching ``Locale.parse``.

    Equality and hashing are structural, so Locales are safe cache keys.

    Example:
        >>> Locale("FR", "fr")
        Locale(language='fr', region='FR')
        >>> Locale("fr", "FR").tag
        'fr_FR'
        >>> [v.tag for v in Locale("fr", "FR").degenerate()]
        ['fr_FR', 'fr', '']

    Attributes:
        language: ISO 639 language subtag, lowercase ("" for none)
        region: ISO 3166 / UN M.49 region subtag, uppercase ("" for none)

    Raises:
        InvalidLocaleError: If either component is not a well-formed subtag
    """

    language: str = ""
    region: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.language, str) or not isinstance(self.region, str):
            raise InvalidLocaleError.from_reason(
                (self.language, self.region), "language and region must be strings"
            )
        _validate_language(self.language)
        _validate_region(self.region)
        language = self.language.lower()
        # Root spellings ("root", "und") mean "no language"
        object.__setattr__(self, "language", "" if language in ROOT_ALIASES else language)
        object.__setattr__(self, "region", self.region.upper())

    @classmethod
    def root(cls) -> Locale:
        """Return the root locale (no language, no region)."""
        return ROOT_LOCALE

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """Build a Locale from a ``language[_-]REGION`` tag.

        Accepts the shapes produced by ``Locale.tag`` plus hyphenated
        BCP-47 spellings and POSIX encoding suffixes. ``""``, ``"root"``
        and ``"und"`` denote the root locale. Script and variant subtags
        are not supported.

        Args:
            tag: Locale tag (e.g., "fr_FR", "fr-FR", "fr", "")

        Returns:
            Parsed Locale

        Raises:
            InvalidLocaleError: If the tag is not a string or has too many parts

        Example:
            >>> Locale.parse("en-us")
            Locale(language='en', region='US')
            >>> Locale.parse("root").is_root
            True
        """
        if not isinstance(tag, str):
            raise InvalidLocaleError.from_reason(tag, "tag must be a string")

        normalized = normalize_locale(tag)
        if normalized.lower() in ROOT_ALIASES:
            return ROOT_LOCALE

        parts = normalized.split(TAG_SEPARATOR)
        match parts:
            case [language]:
                return cls(language)
            case [language, region]:
                return cls(language, region)
            case _:
                raise InvalidLocaleError.from_reason(
                    tag, "expected 'language' or 'language_REGION'"
                )

    @classmethod
    def from_babel(cls, babel_locale: BabelLocale) -> Locale:
        """Build a Locale from a ``babel.Locale``.

        Script and variant are dropped; only language and territory map.

        Example:
            >>> from babel import Locale as BabelLocale
            >>> Locale.from_babel(BabelLocale("pt", "BR"))
            Locale(language='pt', region='BR')
        """
        if babel_locale.language in ROOT_ALIASES:
            return ROOT_LOCALE
        return cls(babel_locale.language, babel_locale.territory or "")

    def to_babel(self) -> BabelLocale:
        """Return the equivalent ``babel.Locale``.

        Raises:
            InvalidLocaleError: For root and region-only locales
            babel.core.UnknownLocaleError: If Babel has no data for the locale
        """
        if not self.language:
            raise InvalidLocaleError(
                ErrorTemplate.locale_not_exportable(self.tag), value=self.tag
            )
        return get_babel_locale(self.tag)

    def display_name(self, in_locale: Locale | str | None = None) -> str | None:
        """Human-readable name of this locale via Babel CLDR data.

        Args:
            in_locale: Locale to render the name in (defaults to self)

        Returns:
            Display name such as "French (France)", or None if Babel has none
        """
        target = self.to_babel()
        if in_locale is None:
            return target.get_display_name()
        rendering = in_locale if isinstance(in_locale, Locale) else Locale.parse(in_locale)
        return target.get_display_name(rendering.to_babel())

    @property
    def tag(self) -> str:
        """Store tag: ``fr_FR``, ``fr``, ``_US`` or ``""`` for root."""
        if self.region:
            return f"{self.language}{TAG_SEPARATOR}{self.region}"
        return self.language or ROOT_TAG

    @property
    def is_root(self) -> bool:
        """True for the root locale."""
        return not self.language and not self.region

    def degenerate(self) -> tuple[Locale, ...]:
        """Degeneration chain, most specific first, ending at root.

        Region-qualified form only when a region is present; language-only
        form only when a language is present.

        Example:
            >>> [v.tag for v in Locale("fr").degenerate()]
            ['fr', '']
            >>> Locale().degenerate() == (Locale(),)
            True
        """
        variants: list[Locale] = []
        if self.region:
            variants.append(self)
        if self.language:
            variants.append(Locale(self.language))
        variants.append(ROOT_LOCALE)
        return tuple(variants)

    def __str__(self) -> str:
        return self.tag


ROOT_LOCALE: Locale = Locale()

LocaleLike: TypeAlias = Locale | str
"""Locale value or a tag accepted by Locale.parse()."""


def as_locale(value: LocaleLike) -> Locale:
    """Coerce a Locale or tag string to a Locale.

    Raises:
        InvalidLocaleError: If value is neither a Locale nor a parseable tag
    """
    if isinstance(value, Locale):
        return value
    return Locale.parse(value)
