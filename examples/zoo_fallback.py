"""BundleResolver Example - Zoo Bundle Family.

Demonstrates two-phase bundle resolution: selection through the candidate
sequence, then per-key lookup confined to the selected family.

Scenarios covered:
1. Exact match with ancestor fallback (fr_FR)
2. Default locale selection (de_DE -> en_US)
3. Keys outside the selected family stay unreachable
4. Fallback notification and cache statistics
5. Custom bundle store

Python 3.13+.
"""

from __future__ import annotations

from localechain import (
    ABSENT,
    BundleResolver,
    DictBundleStore,
    MissingKeyError,
    Present,
    SelectionInfo,
)
from localechain.store import Lookup

ZOO = {
    "": {
        "name": "Default Zoo",
        "greeting": "Welcome",
        "open": "The zoo is open",
        "close": "The zoo is closed",
        "animal": "animal",
    },
    "en": {
        "name": "English Zoo",
        "greeting": "Hello",
        "open": "We are open",
        "animal": "animal",
        "favorite": "Our favorite animal is the lion",
    },
    "en_US": {"name": "American Zoo", "greeting": "Hey there"},
    "fr": {"name": "Zoo Francais", "greeting": "Bonjour", "open": "Nous sommes ouverts"},
    "fr_FR": {"greeting": "Salut"},
}

KEYS = ("name", "greeting", "open", "close", "favorite")


def show(resolver: BundleResolver, requested: str) -> None:
    handle = resolver.resolve("Zoo", requested)
    print(f"\nRequested {requested!r} -> {handle.bundle_name}")
    for key in KEYS:
        try:
            value = handle.get(key)
        except MissingKeyError:
            print(f"  {key}: <missing>")
            continue
        origin = handle.locate(key)
        print(f"  {key}: {value}  <- from {'Zoo_' + origin if origin else 'Zoo'}")


def example_1_exact_match() -> None:
    """Example 1: Exact match, values inherited from ancestors."""
    print("=" * 60)
    print("Example 1: Exact Match (fr_FR)")
    print("=" * 60)

    resolver = BundleResolver(DictBundleStore({"Zoo": ZOO}), default_locale="en_US")
    show(resolver, "fr_FR")


def example_2_default_selection() -> None:
    """Example 2: No bundle for the requested locale, default selected."""
    print("\n" + "=" * 60)
    print("Example 2: Default Locale Selection (de_DE)")
    print("=" * 60)

    resolver = BundleResolver(DictBundleStore({"Zoo": ZOO}), default_locale="en_US")
    show(resolver, "de_DE")


def example_3_family_boundary() -> None:
    """Example 3: 'favorite' exists in Zoo_en but not in the fr family."""
    print("\n" + "=" * 60)
    print("Example 3: Family Boundary (fr)")
    print("=" * 60)

    resolver = BundleResolver(DictBundleStore({"Zoo": ZOO}), default_locale="en_US")
    handle = resolver.resolve("Zoo", "fr")
    print(f"\n  'favorite' in {handle.bundle_name}: {'favorite' in handle}")
    print(f"  get_or_default: {handle.get_or_default('favorite', '(no favorite)')}")


def example_4_fallback_notification() -> None:
    """Example 4: Observe fallbacks and cache behavior."""
    print("\n" + "=" * 60)
    print("Example 4: Fallback Notification")
    print("=" * 60)

    def report(info: SelectionInfo) -> None:
        selected = info.selected_tag or "<root>"
        print(f"  fallback: {info.requested_locale} -> {selected}")

    resolver = BundleResolver(
        DictBundleStore({"Zoo": ZOO}), default_locale="en_US", on_fallback=report
    )
    for requested in ("fr_CA", "fr_CA", "ja_JP", "en_US"):
        resolver.resolve("Zoo", requested)

    print(f"\n  cache: {resolver.get_cache_stats()}")


def example_5_custom_store() -> None:
    """Example 5: Any object with exists/get_value is a bundle store."""
    print("\n" + "=" * 60)
    print("Example 5: Custom Store")
    print("=" * 60)

    class UppercaseStore:
        """Serves the Zoo data with every value uppercased."""

        def exists(self, base_name: str, tag: str) -> bool:
            return base_name == "Zoo" and tag in ZOO

        def get_value(self, base_name: str, tag: str, key: str) -> Lookup:
            value = ZOO.get(tag, {}).get(key)
            return ABSENT if value is None else Present(value.upper())

    resolver = BundleResolver(UppercaseStore(), default_locale="en_US")
    print(f"\n  greeting (fr_FR): {resolver.get_string('Zoo', 'greeting', 'fr_FR')}")


if __name__ == "__main__":
    example_1_exact_match()
    example_2_default_selection()
    example_3_family_boundary()
    example_4_fallback_notification()
    example_5_custom_store()
