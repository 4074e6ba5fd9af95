"""Tests for bundle family selection.

Selection returns the first candidate that exists; only the root being
absent as well is an error.
"""

import pytest
from hypothesis import given

from localechain import DictBundleStore, Locale, NoBundleFoundError
from localechain.diagnostics import DiagnosticCode
from localechain.resolution import SelectedFamily, build_candidates, select
from tests.strategies import bundle_stores, locales


class RecordingStore:
    """Store wrapper that records every existence probe."""

    def __init__(self, inner: DictBundleStore) -> None:
        self.inner = inner
        self.probes: list[str] = []

    def exists(self, base_name: str, tag: str) -> bool:
        self.probes.append(tag)
        return self.inner.exists(base_name, tag)

    def get_value(self, base_name: str, tag: str, key: str):
        return self.inner.get_value(base_name, tag, key)


class TestSelect:
    """Test select() against the Zoo family."""

    def test_exact_match(self, zoo_store: DictBundleStore) -> None:
        """Existing requested bundle is selected."""
        candidates = build_candidates("Zoo", Locale("fr", "FR"), Locale("en", "US"))
        family = select("Zoo", candidates, zoo_store)
        assert family == SelectedFamily("Zoo", Locale("fr", "FR"))
        assert family.bundle_name == "Zoo_fr_FR"

    def test_less_specific_requested_variant(self, zoo_store: DictBundleStore) -> None:
        """fr_CA falls back to fr before trying the default."""
        candidates = build_candidates("Zoo", Locale("fr", "CA"), Locale("en", "US"))
        assert select("Zoo", candidates, zoo_store).selected_tag == "fr"

    def test_default_variant_selected(self, zoo_store: DictBundleStore) -> None:
        """de_DE selects the default en_US bundle."""
        candidates = build_candidates("Zoo", Locale("de", "DE"), Locale("en", "US"))
        assert select("Zoo", candidates, zoo_store).selected_tag == "en_US"

    def test_root_selected(self, zoo_store: DictBundleStore) -> None:
        """Root selected when neither chain has a bundle."""
        candidates = build_candidates("Zoo", Locale("de", "DE"), Locale("ja", "JP"))
        family = select("Zoo", candidates, zoo_store)
        assert family.selected_tag == ""
        assert family.bundle_name == "Zoo"

    def test_stops_at_first_existing(self, zoo_store: DictBundleStore) -> None:
        """No candidate after the selected one is probed."""
        store = RecordingStore(zoo_store)
        candidates = build_candidates("Zoo", Locale("fr", "CA"), Locale("en", "US"))
        select("Zoo", candidates, store)
        assert store.probes == ["fr_CA", "fr"]

    def test_no_bundle_found(self) -> None:
        """Missing root and candidates raises NoBundleFoundError."""
        store = DictBundleStore({"Other": {"": {"k": "v"}}})
        candidates = build_candidates("Zoo", Locale("fr", "FR"), Locale("en", "US"))
        with pytest.raises(NoBundleFoundError) as exc_info:
            select("Zoo", candidates, store)

        error = exc_info.value
        assert error.base_name == "Zoo"
        assert error.candidates == ("fr_FR", "fr", "en_US", "en", "")
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.NO_BUNDLE_FOUND
        assert "No bundle found for base name 'Zoo'" in str(error)


class TestSelectProperties:
    """Property-based checks of selection."""

    @given(store=bundle_stores(), requested=locales(), default=locales())
    def test_first_existing_candidate(
        self, store: DictBundleStore, requested: Locale, default: Locale
    ) -> None:
        """Selected family is the first candidate the store has."""
        candidates = build_candidates("App", requested, default)
        family = select("App", candidates, store)
        existing = [c for c in candidates if store.exists("App", c.tag)]
        assert family.locale == existing[0]

    @given(store=bundle_stores(), requested=locales(), default=locales())
    def test_exact_match_always_wins(
        self, store: DictBundleStore, requested: Locale, default: Locale
    ) -> None:
        """An existing requested bundle is always the one selected."""
        candidates = build_candidates("App", requested, default)
        family = select("App", candidates, store)
        if store.exists("App", requested.tag):
            assert family.locale == requested

    @given(store=bundle_stores(with_root=False), requested=locales(), default=locales())
    def test_error_only_when_no_candidate_exists(
        self, store: DictBundleStore, requested: Locale, default: Locale
    ) -> None:
        """NoBundleFoundError iff none of the candidates exists."""
        candidates = build_candidates("App", requested, default)
        if any(store.exists("App", c.tag) for c in candidates):
            assert select("App", candidates, store).locale in candidates
        else:
            with pytest.raises(NoBundleFoundError):
                select("App", candidates, store)
