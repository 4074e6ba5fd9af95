"""Tests for DictBundleStore and the store protocols."""

import logging
import threading

import pytest

from localechain import (
    ABSENT,
    Absent,
    BundleStore,
    DictBundleStore,
    InvalidLocaleError,
    Locale,
    Present,
)
from localechain.store import KeyEnumerableStore


class TestDictBundleStore:
    """Test DictBundleStore registration and lookups."""

    def test_exists(self, zoo_store: DictBundleStore) -> None:
        """Registered bundles exist; others do not."""
        assert zoo_store.exists("Zoo", "fr_FR")
        assert zoo_store.exists("Zoo", "")
        assert not zoo_store.exists("Zoo", "de")
        assert not zoo_store.exists("Aquarium", "")

    def test_get_value_single_bundle(self, zoo_store: DictBundleStore) -> None:
        """get_value() never consults other bundles."""
        assert zoo_store.get_value("Zoo", "fr_FR", "greeting") == Present("Salut")
        assert zoo_store.get_value("Zoo", "fr_FR", "name") is ABSENT
        assert isinstance(zoo_store.get_value("Zoo", "de", "name"), Absent)

    def test_tags_normalized(self) -> None:
        """Tag spellings are normalized on registration."""
        store = DictBundleStore()
        store.add_bundle("App", "fr-fr", {"k": "v"})
        store.add_bundle("App", Locale("DE"), {"k": "w"})
        assert store.tags("App") == ("fr_FR", "de")

    def test_root_spellings_share_one_bundle(self) -> None:
        """'und' as a tag or as a Locale language both address the root bundle."""
        store = DictBundleStore()
        store.add_bundle("Zoo", "und", {"a": "1"})
        store.add_bundle("Zoo", Locale("und"), {"b": "2"})
        store.add_bundle("Zoo", Locale("ROOT"), {"c": "3"})
        assert store.tags("Zoo") == ("",)
        assert store.keys("Zoo", "") == frozenset({"a", "b", "c"})

    def test_empty_bundle_exists(self) -> None:
        """A bundle with no entries still exists for selection."""
        store = DictBundleStore()
        store.add_bundle("App", "")
        assert store.exists("App", "")
        assert store.keys("App", "") == frozenset()

    def test_add_merges(self) -> None:
        """Re-registering a bundle merges entries, newest wins."""
        store = DictBundleStore({"App": {"": {"a": "1", "b": "2"}}})
        store.add_bundle("App", "", {"b": "3", "c": "4"})
        assert store.keys("App", "") == frozenset({"a", "b", "c"})
        assert store.get_value("App", "", "b") == Present("3")

    def test_bundle_names(self, zoo_store: DictBundleStore) -> None:
        """Bundle names join base name and tag."""
        assert zoo_store.bundle_names("Zoo") == (
            "Zoo",
            "Zoo_en",
            "Zoo_en_US",
            "Zoo_fr",
            "Zoo_fr_FR",
        )

    def test_empty_base_name_rejected(self) -> None:
        """Empty base name raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            DictBundleStore().add_bundle("", "fr")

    def test_invalid_tag_rejected(self) -> None:
        """Malformed tags raise InvalidLocaleError."""
        with pytest.raises(InvalidLocaleError):
            DictBundleStore({"App": {"not a tag": {}}})

    def test_non_string_entries_rejected(self) -> None:
        """Entries must map str to str."""
        with pytest.raises(TypeError, match="must map str to str"):
            DictBundleStore().add_bundle("App", "", {"count": 3})  # type: ignore[dict-item]

    def test_registration_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Registration logs at INFO."""
        with caplog.at_level(logging.INFO, logger="localechain.store.memory"):
            DictBundleStore().add_bundle("Zoo", "fr", {"name": "Zoo Francais"})
        assert "Registered bundle Zoo_fr (1 entries)" in caplog.text

    def test_repr(self, zoo_store: DictBundleStore) -> None:
        """repr summarizes bundle counts."""
        assert repr(zoo_store) == "DictBundleStore(bundles={'Zoo': 5})"

    def test_concurrent_registration(self) -> None:
        """Concurrent add_bundle calls lose no entries."""
        store = DictBundleStore()

        def register(worker: int) -> None:
            for i in range(50):
                store.add_bundle("App", "", {f"k{worker}_{i}": "v"})

        threads = [threading.Thread(target=register, args=(w,)) for w in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store.keys("App", "")) == 200


class TestProtocols:
    """Test structural protocol conformance."""

    def test_dict_store_conforms(self, zoo_store: DictBundleStore) -> None:
        """DictBundleStore implements both protocols."""
        assert isinstance(zoo_store, BundleStore)
        assert isinstance(zoo_store, KeyEnumerableStore)

    def test_minimal_store_conforms(self) -> None:
        """Any object with exists/get_value is a BundleStore."""

        class Minimal:
            def exists(self, base_name: str, tag: str) -> bool:
                return True

            def get_value(self, base_name: str, tag: str, key: str) -> Absent:
                return ABSENT

        assert isinstance(Minimal(), BundleStore)
        assert not isinstance(Minimal(), KeyEnumerableStore)

    def test_lookup_types(self) -> None:
        """Present keeps empty strings distinct from Absent."""
        assert Present("") != ABSENT
        assert Present("x").value == "x"
        assert Absent() == ABSENT
