"""Ancestor chain of a selected bundle family.

The chain is the self-degeneration of the selected tag alone, filtered to
bundles that exist. It is never a slice of the candidate sequence: once
``fr`` is selected, ``en_US`` and ``en`` are out of reach for value lookup
even if they were probed during selection.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localechain.constants import TAG_SEPARATOR

if TYPE_CHECKING:
    from localechain.core import Locale
    from localechain.resolution.selector import SelectedFamily
    from localechain.store import BundleStore

__all__ = ["HierarchyChain", "ancestors_of"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HierarchyChain:
    """Existing ancestors of a selected family, most specific first.

    Attributes:
        family: The selected family this chain belongs to
        variants: Existing degenerations of the selected locale, in order
    """

    family: SelectedFamily
    variants: tuple[Locale, ...]

    @property
    def base_name(self) -> str:
        return self.family.base_name

    @property
    def tags(self) -> tuple[str, ...]:
        """Tags in lookup order, e.g. ('fr_FR', 'fr', '')."""
        return tuple(variant.tag for variant in self.variants)

    @property
    def bundle_names(self) -> tuple[str, ...]:
        """Bundle names in lookup order, e.g. ('Zoo_fr_FR', 'Zoo_fr', 'Zoo')."""
        return tuple(
            f"{self.base_name}{TAG_SEPARATOR}{tag}" if tag else self.base_name
            for tag in self.tags
        )

    def __iter__(self) -> Iterator[Locale]:
        return iter(self.variants)

    def __len__(self) -> int:
        return len(self.variants)


def ancestors_of(family: SelectedFamily, store: BundleStore) -> HierarchyChain:
    """Compute the ancestor chain of a selected family.

    Non-existent intermediate bundles are skipped; existing ones keep their
    relative order.

    Args:
        family: Family chosen by select()
        store: Bundle store answering existence checks

    Returns:
        HierarchyChain starting at the selected locale

    Example:
        >>> chain = ancestors_of(SelectedFamily("Zoo", Locale("fr", "FR")), store)
        >>> chain.tags  # store holds Zoo, Zoo_fr, Zoo_fr_FR
        ('fr_FR', 'fr', '')
    """
    variants = tuple(
        variant
        for variant in family.locale.degenerate()
        if store.exists(family.base_name, variant.tag)
    )
    chain = HierarchyChain(family, variants)
    logger.debug("Hierarchy for %s: %s", family.bundle_name, " -> ".join(chain.bundle_names))
    return chain
