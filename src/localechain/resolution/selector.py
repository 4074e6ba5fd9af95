"""Bundle family selection.

Walks the candidate sequence against the store and fixes the selected
family root: the first candidate the store reports as existing. Default
locale variants are legitimate selection targets.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localechain.constants import TAG_SEPARATOR
from localechain.diagnostics import NoBundleFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from localechain.core import Locale
    from localechain.store import BundleStore

__all__ = ["SelectedFamily", "select"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectedFamily:
    """Bundle family chosen to answer a request.

    Attributes:
        base_name: Bundle family base name (e.g., 'Zoo')
        locale: Locale of the selected family root
    """

    base_name: str
    locale: Locale

    @property
    def selected_tag(self) -> str:
        """Tag of the selected family root ('' for root)."""
        return self.locale.tag

    @property
    def bundle_name(self) -> str:
        """Bundle name, e.g. 'Zoo_fr_FR', or 'Zoo' for the root bundle."""
        tag = self.selected_tag
        return f"{self.base_name}{TAG_SEPARATOR}{tag}" if tag else self.base_name


def select(
    base_name: str, candidates: Iterable[Locale], store: BundleStore
) -> SelectedFamily:
    """Select the first candidate that exists in the store.

    Never skips past an existing candidate.

    Args:
        base_name: Bundle family base name
        candidates: Probe sequence from build_candidates()
        store: Bundle store answering existence checks

    Returns:
        SelectedFamily for the first existing candidate

    Raises:
        NoBundleFoundError: If no candidate exists, not even root
    """
    probed: list[str] = []
    for candidate in candidates:
        probed.append(candidate.tag)
        if store.exists(base_name, candidate.tag):
            family = SelectedFamily(base_name, candidate)
            logger.debug(
                "Selected bundle %s after %d probe(s)", family.bundle_name, len(probed)
            )
            return family

    raise NoBundleFoundError(base_name, tuple(probed))
