"""Per-key value resolution within a selected family.

Walks a HierarchyChain in order and returns the first bundle that defines
the key. Nothing outside the chain is ever consulted.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from localechain.diagnostics import MissingKeyError
from localechain.store.types import Absent, Present

if TYPE_CHECKING:
    from localechain.resolution.hierarchy import HierarchyChain
    from localechain.store import BundleStore

__all__ = ["ResolvedValue", "resolve_key"]


@dataclass(frozen=True, slots=True)
class ResolvedValue:
    """A resolved value and the bundle that supplied it.

    Attributes:
        value: The stored string
        tag: Tag of the bundle the value came from ('' for root)
    """

    value: str
    tag: str


def resolve_key(chain: HierarchyChain, key: str, store: BundleStore) -> ResolvedValue:
    """Resolve ``key`` by walking the chain, most specific first.

    Args:
        chain: Ancestor chain of the selected family
        key: Resource key
        store: Bundle store answering key lookups

    Returns:
        ResolvedValue from the first bundle defining the key

    Raises:
        MissingKeyError: If no bundle in the chain defines the key
        TypeError: If the store answers with something other than Present/Absent
    """
    base_name = chain.base_name
    for variant in chain:
        match store.get_value(base_name, variant.tag, key):
            case Present(value=value):
                return ResolvedValue(value, variant.tag)
            case Absent():
                continue
            case other:
                msg = (
                    f"Bundle store returned {type(other).__name__} for "
                    f"({base_name!r}, {variant.tag!r}, {key!r}); expected Present or Absent"
                )
                raise TypeError(msg)

    raise MissingKeyError(base_name, key, chain.family.selected_tag, chain.tags)
