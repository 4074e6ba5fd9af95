"""Lookup result sum type for bundle stores.

``get_value`` answers with ``Present(value)`` or ``ABSENT`` rather than a
nullable string, so "key not in this bundle" never collides with "key maps
to the empty string".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

__all__ = ["ABSENT", "Absent", "Lookup", "Present"]


@dataclass(frozen=True, slots=True)
class Present:
    """Key found in the probed bundle.

    Attributes:
        value: Stored string (may be empty)
    """

    value: str


@dataclass(frozen=True, slots=True)
class Absent:
    """Key not defined in the probed bundle."""


ABSENT: Absent = Absent()

Lookup: TypeAlias = Present | Absent
"""Result of a single-bundle key lookup."""
