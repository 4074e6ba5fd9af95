"""Bundle resolution exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error
information. The resolution core raises these and never swallows them;
callers decide user-visible behavior.

Hierarchy:
    BundleError (base)
    ├─ InvalidLocaleError (also ValueError) - construction time
    ├─ NoBundleFoundError - fatal configuration defect
    ├─ MissingKeyError (also KeyError) - recoverable by the caller
    └─ KeysUnsupportedError (also TypeError) - store cannot enumerate keys

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "BundleError",
    "InvalidLocaleError",
    "KeysUnsupportedError",
    "MissingKeyError",
    "NoBundleFoundError",
]


class BundleError(Exception):
    """Base exception for all bundle resolution errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize BundleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidLocaleError(BundleError, ValueError):
    """Malformed Locale value.

    Raised when constructing or parsing a Locale, never during resolution.
    A region without a language is allowed; arbitrary non-tag strings are not.

    Attributes:
        value: The rejected input
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value

    @classmethod
    def from_reason(cls, value: object, reason: str) -> InvalidLocaleError:
        """Build from the rejected value and the failed rule."""
        return cls(ErrorTemplate.invalid_locale(value, reason), value=value)


class NoBundleFoundError(BundleError):
    """No candidate (not even root) exists in the bundle store.

    Unrecoverable at this layer: an always-present root bundle is a
    requirement on the store, not something selection can repair.

    Attributes:
        base_name: Bundle base name requested
        candidates: Candidate tags probed, in order
    """

    def __init__(self, base_name: str, candidates: tuple[str, ...]) -> None:
        super().__init__(ErrorTemplate.no_bundle_found(base_name, candidates))
        self.base_name = base_name
        self.candidates = candidates


class MissingKeyError(BundleError, KeyError):
    """Key absent from the selected family's entire ancestor chain.

    Recoverable: callers typically substitute a default string. Never
    retried internally because store contents are static.

    Attributes:
        base_name: Bundle base name
        key: Key that was not found
        selected_tag: Tag of the selected family root
        searched: Tags of the chain that were searched
    """

    def __init__(
        self,
        base_name: str,
        key: str,
        selected_tag: str,
        searched: tuple[str, ...] = (),
    ) -> None:
        super().__init__(ErrorTemplate.missing_key(base_name, key, selected_tag, searched))
        self.base_name = base_name
        self.key = key
        self.selected_tag = selected_tag
        self.searched = searched


class KeysUnsupportedError(BundleError, TypeError):
    """Bundle store does not implement key enumeration."""

    def __init__(self, store: object) -> None:
        super().__init__(ErrorTemplate.keys_unsupported(type(store).__name__))
