"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for bundle resolution.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for bundle errors.

    Categories:
        LOCALE: Malformed locale value rejected at construction
        SELECTION: No bundle family could be selected for a request
        LOOKUP: Key absent from the selected family's hierarchy
        STORE: Bundle store contract violation
    """

    LOCALE = "locale"
    SELECTION = "selection"
    LOOKUP = "lookup"
    STORE = "store"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors (construction-time validation)
        2000-2999: Selection errors (bundle family selection)
        3000-3999: Lookup errors (per-key value resolution)
        4000-4999: Store errors (collaborator contract)
    """

    # Locale errors (1000-1999)
    INVALID_LOCALE = 1001
    INVALID_LANGUAGE = 1002
    INVALID_REGION = 1003
    LOCALE_NOT_EXPORTABLE = 1004

    # Selection errors (2000-2999)
    NO_BUNDLE_FOUND = 2001

    # Lookup errors (3000-3999)
    MISSING_KEY = 3001

    # Store errors (4000-4999)
    KEYS_UNSUPPORTED = 4001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.LOCALE
            case 2:
                return ErrorCategory.SELECTION
            case 3:
                return ErrorCategory.LOOKUP
            case _:
                return ErrorCategory.STORE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        base_name: Bundle base name involved (selection and lookup errors)
        tag: Locale tag involved (selected tag, rejected tag)
        probed: Tags probed before the failure, in probe order
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    base_name: str | None = None
    tag: str | None = None
    probed: tuple[str, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[MISSING_KEY]: Key 'favorite' not found in bundle 'Zoo_fr'
              --> Zoo_fr
              = probed: fr, <root>
              = help: Add the key to 'Zoo_fr' or one of its ancestors

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
