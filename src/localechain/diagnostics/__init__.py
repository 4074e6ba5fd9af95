"""Diagnostic system for bundle resolution errors.

Provides structured error diagnostics with codes, hints and probe traces.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    BundleError,
    InvalidLocaleError,
    KeysUnsupportedError,
    MissingKeyError,
    NoBundleFoundError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BundleError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidLocaleError",
    "KeysUnsupportedError",
    "MissingKeyError",
    "NoBundleFoundError",
    "OutputFormat",
]
