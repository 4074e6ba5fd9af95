"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from localechain.constants import TAG_SEPARATOR

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.missing_key("Zoo", "favorite", "fr", ("fr", ""))
        >>> print(formatter.format(diagnostic))
        error[MISSING_KEY]: Key 'favorite' not found in bundle 'Zoo_fr' or its ancestors
          --> Zoo_fr
          = probed: fr, <root>
          = help: Define 'favorite' in 'Zoo_fr' or one of its ancestors

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        MISSING_KEY: Key 'favorite' not found in bundle 'Zoo_fr' or its ancestors
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    @staticmethod
    def _location(diagnostic: Diagnostic) -> str | None:
        """Bundle name the diagnostic points at, if any."""
        if diagnostic.base_name is None:
            return None
        if diagnostic.tag:
            return f"{diagnostic.base_name}{TAG_SEPARATOR}{diagnostic.tag}"
        return diagnostic.base_name

    @staticmethod
    def _display_tag(tag: str) -> str:
        return tag or "<root>"

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[NO_BUNDLE_FOUND]: No bundle found for base name 'Zoo'
              --> Zoo
              = probed: de_DE, de, en_US, en, <root>
              = help: Provide at least the root bundle 'Zoo'
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        location = self._location(diagnostic)
        if location is not None:
            parts.append(f"  --> {location}")

        if diagnostic.probed is not None:
            probed = ", ".join(self._display_tag(t) for t in diagnostic.probed)
            parts.append(f"  = probed: {self._maybe_sanitize(probed)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            MISSING_KEY: Key 'favorite' not found in bundle 'Zoo_fr' or its ancestors
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "MISSING_KEY", "code_value": 3001, "message": "...", "severity": "error"}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | list[str] | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.base_name is not None:
            data["base_name"] = diagnostic.base_name

        if diagnostic.tag is not None:
            data["tag"] = diagnostic.tag

        if diagnostic.probed is not None:
            data["probed"] = list(diagnostic.probed)

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
