"""Tests for diagnostic codes, templates, formatter and exceptions."""

import json

import pytest

from localechain import (
    BundleError,
    InvalidLocaleError,
    KeysUnsupportedError,
    MissingKeyError,
    NoBundleFoundError,
)
from localechain.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    OutputFormat,
)


class TestDiagnosticCode:
    """Test DiagnosticCode categories."""

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (DiagnosticCode.INVALID_LOCALE, ErrorCategory.LOCALE),
            (DiagnosticCode.LOCALE_NOT_EXPORTABLE, ErrorCategory.LOCALE),
            (DiagnosticCode.NO_BUNDLE_FOUND, ErrorCategory.SELECTION),
            (DiagnosticCode.MISSING_KEY, ErrorCategory.LOOKUP),
            (DiagnosticCode.KEYS_UNSUPPORTED, ErrorCategory.STORE),
        ],
    )
    def test_category_from_range(self, code: DiagnosticCode, category: ErrorCategory) -> None:
        """Category follows the numeric range of the code."""
        assert code.category is category

    def test_codes_unique(self) -> None:
        """Every code has a distinct value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestDiagnosticFormatter:
    """Test DiagnosticFormatter output styles."""

    def test_rust_missing_key(self) -> None:
        """Rust style shows location, probe trace and hint."""
        diagnostic = ErrorTemplate.missing_key("Zoo", "favorite", "fr", ("fr", ""))
        assert diagnostic.format_error() == (
            "error[MISSING_KEY]: Key 'favorite' not found in bundle 'Zoo_fr' or its ancestors\n"
            "  --> Zoo_fr\n"
            "  = probed: fr, <root>\n"
            "  = help: Define 'favorite' in 'Zoo_fr' or one of its ancestors"
        )

    def test_rust_no_bundle(self) -> None:
        """Root-only location renders as the bare base name."""
        diagnostic = ErrorTemplate.no_bundle_found("Zoo", ("de", ""))
        output = DiagnosticFormatter().format(diagnostic)
        assert "  --> Zoo\n" in output
        assert "  = probed: de, <root>" in output

    def test_rust_without_location(self) -> None:
        """Diagnostics without a base name omit the location line."""
        output = DiagnosticFormatter().format(ErrorTemplate.invalid_language("x"))
        assert "-->" not in output
        assert output.startswith("error[INVALID_LANGUAGE]: Invalid language subtag: 'x'")

    def test_warning_severity(self) -> None:
        """Warning diagnostics are labelled as such."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE, message="odd", severity="warning"
        )
        assert DiagnosticFormatter().format(diagnostic) == "warning[INVALID_LOCALE]: odd"

    def test_simple(self) -> None:
        """Simple style is one line."""
        diagnostic = ErrorTemplate.missing_key("Zoo", "favorite", "fr", ("fr", ""))
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(diagnostic) == (
            "MISSING_KEY: Key 'favorite' not found in bundle 'Zoo_fr' or its ancestors"
        )

    def test_json(self) -> None:
        """JSON style carries every populated field."""
        diagnostic = ErrorTemplate.no_bundle_found("Zoo", ("fr", ""))
        data = json.loads(DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic))
        assert data == {
            "code": "NO_BUNDLE_FOUND",
            "code_value": 2001,
            "category": "selection",
            "message": "No bundle found for base name 'Zoo'",
            "severity": "error",
            "base_name": "Zoo",
            "probed": ["fr", ""],
            "hint": "Provide at least the root bundle 'Zoo'",
        }

    def test_sanitize_truncates(self) -> None:
        """Sanitized output truncates long content."""
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_LOCALE, message="x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        assert formatter.format(diagnostic) == "INVALID_LOCALE: xxxxxxxxxx..."

    def test_format_all(self) -> None:
        """format_all joins diagnostics with blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            ErrorTemplate.invalid_language("x"),
            ErrorTemplate.invalid_region("USA"),
        ]
        assert formatter.format_all(diagnostics) == (
            "INVALID_LANGUAGE: Invalid language subtag: 'x'\n\n"
            "INVALID_REGION: Invalid region subtag: 'USA'"
        )


class TestExceptions:
    """Test exception hierarchy and payloads."""

    def test_hierarchy(self) -> None:
        """All errors share BundleError and their builtin counterparts."""
        assert issubclass(InvalidLocaleError, BundleError)
        assert issubclass(InvalidLocaleError, ValueError)
        assert issubclass(MissingKeyError, KeyError)
        assert issubclass(KeysUnsupportedError, TypeError)
        assert issubclass(NoBundleFoundError, BundleError)

    def test_plain_message(self) -> None:
        """BundleError accepts a plain string without a diagnostic."""
        error = BundleError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_missing_key_str_not_repr(self) -> None:
        """MissingKeyError renders its message, not a quoted repr."""
        error = MissingKeyError("Zoo", "favorite", "")
        assert str(error) == "Key 'favorite' not found in bundle 'Zoo' or its ancestors"

    def test_no_bundle_found_payload(self) -> None:
        """NoBundleFoundError keeps the probe trace."""
        error = NoBundleFoundError("Zoo", ("fr", ""))
        assert error.candidates == ("fr", "")
        assert error.diagnostic is not None
        assert error.diagnostic.probed == ("fr", "")

    def test_invalid_locale_from_reason(self) -> None:
        """from_reason builds a diagnostic carrying the rejected tag."""
        error = InvalidLocaleError.from_reason("a_b_c", "too many parts")
        assert error.value == "a_b_c"
        assert str(error) == "Invalid locale 'a_b_c': too many parts"
        assert error.diagnostic is not None
        assert error.diagnostic.tag == "a_b_c"
