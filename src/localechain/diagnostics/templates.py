"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from localechain.constants import TAG_SEPARATOR

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _bundle_name(base_name: str, tag: str) -> str:
    return f"{base_name}{TAG_SEPARATOR}{tag}" if tag else base_name


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here so exception constructors never
    build their own text. Keeps messages testable and consistent.
    """

    @staticmethod
    def invalid_locale(value: object, reason: str) -> Diagnostic:
        """Locale value rejected at construction time.

        Args:
            value: The rejected input (tag string or component)
            reason: Short explanation of which rule failed

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"Invalid locale {value!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use 'language', 'language_REGION' or the root locale ''",
            tag=value if isinstance(value, str) else None,
        )

    @staticmethod
    def invalid_language(language: str) -> Diagnostic:
        """Language subtag is not 2-8 ASCII letters."""
        msg = f"Invalid language subtag: {language!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE,
            message=msg,
            hint="Language subtags are 2-8 ASCII letters (e.g. 'fr', 'en')",
            tag=language,
        )

    @staticmethod
    def invalid_region(region: str) -> Diagnostic:
        """Region subtag is neither 2 ASCII letters nor 3 digits."""
        msg = f"Invalid region subtag: {region!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_REGION,
            message=msg,
            hint="Region subtags are 2 ASCII letters or 3 digits (e.g. 'FR', '419')",
            tag=region,
        )

    @staticmethod
    def locale_not_exportable(tag: str) -> Diagnostic:
        """Locale has no Babel equivalent (root or region-only)."""
        msg = f"Locale {tag!r} cannot be converted to a Babel locale"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_EXPORTABLE,
            message=msg,
            hint="Only locales with a language subtag map to babel.Locale",
            tag=tag,
        )

    @staticmethod
    def no_bundle_found(base_name: str, probed: tuple[str, ...]) -> Diagnostic:
        """No candidate in the full sequence exists in the store.

        Args:
            base_name: Bundle base name that was requested
            probed: Candidate tags probed, in order

        Returns:
            Diagnostic for NO_BUNDLE_FOUND
        """
        msg = f"No bundle found for base name '{base_name}'"
        return Diagnostic(
            code=DiagnosticCode.NO_BUNDLE_FOUND,
            message=msg,
            hint=f"Provide at least the root bundle '{base_name}'",
            base_name=base_name,
            probed=probed,
        )

    @staticmethod
    def missing_key(
        base_name: str, key: str, selected_tag: str, probed: tuple[str, ...]
    ) -> Diagnostic:
        """Selected family's chain exhausted without finding the key.

        Args:
            base_name: Bundle base name
            key: The key that was not found
            selected_tag: Tag of the selected family root
            probed: Tags of the hierarchy chain that were searched

        Returns:
            Diagnostic for MISSING_KEY
        """
        name = _bundle_name(base_name, selected_tag)
        msg = f"Key '{key}' not found in bundle '{name}' or its ancestors"
        return Diagnostic(
            code=DiagnosticCode.MISSING_KEY,
            message=msg,
            hint=f"Define '{key}' in '{name}' or one of its ancestors",
            base_name=base_name,
            tag=selected_tag,
            probed=probed,
        )

    @staticmethod
    def keys_unsupported(store_type: str) -> Diagnostic:
        """Store cannot enumerate keys."""
        msg = f"Bundle store {store_type} does not support key enumeration"
        return Diagnostic(
            code=DiagnosticCode.KEYS_UNSUPPORTED,
            message=msg,
            hint="Implement keys(base_name, tag) on the store",
        )
