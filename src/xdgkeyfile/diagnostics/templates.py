"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from xdgkeyfile.enums import ValueType

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _span(lineno: int) -> SourceSpan | None:
    return SourceSpan(line=lineno) if lineno > 0 else None


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def missing_group_header(line: str, lineno: int = 0) -> Diagnostic:
        """Entry found before any group header.

        Args:
            line: The offending (trimmed) source line
            lineno: 1-indexed line number (0 if unknown)

        Returns:
            Diagnostic for MISSING_GROUP_HEADER
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_GROUP_HEADER,
            message="Missing group header",
            span=_span(lineno),
            hint="Key files must start with a group header such as [Desktop Entry]",
            source_line=line,
        )

    @staticmethod
    def invalid_group_header(line: str, lineno: int = 0) -> Diagnostic:
        """Line starting with '[' is not a valid group header.

        Args:
            line: The offending (trimmed) source line
            lineno: 1-indexed line number (0 if unknown)

        Returns:
            Diagnostic for INVALID_GROUP_HEADER
        """
        msg = f'Invalid group header: "{line}" on line {lineno}'
        return Diagnostic(
            code=DiagnosticCode.INVALID_GROUP_HEADER,
            message=msg,
            span=_span(lineno),
            hint="Group names cannot be empty or contain '[' or ']'",
            source_line=line,
        )

    @staticmethod
    def invalid_entry(line: str, lineno: int = 0) -> Diagnostic:
        """Line is not a valid key/value entry.

        Args:
            line: The offending (trimmed) source line
            lineno: 1-indexed line number (0 if unknown)

        Returns:
            Diagnostic for INVALID_ENTRY
        """
        msg = f'Invalid entry: "{line}" on line {lineno}'
        return Diagnostic(
            code=DiagnosticCode.INVALID_ENTRY,
            message=msg,
            span=_span(lineno),
            hint="Entries have the form key=value or key[locale]=value",
            source_line=line,
        )

    # ------------------------------------------------------------------
    # Name validation
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_group_name(name: str) -> Diagnostic:
        """Group name is empty or contains reserved characters."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_GROUP_NAME,
            message=f"Invalid group name: {name!r}",
            hint=(
                "Group names cannot be empty, padded with spaces, "
                "or contain '[', ']' or line breaks"
            ),
        )

    @staticmethod
    def invalid_key(key: str) -> Diagnostic:
        """Key is empty or contains reserved characters."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY,
            message=f"Invalid key: {key!r}",
            hint="Keys cannot be empty, start with '#', or contain '=', '[', ']' or whitespace",
        )

    @staticmethod
    def invalid_list_separator(separator: str) -> Diagnostic:
        """List separator is not a single non-backslash character."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_LIST_SEPARATOR,
            message=f"Invalid list separator: {separator!r}",
            hint="The list separator must be exactly one character other than '\\'",
        )

    # ------------------------------------------------------------------
    # Value decoding
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_value(value_type: ValueType, value: str) -> Diagnostic:
        """Raw value cannot be decoded as the requested type.

        Args:
            value_type: BOOLEAN, INTEGER or FLOAT
            value: The raw value that failed to decode

        Returns:
            Diagnostic for INVALID_BOOLEAN, INVALID_INTEGER or INVALID_FLOAT
        """
        match value_type:
            case ValueType.BOOLEAN:
                code = DiagnosticCode.INVALID_BOOLEAN
                hint = "Boolean values must be exactly 'true' or 'false'"
            case ValueType.INTEGER:
                code = DiagnosticCode.INVALID_INTEGER
                hint = "Integer values must be numeric literals"
            case _:
                code = DiagnosticCode.INVALID_FLOAT
                hint = "Float values must be numeric literals"
        return Diagnostic(
            code=code,
            message=f"Invalid {value_type} value: {value!r}",
            hint=hint,
        )

    # ------------------------------------------------------------------
    # Locale
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_locale(locale: str) -> Diagnostic:
        """Locale tag matches neither the POSIX grammar nor the canonicalizer.

        Args:
            locale: The locale string that failed to parse

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=f"Invalid locale: {locale!r}",
            hint="Use lang[_TERRITORY][.encoding][@modifier], e.g. fr_FR.UTF-8@euro",
        )
