"""Error handling utilities for celestial calculations."""

import sys
from typing import Optional


class CelestialCalcError(Exception):
    """Base exception for celestialcalc-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class TimeZoneError(CelestialCalcError):
    """Raised when a civil date-time carries no usable zone or offset."""

    def __init__(self, value: str, reason: str):
        message = f"Invalid time zone for '{value}': {reason}"
        suggestions = [
            "Use an IANA zone name (e.g., 'America/New_York') or an explicit UTC offset",
            "Pass timezone-aware datetimes; naive datetimes are rejected",
        ]
        super().__init__(message, suggestions)


class TimeParseError(CelestialCalcError):
    """Raised when a local civil time string cannot be parsed."""

    def __init__(self, value: str):
        message = f"Invalid date-time format: '{value}'"
        suggestions = [
            "Use 'YYYY-MM-DD HH:MM' or ISO-8601 (e.g., '2016-01-21T21:30:00')",
            "Example: --when '2016-01-21 21:30' --timezone America/New_York",
        ]
        super().__init__(message, suggestions)


class CatalogNotFoundError(CelestialCalcError):
    """Raised when a catalog file does not exist."""

    def __init__(self, path: str):
        message = f"Catalog file not found: '{path}'"
        suggestions = [
            "Check the path passed with --catalog",
            "Omit --catalog to use the bundled bright star catalog",
        ]
        super().__init__(message, suggestions)


class CatalogParseError(CelestialCalcError, ValueError):
    """Raised when a catalog record cannot be parsed.

    Catalog loading is all-or-nothing: the first bad record aborts the load.
    """

    def __init__(self, field: str, value: object, index: Optional[int] = None):
        self.field = field
        self.value = value
        self.index = index
        location = f" in record {index}" if index is not None else ""
        message = f"Malformed {field} value {value!r}{location}"
        suggestions = [
            "Right ascension must be 'hh:mm:ss' and declination '±dd:mm:ss'",
            "Magnitude must be a decimal number",
        ]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Print error to stderr with formatted output.

    Args:
        error: Exception to print
    """
    print(f"Error: {error}", file=sys.stderr)

    if isinstance(error, CelestialCalcError):
        if error.suggestions:
            print(file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Handle an error with optional context and return exit code.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"Error while {context}:", file=sys.stderr)

    print_error(error)

    import traceback

    if not isinstance(error, CelestialCalcError):
        traceback.print_exc()

    return 1
