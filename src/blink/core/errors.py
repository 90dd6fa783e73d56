"""
Error types for BLINK configuration resolution and site planning.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class BlinkError(Exception):
    """Base exception for all BLINK errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class InvalidProfileError(BlinkError):
    """
    Raised when a business profile cannot drive resolution.

    Examples:
    - Missing or blank business name
    - Profile data that is not a mapping
    """

    pass


class PlanAssemblyError(BlinkError):
    """
    Raised when a generation plan violates its structural invariants.

    Examples:
    - Empty page set
    - Two pages mapped to the same route path
    """

    pass


class ProfileLoadError(BlinkError):
    """
    Raised when a profile file cannot be read.

    Examples:
    - File does not exist
    - Invalid YAML or JSON
    - Data that does not match the profile schema
    """

    pass


class ManifestError(BlinkError):
    """
    Raised when blink.toml is invalid.

    Examples:
    - TOML syntax errors
    - Unknown input level
    - Non-integer tagline seed
    """

    pass


@dataclass
class ErrorContext:
    """Where an error came from, for messages that point at a file."""

    file: Path | None = None
    field: str | None = None

    def format(self) -> str:
        parts = []
        if self.file:
            parts.append(f"File: {self.file}")
        if self.field:
            parts.append(f"Field: {self.field}")
        return ", ".join(parts)


__all__ = [
    "BlinkError",
    "ErrorContext",
    "InvalidProfileError",
    "ManifestError",
    "PlanAssemblyError",
    "ProfileLoadError",
]
