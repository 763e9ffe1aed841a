"""
Exceptions raised at buildopts construction and parsing boundaries.

Registry lookups never raise; these errors only surface while option groups
are being declared, parsed, converted, or while labels are being parsed.
"""

from typing import Any, Dict, Optional


class BuildOptsError(Exception):
    """Base exception for buildopts errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """
        Initialize the error.

        Args:
            message: Error message
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ConversionError(BuildOptsError):
    """A converter rejected its input text."""


class UnknownOptionError(BuildOptsError):
    """A value was supplied for an option the group does not declare."""


class OptionsParsingError(BuildOptsError):
    """Command-line arguments could not be parsed into option groups."""


class InvalidLabelError(BuildOptsError):
    """Text is not a canonical label."""
