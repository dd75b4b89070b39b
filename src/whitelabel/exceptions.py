"""Centralized exception classes for the white label generator.

This module provides a hierarchy of exceptions for better error handling
and user-friendly error messages in the CLI and the installer.
"""


class WhiteLabelError(Exception):
    """Base exception for all white label errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: User-friendly error message.
            details: Additional technical details for debugging.
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ConfigurationError(WhiteLabelError):
    """Raised when configuration is missing or invalid."""

    pass


class ValidationError(WhiteLabelError):
    """Raised when input validation fails."""

    pass


class InvalidFieldPathError(ValidationError, ValueError):
    """Raised when a field path does not address a known brand field."""

    pass


class AssetError(WhiteLabelError):
    """Raised when an image asset cannot be read or encoded."""

    pass


class ExportError(WhiteLabelError):
    """Raised when an export artifact cannot be produced or written."""

    pass


class InstallError(WhiteLabelError):
    """Raised when installing a brand configuration fails."""

    pass


class BrandNotFoundError(InstallError, ValueError):
    """Raised when a brand doesn't exist in a configuration document."""

    pass


class SessionError(WhiteLabelError):
    """Raised when the editor session file cannot be loaded or saved."""

    pass
