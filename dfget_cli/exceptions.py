"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class DfgetError(Exception):
    """Base exception for all application-specific errors."""


class MissingCollaboratorError(DfgetError):
    """Raised when a required logger handle has not been attached to the context."""


class InvalidURLError(DfgetError):
    """Raised when the source URL fails the host or path shape rules."""

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class InvalidOutputError(DfgetError):
    """
    Raised when the output path cannot be resolved, is a directory, or is not
    writable by the current user.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class ConfigurationError(DfgetError):
    """Raised for issues related to properties loading or option parsing."""
