"""
Custom exceptions for the application.

User-facing errors carry the exact line printed to the user as their message.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class UserInputError(BaseAppError):
    """Exception raised for a missing argument or an unknown command."""

    pass


class PathError(BaseAppError):
    """Exception raised when a target path is missing or of the wrong type."""

    pass


class OperationError(BaseAppError):
    """Exception raised when an underlying filesystem or codec call fails."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
