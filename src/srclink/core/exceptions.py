"""Exceptions raised by srclink."""


class SrcLinkError(Exception):
    """Base class for all srclink errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SrcLinkError):
    """Raised when a repository config file cannot be loaded."""


class RepositoryNotFoundError(SrcLinkError):
    """Raised when a named repository is not configured."""
