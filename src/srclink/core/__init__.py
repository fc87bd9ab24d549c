"""Core domain models and exceptions for srclink."""

from srclink.core.exceptions import (
    ConfigurationError,
    RepositoryNotFoundError,
    SrcLinkError,
)
from srclink.core.models import (
    RepositoryDescriptor,
    SearchConfig,
    UrlComponents,
    UrlPattern,
)

__all__ = [
    # Models
    "UrlPattern",
    "RepositoryDescriptor",
    "SearchConfig",
    "UrlComponents",
    # Exceptions
    "SrcLinkError",
    "ConfigurationError",
    "RepositoryNotFoundError",
]
