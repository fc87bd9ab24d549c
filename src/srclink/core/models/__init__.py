"""Domain models for srclink."""

from srclink.core.models.links import UrlComponents
from srclink.core.models.repository import (
    RepositoryDescriptor,
    SearchConfig,
    UrlPattern,
)

__all__ = [
    "UrlPattern",
    "RepositoryDescriptor",
    "SearchConfig",
    "UrlComponents",
]
