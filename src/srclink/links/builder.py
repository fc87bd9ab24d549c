"""Build browsable source links for repository files."""

import structlog

from srclink.core.models.links import UrlComponents
from srclink.core.models.repository import RepositoryDescriptor
from srclink.links.normalizer import url_parts
from srclink.links.template import expand_vars

logger = structlog.get_logger(__name__)


class LinkBuilder:
    """Builds file-and-line links into a single repository.

    Examples (default ``{url}/blob/master/{path}{anchor}`` pattern):
    - https://github.com/org/repo.git -> https://github.com/org/repo/blob/master/a.py#L3
    - git@github.com:org/repo.git -> //github.com/org/repo/blob/master/a.py#L3
    """

    def __init__(self, repo: RepositoryDescriptor) -> None:
        self._repo = repo

    @property
    def repo(self) -> RepositoryDescriptor:
        return self._repo

    def parts(
        self,
        path: str | None,
        line: int | str | None = None,
        rev: str | None = None,
    ) -> UrlComponents:
        """Return the normalized link components for a file location."""
        return url_parts(self._repo, path, line, rev)

    def build(
        self,
        path: str | None,
        line: int | str | None = None,
        rev: str | None = None,
    ) -> str:
        """Expand the repository's base-url pattern for a file location."""
        components = self.parts(path, line, rev)
        link = expand_vars(self._repo.url_pattern.base_url, components.as_values())
        logger.debug("Built link", repo=self._repo.name, path=path, link=link)
        return link


def build_link(
    repo: RepositoryDescriptor,
    path: str | None,
    line: int | str | None = None,
    rev: str | None = None,
) -> str:
    """Build a link to ``path`` (and optionally ``line`` at ``rev``) in ``repo``."""
    return LinkBuilder(repo).build(path, line, rev)
