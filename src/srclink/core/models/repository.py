"""Repository configuration models."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "{url}/blob/master/{path}{anchor}"
DEFAULT_ANCHOR = "#L{line}"
DEFAULT_VCS = "git"


class UrlPattern(BaseModel):
    """Templates used to build a link and its line anchor."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="base-url")
    anchor: str = DEFAULT_ANCHOR


class RepositoryDescriptor(BaseModel):
    """A configured source repository and its link templates."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    url_pattern: UrlPattern = Field(default_factory=UrlPattern, alias="url-pattern")
    name: str = ""
    vcs: str = DEFAULT_VCS


class RepoDefaults(BaseModel):
    """Values applied to repositories that leave them unset."""

    model_config = ConfigDict(frozen=True)

    vcs: str = DEFAULT_VCS


class SearchConfig(BaseModel):
    """Top-level config file: repositories keyed by name.

    Keys used only by the indexer (dbpath, poll intervals, ...) are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    repos: dict[str, RepositoryDescriptor] = Field(default_factory=dict)
    repo_defaults: RepoDefaults = Field(default_factory=RepoDefaults, alias="repo-defaults")
