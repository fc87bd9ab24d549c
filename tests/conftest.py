"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from srclink.config.settings import get_settings
from srclink.core.models.repository import RepositoryDescriptor, UrlPattern


@pytest.fixture
def github_repo() -> RepositoryDescriptor:
    """A GitHub repository with the usual blob/line pattern."""
    return RepositoryDescriptor(
        name="repo",
        url="https://github.com/org/repo.git",
        url_pattern=UrlPattern(
            base_url="{url}/blob/{rev}/{path}{anchor}",
            anchor="#L{line}",
        ),
    )


@pytest.fixture
def bitbucket_repo() -> RepositoryDescriptor:
    """A Bitbucket Server repository reached over SSH on a custom port."""
    return RepositoryDescriptor(
        name="jira",
        url="ssh://git@bitbucket.example.com:7999/PROJ/jira.git",
        url_pattern=UrlPattern(
            base_url="https:{hostname}/projects/{project}/repos/{repo}/browse/{path}?at={rev}{anchor}",
            anchor="#{line}",
        ),
    )


@pytest.fixture
def config_data() -> dict:
    """Raw config contents as they appear on disk."""
    return {
        "dbpath": "data",
        "max-concurrent-indexers": 2,
        "repo-defaults": {"vcs": "git", "ms-between-poll": 30000},
        "repos": {
            "hound": {
                "url": "https://github.com/hound-search/hound.git",
            },
            "phab": {
                "url": "git@phab.example.com:diffusion/app.git",
                "url-pattern": {
                    "base-url": "https:{hostname}/{project}/browse/master/{path}{anchor}",
                    "anchor": "${line}",
                },
            },
            "docs": {
                "url": "https://hg.example.com/docs",
                "vcs": "hg",
                "url-pattern": {"base-url": "", "anchor": ""},
            },
        },
    }


@pytest.fixture
def config_file(tmp_path: Path, config_data: dict) -> Path:
    """Write config_data to a temporary config.json."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make environment changes visible to get_settings()."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
