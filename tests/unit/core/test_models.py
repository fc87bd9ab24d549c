"""Tests for core domain models."""

import pytest
from pydantic import ValidationError

from srclink.core.exceptions import ConfigurationError, SrcLinkError
from srclink.core.models.links import UrlComponents
from srclink.core.models.repository import (
    DEFAULT_ANCHOR,
    DEFAULT_BASE_URL,
    RepositoryDescriptor,
    UrlPattern,
)


@pytest.mark.unit
class TestRepositoryDescriptor:
    """Tests for RepositoryDescriptor model."""

    def test_defaults(self) -> None:
        repo = RepositoryDescriptor(url="https://github.com/org/repo")
        assert repo.url_pattern.base_url == DEFAULT_BASE_URL
        assert repo.url_pattern.anchor == DEFAULT_ANCHOR
        assert repo.name == ""
        assert repo.vcs == "git"

    def test_validate_from_config_keys(self) -> None:
        repo = RepositoryDescriptor.model_validate(
            {
                "url": "git@github.com:org/repo.git",
                "url-pattern": {"base-url": "{url}/src/{path}", "anchor": "#{line}"},
            }
        )
        assert repo.url_pattern.base_url == "{url}/src/{path}"
        assert repo.url_pattern.anchor == "#{line}"

    def test_dump_by_alias(self) -> None:
        pattern = UrlPattern(base_url="{url}", anchor="#{line}")
        assert pattern.model_dump(by_alias=True) == {"base-url": "{url}", "anchor": "#{line}"}

    def test_url_required(self) -> None:
        with pytest.raises(ValidationError):
            RepositoryDescriptor()

    def test_frozen(self) -> None:
        repo = RepositoryDescriptor(url="https://github.com/org/repo")
        with pytest.raises(ValidationError):
            repo.url = "https://example.com"


@pytest.mark.unit
class TestUrlComponents:
    """Tests for UrlComponents model."""

    def test_defaults_are_empty(self) -> None:
        assert set(UrlComponents().as_values().values()) == {""}

    def test_value_order(self) -> None:
        assert list(UrlComponents().as_values()) == [
            "url",
            "hostname",
            "port",
            "project",
            "repo",
            "path",
            "rev",
            "anchor",
        ]

    def test_value_equality(self) -> None:
        assert UrlComponents(url="u", rev="r") == UrlComponents(url="u", rev="r")
        assert UrlComponents(url="u") != UrlComponents(url="v")


@pytest.mark.unit
class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_details_default(self) -> None:
        error = ConfigurationError("bad config")
        assert isinstance(error, SrcLinkError)
        assert error.message == "bad config"
        assert error.details == {}
        assert str(error) == "bad config"
