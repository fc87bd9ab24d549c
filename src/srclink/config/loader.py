"""Load repository descriptors from a JSON config file."""

import json
from pathlib import Path
from typing import Any

import structlog

from srclink.core.exceptions import ConfigurationError, RepositoryNotFoundError
from srclink.core.models.repository import (
    DEFAULT_ANCHOR,
    DEFAULT_BASE_URL,
    DEFAULT_VCS,
    RepositoryDescriptor,
    SearchConfig,
)

logger = structlog.get_logger(__name__)


def _init_repo(name: str, raw: dict[str, Any], default_vcs: str) -> dict[str, Any]:
    """Fill in values a repository entry leaves unset or empty."""
    repo = dict(raw)
    repo["name"] = name
    if not repo.get("vcs"):
        repo["vcs"] = default_vcs

    pattern = dict(repo.get("url-pattern") or {})
    if not pattern.get("base-url"):
        pattern["base-url"] = DEFAULT_BASE_URL
    if not pattern.get("anchor"):
        pattern["anchor"] = DEFAULT_ANCHOR
    repo["url-pattern"] = pattern
    return repo


def parse_config(data: dict[str, Any]) -> SearchConfig:
    """Build a SearchConfig from decoded JSON, applying defaults.

    pydantic validation errors are ValueErrors and are wrapped too.
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Config must be a JSON object")

    defaults = data.get("repo-defaults") or {}
    if not isinstance(defaults, dict):
        raise ConfigurationError("'repo-defaults' must be a JSON object")
    default_vcs = defaults.get("vcs") or DEFAULT_VCS
    repos = data.get("repos") or {}
    if not isinstance(repos, dict):
        raise ConfigurationError("'repos' must be a JSON object")

    try:
        return SearchConfig(
            repos={
                name: _init_repo(name, raw, default_vcs)
                for name, raw in repos.items()
            },
            repo_defaults={"vcs": default_vcs},
        )
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid repository config: {e}") from e


def load_config(path: str | Path) -> SearchConfig:
    """Read and validate a config file.

    Raises ConfigurationError when the file is missing, is not valid
    JSON, or describes repositories that fail validation.
    """
    config_path = Path(path).expanduser()
    try:
        with config_path.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Config file not found: {config_path}",
            details={"path": str(config_path)},
        ) from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Could not read config file {config_path}: {e}",
            details={"path": str(config_path)},
        ) from e

    config = parse_config(data)
    logger.debug("Config loaded", path=str(config_path), repos=len(config.repos))
    return config


def get_repository(config: SearchConfig, name: str) -> RepositoryDescriptor:
    """Look up a configured repository by name."""
    try:
        return config.repos[name]
    except KeyError:
        raise RepositoryNotFoundError(
            f"Repository not configured: {name}",
            details={"available": sorted(config.repos)},
        ) from None
