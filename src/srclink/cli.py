"""CLI for srclink."""

import json
import sys

import click
import structlog

from srclink.config.logging import configure_logging

logger = structlog.get_logger(__name__)


def _load_repository(config_path: str | None, name: str):
    """Load the config and return the named repository, exiting on error."""
    from srclink.config.loader import get_repository, load_config
    from srclink.config.settings import get_settings
    from srclink.core.exceptions import SrcLinkError

    path = config_path or get_settings().config_path
    logger.debug("Resolving repository", name=name, config=path)
    try:
        return get_repository(load_config(path), name)
    except SrcLinkError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


def _resolve_rev(rev: str | None) -> str:
    from srclink.config.settings import get_settings

    return rev if rev is not None else get_settings().default_rev


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """srclink: build browsable links into source repositories."""
    from srclink.config.settings import get_settings

    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.is_production)


@cli.command()
@click.argument("name")
@click.argument("path")
@click.option("--line", "-l", default=None, help="Line number to anchor to")
@click.option("--rev", "-r", default=None, help="Revision (branch, tag or commit)")
@click.option("--config", "-c", "config_path", default=None, help="Config file (default: settings)")
def link(name: str, path: str, line: str | None, rev: str | None, config_path: str | None) -> None:
    """Print the link to PATH in the repository NAME."""
    from srclink.links.builder import LinkBuilder

    repo = _load_repository(config_path, name)
    click.echo(LinkBuilder(repo).build(path, line, _resolve_rev(rev)))


@cli.command()
@click.argument("name")
@click.argument("path")
@click.option("--line", "-l", default=None, help="Line number to anchor to")
@click.option("--rev", "-r", default=None, help="Revision (branch, tag or commit)")
@click.option("--config", "-c", "config_path", default=None, help="Config file (default: settings)")
def parts(name: str, path: str, line: str | None, rev: str | None, config_path: str | None) -> None:
    """Print the normalized link components as JSON."""
    from srclink.links.builder import LinkBuilder

    repo = _load_repository(config_path, name)
    components = LinkBuilder(repo).parts(path, line, _resolve_rev(rev))
    click.echo(json.dumps(components.as_values(), indent=2))


@cli.command()
@click.option("--config", "-c", "config_path", default=None, help="Config file (default: settings)")
def repos(config_path: str | None) -> None:
    """List configured repositories and their normalized URLs."""
    from srclink.config.loader import load_config
    from srclink.config.settings import get_settings
    from srclink.core.exceptions import SrcLinkError
    from srclink.links.normalizer import url_parts

    path = config_path or get_settings().config_path
    try:
        config = load_config(path)
    except SrcLinkError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if not config.repos:
        click.echo("No repositories configured.")
        return

    for repo_name, repo in sorted(config.repos.items()):
        url = url_parts(repo, "").url
        click.echo(f"  {repo_name:<20} [{repo.vcs:>3}] {url}")


@cli.command()
@click.argument("text")
def escape(text: str) -> None:
    """Escape TEXT for literal use inside a regular expression."""
    from srclink.utils.regex import escape_regexp

    click.echo(escape_regexp(text))


if __name__ == "__main__":
    cli()
