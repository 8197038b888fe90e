"""CLI for the GitHub service."""

import logging
from pathlib import Path

import click
import httpx

from .config import load_settings
from .models import GithubDetails
from .service import GitHubService

logger = logging.getLogger(__name__)


def setup_logging(verbose: int) -> None:
    """Setup logging."""
    level = logging.DEBUG if verbose >= 2 else logging.INFO if verbose == 1 else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_url(service: GitHubService, url: str) -> GithubDetails:
    details = service.details_from_dir_url(url)
    if details is None:
        raise click.BadParameter(f"not a GitHub directory URL: {url}", param_hint="URL")
    return details


def http_error(e: httpx.HTTPError) -> click.ClickException:
    if isinstance(e, httpx.HTTPStatusError):
        return click.ClickException(f"GitHub returned {e.response.status_code} for {e.request.url}")
    return click.ClickException(f"Request failed: {e}")


# ============ CLI Group ============

@click.group()
@click.option("--env-file", type=click.Path(dir_okay=False), help=".env file with GITHUB_API_* settings")
@click.option("--retries", "-r", type=int, help="Attempts per request (overrides GITHUB_API_MAX_RETRIES)")
@click.option("-v", "--verbose", count=True, help="Verbosity (-v, -vv)")
@click.pass_context
def cli(ctx: click.Context, env_file: str | None, retries: int | None, verbose: int) -> None:
    """GitHub repository access for the workflow viewer."""
    setup_logging(verbose)
    try:
        settings = load_settings(env_file)
    except ValueError as e:
        raise click.ClickException(f"Invalid settings: {e}") from e
    if retries is not None:
        settings = settings.model_copy(update={"max_retries": retries})
        logger.debug("Max retries overridden: %d", retries)
    obj = ctx.ensure_object(dict)
    obj["service"] = GitHubService.from_settings(settings, transport=obj.get("transport"))


# ============ Commands ============

@cli.command()
@click.argument("url")
@click.pass_context
def parse(ctx, url):
    """Show the parts of a GitHub directory URL."""
    details = parse_url(ctx.obj["service"], url)
    click.echo(f"owner:  {details.owner}")
    click.echo(f"repo:   {details.repo_name}")
    click.echo(f"branch: {details.branch or '-'}")
    click.echo(f"path:   {details.path or '-'}")


@cli.command("ls")
@click.argument("url")
@click.pass_context
def list_contents(ctx, url):
    """List the contents of a GitHub directory."""
    service = ctx.obj["service"]
    details = parse_url(service, url)
    try:
        contents = service.get_contents(details)
    except httpx.HTTPError as e:
        raise http_error(e) from e
    for item in contents:
        click.echo(f"{item.type:<9} {item.size:>8}  {item.path}")


@cli.command()
@click.argument("username")
@click.pass_context
def user(ctx, username):
    """Show a GitHub user's profile."""
    try:
        info = ctx.obj["service"].get_user(username)
    except httpx.HTTPError as e:
        raise http_error(e) from e
    click.echo(f"login: {info.login}")
    click.echo(f"name:  {info.name or '-'}")
    click.echo(f"url:   {info.html_url or '-'}")


@cli.command()
@click.argument("url")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write to file instead of stdout")
@click.pass_context
def download(ctx, url, output):
    """Download a single file addressed by a tree/<branch>/<path> URL."""
    service = ctx.obj["service"]
    details = parse_url(service, url)
    try:
        text = service.download_file(details)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="URL") from e
    except httpx.HTTPError as e:
        raise http_error(e) from e

    if output:
        path = Path(output)
        path.write_text(text, encoding="utf-8")
        click.echo(f"Saved {details.path} to {path}")
    else:
        click.echo(text, nl=False)


if __name__ == "__main__":
    cli()
