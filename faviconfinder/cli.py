"""Entrypoint for the command line interface."""

import typer

from faviconfinder.config import settings
from faviconfinder.config_logging import configure_logging
from faviconfinder.exceptions import FaviconNotFoundError
from faviconfinder.finders import discover_blocking

finder_settings = settings.finder

# CLI Options
filename_option = typer.Option(
    finder_settings.preferred_filename,
    "--filename",
    help="File name or path of the favicon, resolved against the site root",
)

follow_meta_refresh_option = typer.Option(
    finder_settings.follow_meta_refresh,
    "--follow-meta-refresh/--no-follow-meta-refresh",
    help="Follow HTML meta refresh redirects when fetching favicon candidates",
)

cli = typer.Typer(no_args_is_help=True, add_completion=False)


@cli.callback()
def setup():
    """CLI Entrypoint"""
    configure_logging()


@cli.command()
def discover(
    site_url: str = typer.Argument(..., help="URL of the site or page to inspect"),
    filename: str = filename_option,
    follow_meta_refresh: bool = follow_meta_refresh_option,
):
    """Find the favicon of a site, trying the site root and then its root domain.

    Prints the favicon URL and type as JSON, or exits with status 1 if none was found.
    """
    try:
        favicon_url = discover_blocking(site_url, filename, follow_meta_refresh)
    except FaviconNotFoundError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    typer.echo(favicon_url.model_dump_json())


if __name__ == "__main__":
    cli()
