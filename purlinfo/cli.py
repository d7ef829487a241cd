"""CLI entry point for purlinfo."""

from __future__ import annotations

import sys
from typing import Optional

import click

from purlinfo import __version__
from purlinfo.config import load_settings
from purlinfo.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    EXIT_INVALID_ARGS,
    EXIT_INVALID_PURL,
    TOOL_NAME,
)
from purlinfo.exceptions import ConfigurationError, PurlParseError
from purlinfo.log import setup_logging
from purlinfo.purl import parse_purl
from purlinfo.resolvers.base import BaseResolver
from purlinfo.resolvers.ecosystems import EcosystemsResolver
from purlinfo.runner import run_with_resolver


class PurlInfoCommand(click.Command):
    """Click command that reports usage errors with EXIT_INVALID_ARGS."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = EXIT_INVALID_ARGS
            raise


@click.command(cls=PurlInfoCommand)
@click.version_option(
    version=__version__,
    prog_name=TOOL_NAME,
    message="%(prog)s version %(version)s",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output as JSON.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    default=False,
    help="Verbose output (debug logging and full error details).",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help=f"HTTP request timeout in seconds (default: {DEFAULT_TIMEOUT_SECONDS:g}).",
)
@click.option(
    "--email",
    default=None,
    help="Email for the ecosyste.ms polite pool (optional).",
)
@click.option(
    "--base-url",
    default=None,
    help="Base URL of the ecosyste.ms packages API.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.argument("purls", nargs=-1, metavar="PURL")
def main(
    json_output: bool,
    verbose: bool,
    timeout: Optional[float],
    email: Optional[str],
    base_url: Optional[str],
    config_path: Optional[str],
    purls: tuple[str, ...],
) -> None:
    """Get package information from a package URL (purl).

    Looks the package up in the ecosyste.ms packages API and prints its
    name, latest version, licenses and project links.

    \b
    Examples:
        purlinfo pkg:npm/lodash@4.17.21
        purlinfo --json pkg:pypi/requests
        purlinfo -v --timeout 10 pkg:cargo/serde
        purlinfo --email me@example.com pkg:gem/rails
    """
    logger = setup_logging(verbose)

    if not purls:
        click.echo("Error: purl argument is required\n", err=True)
        click.echo(click.get_current_context().get_usage(), err=True)
        sys.exit(EXIT_INVALID_ARGS)
    if len(purls) > 1:
        click.echo(
            f"Error: Too many arguments. Expected 1 purl, got {len(purls)}\n",
            err=True,
        )
        click.echo(click.get_current_context().get_usage(), err=True)
        sys.exit(EXIT_INVALID_ARGS)

    try:
        settings = load_settings(
            config_path, base_url=base_url, email=email, timeout=timeout
        )
    except ConfigurationError as e:
        _display_error(e)
        sys.exit(EXIT_INVALID_ARGS)

    purl_string = purls[0]
    logger.debug("parsing purl %s", purl_string)
    try:
        purl = parse_purl(purl_string)
    except PurlParseError as e:
        click.echo(f"Error: Invalid purl format: {e}", err=True)
        sys.exit(EXIT_INVALID_PURL)

    resolver = create_resolver(settings.base_url, settings.email)

    sys.exit(
        run_with_resolver(
            resolver,
            logger,
            purl,
            purl_string,
            verbose,
            json_output,
            settings.timeout,
        )
    )


def create_resolver(
    base_url: Optional[str] = None, email: Optional[str] = None
) -> BaseResolver:
    """Create the production resolver.

    Args:
        base_url: Optional API base URL override.
        email: Optional polite pool contact email.

    Returns:
        The resolver used by the CLI.
    """
    return EcosystemsResolver(base_url=base_url, email=email)


def _display_error(error: Exception) -> None:
    """Write an error message to stderr."""
    click.echo(f"Error: {type(error).__name__}: {error}", err=True)


if __name__ == "__main__":
    main()
