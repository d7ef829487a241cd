"""Single package lookup, from purl to rendered output."""
from __future__ import annotations

import asyncio
import logging

import click
from packageurl import PackageURL

from purlinfo.constants import EXIT_RUNTIME_ERROR, EXIT_SUCCESS
from purlinfo.exceptions import OutputError, PurlInfoError
from purlinfo.models.package import PackageInfo
from purlinfo.output import render_package_info
from purlinfo.resolvers.base import BaseResolver
from purlinfo.scope import DeadlineScope


async def resolve_with_timeout(
    resolver: BaseResolver, purl: PackageURL, timeout: float
) -> PackageInfo:
    """Run one resolution bounded by a timeout.

    The deadline scope is released when this coroutine returns or raises.

    Args:
        resolver: Resolver to query.
        purl: Parsed package URL.
        timeout: Seconds allowed for the lookup.

    Returns:
        The resolved package info.

    Raises:
        PurlInfoError: If resolution fails.
    """
    async with DeadlineScope(timeout) as scope:
        return await resolver.resolve(scope, purl)


def run_with_resolver(
    resolver: BaseResolver,
    logger: logging.Logger,
    purl: PackageURL,
    purl_string: str,
    verbose: bool,
    json_output: bool,
    timeout: float,
) -> int:
    """Look up one package and print it.

    Kept separate from the CLI so tests can pass resolver doubles.

    Args:
        resolver: Resolver to query.
        logger: Logger for debug diagnostics.
        purl: Parsed package URL.
        purl_string: The purl as given on the command line.
        verbose: Include full error details in failure messages.
        json_output: Print JSON instead of human-readable text.
        timeout: Seconds allowed for the lookup.

    Returns:
        EXIT_SUCCESS, or EXIT_RUNTIME_ERROR if the lookup or output failed.
    """
    logger.debug("fetching package info for %s", purl_string)
    try:
        info = asyncio.run(resolve_with_timeout(resolver, purl, timeout))
    except PurlInfoError as e:
        # Error text is only shown when verbose
        logger.debug("lookup for %s failed with %s", purl_string, type(e).__name__)
        if verbose:
            click.echo(f"Error: Failed to get package info: {e}", err=True)
        else:
            click.echo("Error: Failed to get package info", err=True)
            click.echo("Use -v flag for more details", err=True)
        return EXIT_RUNTIME_ERROR

    try:
        click.echo(render_package_info(info, json_output))
    except (OutputError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        return EXIT_RUNTIME_ERROR

    return EXIT_SUCCESS
