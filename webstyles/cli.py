"""webstyles CLI: print the style guide's definitions as CSS.

Usage:
    webstyles colors                        # Color custom properties (hex)
    webstyles colors --format rgb           # Colors as rgb() values
    webstyles scales                        # Typographic scale increments
    webstyles scales --json                 # One JSON object per increment
    webstyles colors --renderer http        # Skip the browser, plain HTTP
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import click

from webstyles.colors import COLOR_FORMATS
from webstyles.common.exceptions import StyleGuideException
from webstyles.fetcher import DocumentFetcher, create_fetcher
from webstyles.fetcher.fallback import RENDERERS
from webstyles.formatting import json_lines, stylesheet_lines
from webstyles.style_guide import (
    COLOR_PAGE_URL,
    SCALE_INCREMENTS_URL,
    scrape_colors,
    scrape_scales,
)


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


def fetch_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every scraping command."""
    func = click.option(
        "-v", "--verbose", is_flag=True, help="Verbose logging."
    )(func)
    func = click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Print one JSON object per record instead of CSS.",
    )(func)
    func = click.option(
        "--timeout",
        type=float,
        default=None,
        help="Fetch timeout in seconds (default: none).",
    )(func)
    func = click.option(
        "--browser",
        "browser_type",
        type=click.Choice(["chromium", "firefox", "webkit"]),
        default="chromium",
        show_default=True,
        help="Browser used when rendering with Playwright.",
    )(func)
    func = click.option(
        "--renderer",
        type=click.Choice(RENDERERS),
        default="auto",
        show_default=True,
        help=(
            "How to fetch the page. 'auto' renders with Playwright when "
            "installed and falls back to plain HTTP."
        ),
    )(func)
    return func


def _make_fetcher(
    renderer: str, browser_type: str, timeout: float | None
) -> DocumentFetcher:
    try:
        return create_fetcher(
            renderer=renderer, timeout=timeout, browser_type=browser_type
        )
    except StyleGuideException as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(package_name="webstyles")
def cli() -> None:
    """Scrape the web style guide into CSS custom properties."""


@cli.command()
@click.option(
    "--url",
    default=COLOR_PAGE_URL,
    show_default=True,
    help="Color definitions page.",
)
@click.option(
    "--format",
    "color_format",
    type=click.Choice(COLOR_FORMATS),
    default="hex",
    show_default=True,
    help="Color value format.",
)
@fetch_options
def colors(
    url: str,
    color_format: str,
    renderer: str,
    browser_type: str,
    timeout: float | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Print the color definitions as CSS custom properties."""
    _configure_logging(verbose)
    fetcher = _make_fetcher(renderer, browser_type, timeout)

    try:
        records = asyncio.run(scrape_colors(url, fetcher))
    except StyleGuideException as e:
        raise click.ClickException(str(e)) from e

    lines = (
        json_lines(records)
        if as_json
        else stylesheet_lines(records, color_format)
    )
    for line in lines:
        click.echo(line)


@cli.command()
@click.option(
    "--url",
    default=SCALE_INCREMENTS_URL,
    show_default=True,
    help="Scale increments page.",
)
@fetch_options
def scales(
    url: str,
    renderer: str,
    browser_type: str,
    timeout: float | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Print the typographic scale increments as CSS custom properties."""
    _configure_logging(verbose)
    fetcher = _make_fetcher(renderer, browser_type, timeout)

    async def _go() -> list[Any]:
        return [increment async for increment in scrape_scales(url, fetcher)]

    try:
        increments = asyncio.run(_go())
    except StyleGuideException as e:
        raise click.ClickException(str(e)) from e

    lines = json_lines(increments) if as_json else stylesheet_lines(increments)
    for line in lines:
        click.echo(line)


def main() -> None:
    """Entry point for the ``webstyles`` console script."""
    cli()
