#!/usr/bin/env python3
"""
hypa - plaintext hypertext to HTML - CLI Interface.

Usage:
    python main.py < page.hypa > page.html
    python main.py -t "Reading list" < page.hypa > page.html
    python main.py render < page.hypa > page.html
    python main.py render page.hypa --title "Reading list" -o page.html
    python main.py blocks page.hypa
"""

import sys
from pathlib import Path

import click
from loguru import logger

sys.path.insert(0, str(Path(__file__).parent))

from hypa import __version__
from hypa.config.global_config import HypaConfig, load_config
from hypa.constants import DEFAULT_LOG_LEVEL, LOG_ROTATION
from hypa.errors import HypaError
from hypa.parsing import parse_hypa
from hypa.render.html import build_html, load_stylesheet
from hypa.utils.console import print_block_summary, print_error

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Errors reported to the user as a one-line message with exit status 1
FATAL_ERRORS = (HypaError, OSError, UnicodeDecodeError)


def setup_logging(
    verbose: bool = False,
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Path | None = None,
) -> None:
    """
    Configures the logger to write to stderr and, optionally, a rotating file.

    Standard output is left untouched because it carries the document.

    Args:
        verbose: If True, sets log level to DEBUG; otherwise uses level.
        level: Log level used when not verbose.
        log_file: Optional path for a rotating log file.
    """
    logger.remove()
    effective = "DEBUG" if verbose else level
    logger.add(sys.stderr, level=effective)
    if log_file:
        logger.add(log_file, rotation=LOG_ROTATION, level=effective)


def configure(config_path: Path | None, verbose: bool) -> HypaConfig:
    """
    Loads the configuration and applies its logging settings.

    Raises:
        ConfigError: If the configuration file is missing or invalid.
    """
    setup_logging(verbose)
    config = load_config(config_path)
    setup_logging(verbose, config.log_level, config.log_file)
    logger.debug(f"Configuration: {config.model_dump()}")
    return config


def fail(error: Exception) -> None:
    """Reports a fatal error and exits with status 1."""
    logger.error(f"{type(error).__name__}: {error}")
    print_error(str(error))
    raise SystemExit(1)


config_option = click.option(
    "-c", "--config", "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="TOML configuration file",
)
verbose_option = click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
title_option = click.option("-t", "--title", help="A header for the output document")
stylesheet_option = click.option(
    "-s", "--stylesheet",
    type=click.Path(path_type=Path, dir_okay=False),
    help="CSS file to inline (overrides config)",
)
source_argument = click.argument(
    "source", type=click.File("r", encoding="utf-8"), default="-"
)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hypa")
@title_option
@stylesheet_option
@config_option
@verbose_option
@click.pass_context
def cli(ctx, title: str | None, stylesheet: Path | None, config_path: Path | None, verbose: bool):
    """
    Interpret a 'hypa' formatted plaintext file and output it as HTML.

    Without a command, standard input is rendered to standard output.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(
            render,
            title=title,
            stylesheet=stylesheet,
            config_path=config_path,
            verbose=verbose,
        )


@cli.command()
@source_argument
@title_option
@stylesheet_option
@click.option(
    "-o", "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Write the document here instead of standard output",
)
@config_option
@verbose_option
def render(source, title: str | None, stylesheet: Path | None, output, config_path: Path | None, verbose: bool):
    """
    Render a hypa document (standard input by default) as HTML.
    """
    try:
        config = configure(config_path, verbose)
        text = source.read()
        blocks = parse_hypa(text)
        css = load_stylesheet(stylesheet or config.stylesheet)
        document = build_html(blocks, title if title is not None else config.title, css)
    except FATAL_ERRORS as e:
        fail(e)

    output.write(document)
    logger.info(f"Wrote {len(blocks)} blocks to {output.name}")


@cli.command()
@source_argument
@config_option
@verbose_option
def blocks(source, config_path: Path | None, verbose: bool):
    """
    Display the blocks parsed from a hypa document.
    """
    try:
        configure(config_path, verbose)
        parsed = parse_hypa(source.read())
    except FATAL_ERRORS as e:
        fail(e)

    print_block_summary(parsed, source.name)


if __name__ == "__main__":
    cli()
