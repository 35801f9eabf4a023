# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point: list the catalogue or run one example."""

from __future__ import annotations

import typer
from rich.console import Console

from ..catalog import FilesystemCatalog
from ..config import CatalogConfig, OutputConfig
from ..constants import PROG_NAME
from ..dispatcher import Dispatcher, DispatchMode
from ..errors import PatternCatalogError
from ..languages import LanguageTable, build_language_table
from ..logging import configure_logging
from ..process import run_command
from .listing import render_listing
from .options import (
    DEBUG_OPTION,
    LANGUAGE_OPTION,
    LIST_OPTION,
    NO_COLOR_OPTION,
    NO_EMOJI_OPTION,
    PATTERN_OPTION,
    ROOT_OPTION,
    VARIANT_OPTION,
    build_dispatch_options,
)
from .shared import CLILogger, build_cli_logger
from .typer_ext import create_typer

USAGE_MESSAGE = "Both pattern and language must be specified."
LIST_HINT = "Use --list to see available patterns and languages."
ERROR_PREFIX = "Error: "

app = create_typer(
    name=PROG_NAME,
    help="List and run design-pattern examples implemented in several languages.",
    add_completion=False,
)


def build_dispatcher(config: CatalogConfig, languages: LanguageTable) -> Dispatcher:
    """Return a dispatcher over the filesystem catalogue at ``config.root``."""

    catalog = FilesystemCatalog(config, languages)
    return Dispatcher(catalog, languages, runner=run_command)


def _stdout_console(output: OutputConfig) -> Console:
    return Console(no_color=not output.color, emoji=output.emoji, highlight=False, soft_wrap=True)


def run_example(
    dispatcher: Dispatcher,
    logger: CLILogger,
    *,
    pattern: str,
    language: str,
    variant: str | None,
) -> int:
    """Validate, resolve, and run one example, returning the exit status.

    Catalogue errors are reported here and converted to their exit code. The
    child's stdout is echoed first, followed by its stderr when present.
    """

    try:
        invocation = dispatcher.prepare(pattern, language, variant)
        logger.info(f"Running: {invocation.command_line}")
        result = dispatcher.execute(invocation)
    except PatternCatalogError as exc:
        logger.fail(f"{ERROR_PREFIX}{exc}")
        return exc.exit_code

    if result.stdout:
        logger.echo(result.stdout, nl=not result.stdout.endswith("\n"))
    if result.stderr:
        logger.echo(f"stderr: {result.stderr}", err=True, nl=not result.stderr.endswith("\n"))
    if result.succeeded:
        return 0
    logger.fail(f"{ERROR_PREFIX}Command exited with status {result.exit_code}")
    # Signal terminations report negative codes; surface them as a plain failure.
    return result.exit_code if result.exit_code > 0 else 1


@app.command()
def dispatch(
    pattern: PATTERN_OPTION = None,
    language: LANGUAGE_OPTION = None,
    variant: VARIANT_OPTION = None,
    show_list: LIST_OPTION = False,
    root: ROOT_OPTION = None,
    no_color: NO_COLOR_OPTION = False,
    no_emoji: NO_EMOJI_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """List the catalogue, or run one pattern in one language.

    Without any selection (or with ``--list``) the implemented languages,
    patterns, and variants are printed. ``--pattern`` together with
    ``--language`` runs that example and streams its output back.
    """

    options = build_dispatch_options(
        pattern=pattern,
        language=language,
        variant=variant,
        show_list=show_list,
        root=root,
        no_color=no_color,
        no_emoji=no_emoji,
        debug=debug,
    )
    logger = build_cli_logger(options.output)
    configure_logging(debug=options.output.debug)

    request = options.request
    dispatcher = build_dispatcher(options.catalog, build_language_table())
    logger.debug(f"root={options.catalog.root} mode={request.mode.value}")

    if request.mode is DispatchMode.LIST:
        render_listing(dispatcher.listing(), _stdout_console(options.output))
        return

    if request.mode is DispatchMode.RUN and request.pattern and request.language:
        exit_code = run_example(
            dispatcher,
            logger,
            pattern=request.pattern,
            language=request.language,
            variant=request.variant,
        )
        if exit_code:
            raise typer.Exit(code=exit_code)
        return

    logger.warn(USAGE_MESSAGE)
    logger.echo(LIST_HINT)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "build_dispatcher", "main", "run_example"]
