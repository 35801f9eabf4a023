# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option declarations and normalisation for the dispatcher CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import CatalogConfig, OutputConfig
from ..constants import ROOT_ENV
from ..dispatcher import DispatchRequest

PATTERN_OPTION = Annotated[
    str | None,
    typer.Option("--pattern", metavar="NAME", help="Design pattern to run."),
]
LANGUAGE_OPTION = Annotated[
    str | None,
    typer.Option("--language", metavar="TAG", help="Language tag of the implementation."),
]
VARIANT_OPTION = Annotated[
    str | None,
    typer.Option("--variant", metavar="NAME", help="Optional pattern variant."),
]
LIST_OPTION = Annotated[
    bool,
    typer.Option("--list", help="List all available patterns and languages."),
]
ROOT_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        envvar=ROOT_ENV,
        file_okay=False,
        help="Catalogue root holding the pattern directories. Defaults to the current directory.",
    ),
]
NO_COLOR_OPTION = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")]
NO_EMOJI_OPTION = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji glyphs.")]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Print debug diagnostics to stderr.")]


@dataclass(slots=True)
class DispatchCLIOptions:
    """Normalised CLI inputs for a dispatcher run."""

    request: DispatchRequest
    catalog: CatalogConfig
    output: OutputConfig


def build_dispatch_options(
    *,
    pattern: str | None,
    language: str | None,
    variant: str | None,
    show_list: bool,
    root: Path | None,
    no_color: bool,
    no_emoji: bool,
    debug: bool,
) -> DispatchCLIOptions:
    """Construct ``DispatchCLIOptions`` from Typer parameters."""

    catalog = CatalogConfig() if root is None else CatalogConfig(root=root)
    return DispatchCLIOptions(
        request=DispatchRequest(
            pattern=pattern,
            language=language,
            variant=variant,
            list_requested=show_list,
        ),
        catalog=catalog,
        output=OutputConfig(color=not no_color, emoji=not no_emoji, debug=debug),
    )


__all__ = [
    "DEBUG_OPTION",
    "DispatchCLIOptions",
    "LANGUAGE_OPTION",
    "LIST_OPTION",
    "NO_COLOR_OPTION",
    "NO_EMOJI_OPTION",
    "PATTERN_OPTION",
    "ROOT_OPTION",
    "VARIANT_OPTION",
    "build_dispatch_options",
]
