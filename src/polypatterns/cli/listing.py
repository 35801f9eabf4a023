# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rendering of the ``--list`` catalogue overview."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from ..constants import PROG_NAME
from ..dispatcher import LanguageListing

NO_LANGUAGES_MESSAGE = "No implemented languages found"


def example_command(pattern: str, language: str, variant: str | None = None, *, prog: str = PROG_NAME) -> str:
    """Return the command line a user would type to run an example."""

    command = f"{prog} --pattern={pattern} --language={language}"
    if variant:
        command = f"{command} --variant={variant}"
    return command


def render_listing(listings: Sequence[LanguageListing], console: Console, *, prog: str = PROG_NAME) -> None:
    """Print implemented languages, their patterns, variants, and examples.

    Args:
        listings: Languages in display order as produced by the dispatcher.
        console: Rich console receiving the output.
        prog: Program name used in example command lines.
    """

    console.print(Text("Implemented languages:", style="bold"))
    if not listings:
        console.print(Text(f"  {NO_LANGUAGES_MESSAGE}", style="yellow"))
        return

    for listing in listings:
        console.print(Text.assemble("  - ", (listing.tag, "bold cyan")))
        console.print("  Available design patterns:")
        for pattern in listing.patterns:
            console.print(Text.assemble("  - ", (pattern.name, "bold")))
            console.print(Text(f"    Example: {example_command(pattern.name, listing.tag, prog=prog)}", style="dim"))
            if pattern.variants:
                console.print(Text(f"    Variants: {', '.join(pattern.variants)}"))
                first = example_command(pattern.name, listing.tag, pattern.variants[0], prog=prog)
                console.print(Text(f"    Example with variant: {first}", style="dim"))
        console.print()


__all__ = ["NO_LANGUAGES_MESSAGE", "example_command", "render_listing"]
