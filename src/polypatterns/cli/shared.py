# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for the CLI (console, logging adapter)."""

from __future__ import annotations

from dataclasses import dataclass

import typer
from rich.console import Console
from rich.text import Text

from ..config import OutputConfig
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import warn as core_warn

_DEBUG_PREFIX = "[debug] "


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI output settings."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        """Log a failure message on stderr."""

        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        """Log a warning message on stderr."""

        core_warn(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        """Log an informational message."""

        core_info(message, use_emoji=self.use_emoji)

    def echo(self, message: str, *, err: bool = False, nl: bool = True) -> None:
        """Write ``message`` verbatim using Typer's echo helper.

        Args:
            message: Text to write.
            err: Write to stderr instead of stdout.
            nl: Append a trailing newline.
        """

        typer.echo(message, err=err, nl=nl)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled; ``key=`` names are highlighted."""

        if not self.debug_enabled:
            return
        text = Text(f"{_DEBUG_PREFIX}{message}", style="dim")
        text.stylize("bold cyan", 0, len(_DEBUG_PREFIX))
        text.highlight_regex(r"[\w-]+(?==)", "bold magenta")
        self.console.print(text)


def build_cli_logger(output: OutputConfig) -> CLILogger:
    """Return a ``CLILogger`` configured from ``output``.

    Args:
        output: Colour, emoji, and debug preferences.

    Returns:
        CLILogger: Logger bound to a dedicated Rich console on stderr.
    """

    console = Console(stderr=True, no_color=not output.color, highlight=False, soft_wrap=True)
    return CLILogger(console=console, use_emoji=output.emoji, debug_enabled=output.debug)


__all__ = ["CLILogger", "build_cli_logger"]
