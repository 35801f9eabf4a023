# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional emoji support.

Informational output goes to stdout, warnings and failures to stderr so the
dispatcher's own diagnostics never mix with a child's captured output.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "polypatterns"

_installed_handler: logging.Handler | None = None


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def info(msg: str, *, use_emoji: bool) -> None:
    """Emit an informational message."""

    print(f"{emoji('ℹ️ ', use_emoji)}{msg}")


def warn(msg: str, *, use_emoji: bool) -> None:
    """Emit a warning message on stderr."""

    print(f"{emoji('⚠️ ', use_emoji)}{msg}", file=sys.stderr)


def fail(msg: str, *, use_emoji: bool) -> None:
    """Emit an error message on stderr."""

    print(f"{emoji('❌ ', use_emoji)}{msg}", file=sys.stderr)


def configure_logging(*, debug: bool) -> logging.Logger:
    """Route ``polypatterns`` library diagnostics to the current stderr.

    Re-running replaces the handler installed by the previous call, so the
    stream always matches ``sys.stderr`` at the time the CLI starts.

    Args:
        debug: Emit ``DEBUG`` records when ``True``; otherwise only warnings.

    Returns:
        logging.Logger: The configured package logger.
    """

    global _installed_handler  # pylint: disable=global-statement

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    _installed_handler = handler
    return logger


__all__ = [
    "configure_logging",
    "emoji",
    "fail",
    "info",
    "warn",
]
