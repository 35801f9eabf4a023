# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions raised while discovering, resolving, and running catalogue entries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .constants import NO_VARIANTS_LABEL


class PatternCatalogError(RuntimeError):
    """Base error carrying the exit status the CLI should terminate with."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class DiscoveryReadError(PatternCatalogError):
    """Raised when a catalogue directory exists but cannot be listed.

    Scanners catch this error themselves; it never reaches the CLI.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Unable to read directory '{path}': {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class UnknownPatternError(PatternCatalogError):
    """Raised when a requested pattern has no directory under the root."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"Pattern '{pattern}' not found. Use --list to see available patterns.")
        self.pattern = pattern


class LanguageNotImplementedError(PatternCatalogError):
    """Raised when the pattern exists but has no directory for the language."""

    def __init__(self, pattern: str, language: str) -> None:
        super().__init__(
            f"Language '{language}' not implemented for pattern '{pattern}'. "
            "Use --list to see available options."
        )
        self.pattern = pattern
        self.language = language


class UnsupportedLanguageError(PatternCatalogError):
    """Raised when a language tag has no launcher in the language table."""

    def __init__(self, language: str) -> None:
        super().__init__(f"No executable found for language: {language}")
        self.language = language


class VariantNotFoundError(PatternCatalogError):
    """Raised when a requested variant directory does not exist."""

    def __init__(self, pattern: str, language: str, variant: str, available: Sequence[str]) -> None:
        listed = ", ".join(available) or NO_VARIANTS_LABEL
        super().__init__(
            f"Variant '{variant}' not found for pattern '{pattern}' in language '{language}'. "
            f"Available variants: {listed}"
        )
        self.pattern = pattern
        self.language = language
        self.variant = variant
        self.available = tuple(available)


class SpawnFailureError(PatternCatalogError):
    """Raised when the child process for an invocation cannot be started."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        super().__init__(f"Failed to run '{' '.join(command)}': {reason}")
        self.command = tuple(command)
        self.reason = reason


__all__ = [
    "DiscoveryReadError",
    "LanguageNotImplementedError",
    "PatternCatalogError",
    "SpawnFailureError",
    "UnknownPatternError",
    "UnsupportedLanguageError",
    "VariantNotFoundError",
]
