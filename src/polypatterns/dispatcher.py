# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Mode selection, validation, listing, and execution for catalogue requests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from .catalog import PatternCatalog
from .errors import LanguageNotImplementedError, UnknownPatternError, VariantNotFoundError
from .languages import LanguageTable
from .process import ProcessResult, run_command
from .resolver import CommandResolver, ResolvedInvocation

LOGGER = logging.getLogger(__name__)

CommandRunner = Callable[[Sequence[str]], ProcessResult]


class DispatchMode(str, Enum):
    """What a CLI invocation should do."""

    LIST = "list"
    RUN = "run"
    USAGE = "usage"


@dataclass(frozen=True, slots=True)
class DispatchRequest:
    """Selection flags supplied on the command line."""

    pattern: str | None = None
    language: str | None = None
    variant: str | None = None
    list_requested: bool = False

    @property
    def mode(self) -> DispatchMode:
        """Return the mode implied by the supplied flags.

        ``--list`` always wins, and so does an empty selection. Running needs
        both a pattern and a language; anything else only earns a reminder.
        """

        if self.list_requested:
            return DispatchMode.LIST
        if self.pattern is None and self.language is None and self.variant is None:
            return DispatchMode.LIST
        if self.pattern and self.language:
            return DispatchMode.RUN
        return DispatchMode.USAGE


@dataclass(frozen=True, slots=True)
class PatternListing:
    """A pattern implemented in one language and its variants."""

    name: str
    variants: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class LanguageListing:
    """A language tag with every pattern implemented in it."""

    tag: str
    patterns: tuple[PatternListing, ...]


class Dispatcher:
    """Coordinate the catalogue, resolver, and process runner."""

    def __init__(
        self,
        catalog: PatternCatalog,
        languages: LanguageTable,
        *,
        runner: CommandRunner = run_command,
    ) -> None:
        """Create a dispatcher over ``catalog``.

        Args:
            catalog: Read-only catalogue to discover and validate against.
            languages: Static language table shared with the resolver.
            runner: Callable executing an argument vector to completion.
        """

        self._catalog = catalog
        self._languages = languages
        self._resolver = CommandResolver(catalog, languages)
        self._runner = runner

    def listing(self) -> tuple[LanguageListing, ...]:
        """Return implemented languages in table order with their patterns."""

        available = self._catalog.list_languages()
        if not available:
            return ()
        patterns = self._catalog.list_patterns()
        listings: list[LanguageListing] = []
        for tag in self._languages:
            if tag not in available:
                continue
            implemented = tuple(
                PatternListing(name=pattern, variants=self._catalog.list_variants(pattern, tag))
                for pattern in patterns
                if self._catalog.has_implementation(pattern, tag)
            )
            if implemented:
                listings.append(LanguageListing(tag=tag, patterns=implemented))
        return tuple(listings)

    def prepare(self, pattern: str, language: str, variant: str | None = None) -> ResolvedInvocation:
        """Validate a run request and return the invocation to execute.

        Checks short-circuit in order: pattern, language directory, variant,
        then resolution against the language table.

        Raises:
            UnknownPatternError: If the pattern directory does not exist.
            LanguageNotImplementedError: If the pattern lacks the language.
            VariantNotFoundError: If the variant directory does not exist.
            UnsupportedLanguageError: If the language has no launcher.
        """

        if pattern not in self._catalog.list_patterns():
            raise UnknownPatternError(pattern)
        if not self._catalog.has_language(pattern, language):
            raise LanguageNotImplementedError(pattern, language)
        if variant:
            available = self._catalog.list_variants(pattern, language)
            if variant not in available:
                raise VariantNotFoundError(pattern, language, variant, available)
        return self._resolver.resolve(pattern, language, variant)

    def execute(self, invocation: ResolvedInvocation) -> ProcessResult:
        """Run ``invocation`` and return its captured result.

        Raises:
            SpawnFailureError: If the child process cannot be started.
        """

        LOGGER.debug("executing command=%s", invocation.command_line)
        return self._runner(invocation.argv)


__all__ = [
    "CommandRunner",
    "DispatchMode",
    "DispatchRequest",
    "Dispatcher",
    "LanguageListing",
    "PatternListing",
]
