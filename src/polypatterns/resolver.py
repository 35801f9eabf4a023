# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve a pattern/language/variant request into an executable command."""

from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass
from pathlib import Path

from .catalog import PatternCatalog
from .errors import UnknownPatternError, UnsupportedLanguageError, VariantNotFoundError
from .languages import LanguageTable

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedInvocation:
    """Launcher token plus the catalogue path it should run."""

    executable: str
    path: Path

    @property
    def command_line(self) -> str:
        """Return the launcher and path joined by a single space."""

        return f"{self.executable} {self.path}"

    @property
    def argv(self) -> tuple[str, ...]:
        """Return the argument vector handed to the process runner."""

        return (*shlex.split(self.executable), str(self.path))

    def __str__(self) -> str:
        return self.command_line


class CommandResolver:
    """Validate requests against a catalogue and build invocations."""

    def __init__(self, catalog: PatternCatalog, languages: LanguageTable) -> None:
        """Bind the resolver to ``catalog`` and the ``languages`` table.

        Args:
            catalog: Read-only catalogue used to validate names.
            languages: Static table mapping language tags to launchers.
        """

        self._catalog = catalog
        self._languages = languages

    def resolve(self, pattern: str, language: str, variant: str | None = None) -> ResolvedInvocation:
        """Return the invocation running ``pattern`` in ``language``.

        The pattern/language directory itself is not checked here; callers
        verify it before resolving. A supplied variant must exist.

        Args:
            pattern: Pattern directory name.
            language: Language tag; must be present in the language table.
            variant: Optional variant directory name. Empty means no variant.

        Returns:
            ResolvedInvocation: Launcher token and target path.

        Raises:
            UnsupportedLanguageError: If ``language`` has no launcher.
            UnknownPatternError: If ``pattern`` is not in the catalogue.
            VariantNotFoundError: If ``variant`` is given but does not exist.
        """

        launcher = self._languages.launcher(language)
        if launcher is None:
            raise UnsupportedLanguageError(language)
        if pattern not in self._catalog.list_patterns():
            raise UnknownPatternError(pattern)

        path = self._catalog.root / pattern / language
        if variant:
            available = self._catalog.list_variants(pattern, language)
            if variant not in available:
                raise VariantNotFoundError(pattern, language, variant, available)
            path = path / variant

        invocation = ResolvedInvocation(executable=launcher, path=path)
        LOGGER.debug("resolved command=%s", invocation.command_line)
        return invocation


__all__ = ["CommandResolver", "ResolvedInvocation"]
