# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem-backed catalogue scanner."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..config import CatalogConfig
from ..errors import DiscoveryReadError
from ..languages import LanguageTable
from .base import PatternCatalog

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Listing:
    """Directory and file names found in one directory."""

    directories: tuple[str, ...]
    files: frozenset[str]


class FilesystemCatalog(PatternCatalog):
    """Discover patterns, languages, and variants from directory shape.

    The layout is ``root/<pattern>/<language>/`` holding either an entry file
    named ``index.<extension>`` or variant directories shaped the same way.
    """

    def __init__(self, config: CatalogConfig, languages: LanguageTable) -> None:
        """Create a scanner for the catalogue described by ``config``.

        Args:
            config: Catalogue root and directory filtering rules.
            languages: Language table used to recognise language directories.
        """

        self._config = config
        self._languages = languages

    @property
    def root(self) -> Path:
        """Return the catalogue root directory."""

        return self._config.root

    def list_patterns(self) -> tuple[str, ...]:
        """Return pattern names directly under the root, logging unreadable roots."""

        try:
            listing = self._read(self.root)
        except DiscoveryReadError as exc:
            LOGGER.warning("Error reading patterns directory: %s", exc)
            return ()
        return listing.directories

    def list_languages(self) -> frozenset[str]:
        """Return language tags implemented across all patterns."""

        languages: set[str] = set()
        for pattern in self.list_patterns():
            try:
                listing = self._read(self.root / pattern)
            except DiscoveryReadError as exc:
                LOGGER.debug("skipping pattern=%s reason=%s", pattern, exc)
                continue
            languages.update(name for name in listing.directories if name in self._languages)
        return frozenset(languages)

    def list_variants(self, pattern: str, language: str) -> tuple[str, ...]:
        """Return variant directory names for ``pattern``/``language``."""

        base = self.root / pattern / language
        if not base.is_dir():
            return ()
        try:
            return self._read(base).directories
        except DiscoveryReadError as exc:
            LOGGER.warning("Error reading variants for %s/%s: %s", pattern, language, exc)
            return ()

    def has_language(self, pattern: str, language: str) -> bool:
        """Return whether the pattern/language directory exists."""

        return (self.root / pattern / language).is_dir()

    def has_implementation(self, pattern: str, language: str) -> bool:
        """Return whether the pair holds an entry file or a variant."""

        spec = self._languages.get(language)
        if spec is None:
            return False
        base = self.root / pattern / language
        if not base.is_dir():
            return False
        try:
            listing = self._read(base)
        except DiscoveryReadError as exc:
            LOGGER.debug("skipping pattern=%s language=%s reason=%s", pattern, language, exc)
            return False
        if spec.entry_filename(self._config.entry_stem) in listing.files:
            return True
        return bool(listing.directories)

    def _read(self, directory: Path) -> _Listing:
        """Return the listable sub-directories and files of ``directory``.

        Raises:
            DiscoveryReadError: If ``directory`` cannot be listed.
        """

        directories: list[str] = []
        files: set[str] = set()
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.is_dir():
                        if self._config.is_listable(entry.name):
                            directories.append(entry.name)
                    elif entry.is_file():
                        files.add(entry.name)
        except OSError as exc:
            raise DiscoveryReadError(directory, exc) from exc
        return _Listing(directories=tuple(sorted(directories)), files=frozenset(files))


__all__ = ["FilesystemCatalog"]
