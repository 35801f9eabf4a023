# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory catalogue used where touching the filesystem is undesirable."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from ..config import CatalogConfig
from ..languages import LanguageTable
from .base import PatternCatalog

LOGGER = logging.getLogger(__name__)

_Parts = tuple[str, ...]


def _split(entry: str) -> _Parts:
    return PurePosixPath(entry.strip("/")).parts


class InMemoryCatalog(PatternCatalog):
    """Catalogue built from relative path strings.

    Entries ending in ``/`` are directories, anything else is a file; parent
    directories are implied. Paths listed in ``unreadable`` behave like
    directories whose contents cannot be read; an empty string marks the
    root itself.
    """

    def __init__(
        self,
        config: CatalogConfig,
        languages: LanguageTable,
        *,
        directories: Iterable[_Parts] = (),
        files: Iterable[_Parts] = (),
        unreadable: Iterable[_Parts] = (),
    ) -> None:
        self._config = config
        self._languages = languages
        self._files = frozenset(files)
        dirs: set[_Parts] = set(directories)
        for parts in (*dirs, *self._files):
            dirs.update(parts[:index] for index in range(1, len(parts)))
        self._directories = frozenset(dirs)
        self._unreadable = frozenset(unreadable)
        self._root_readable = () not in self._unreadable

    @classmethod
    def from_paths(
        cls,
        config: CatalogConfig,
        languages: LanguageTable,
        paths: Iterable[str],
        *,
        unreadable: Iterable[str] = (),
    ) -> InMemoryCatalog:
        """Build a catalogue from ``paths`` relative to ``config.root``."""

        directories: list[_Parts] = []
        files: list[_Parts] = []
        for entry in paths:
            (directories if entry.endswith("/") else files).append(_split(entry))
        return cls(
            config,
            languages,
            directories=directories,
            files=files,
            unreadable=(_split(entry) for entry in unreadable),
        )

    @property
    def root(self) -> Path:
        return self._config.root

    def list_patterns(self) -> tuple[str, ...]:
        if not self._root_readable:
            LOGGER.warning("Error reading patterns directory: %s", self.root)
            return ()
        return self._child_directories(())

    def list_languages(self) -> frozenset[str]:
        languages: set[str] = set()
        for pattern in self.list_patterns():
            if (pattern,) in self._unreadable:
                continue
            languages.update(name for name in self._child_directories((pattern,)) if name in self._languages)
        return frozenset(languages)

    def list_variants(self, pattern: str, language: str) -> tuple[str, ...]:
        base = (pattern, language)
        if base not in self._directories or base in self._unreadable:
            return ()
        return self._child_directories(base)

    def has_language(self, pattern: str, language: str) -> bool:
        return (pattern, language) in self._directories

    def has_implementation(self, pattern: str, language: str) -> bool:
        spec = self._languages.get(language)
        base = (pattern, language)
        if spec is None or base not in self._directories or base in self._unreadable:
            return False
        if (*base, spec.entry_filename(self._config.entry_stem)) in self._files:
            return True
        return bool(self._child_directories(base))

    def _child_directories(self, parent: _Parts) -> tuple[str, ...]:
        depth = len(parent) + 1
        names = {
            parts[-1]
            for parts in self._directories
            if len(parts) == depth and parts[:-1] == parent and self._config.is_listable(parts[-1])
        }
        return tuple(sorted(names))


__all__ = ["InMemoryCatalog"]
