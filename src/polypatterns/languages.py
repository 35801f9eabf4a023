# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static language table mapping tags to launchers and file extensions."""

from __future__ import annotations

import shlex
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final


@dataclass(frozen=True, slots=True)
class LanguageSpec:
    """Launcher and extension registered for a language tag."""

    tag: str
    launcher: str
    extension: str

    def entry_filename(self, stem: str) -> str:
        """Return the conventional entry file name, e.g. ``index.ts``."""

        return f"{stem}.{self.extension}"

    def launcher_argv(self) -> tuple[str, ...]:
        """Return the launcher split into argument tokens."""

        return tuple(shlex.split(self.launcher))


class LanguageTable(Mapping[str, LanguageSpec]):
    """Immutable mapping of language tag to :class:`LanguageSpec`.

    Iteration follows registration order so listings stay stable.
    """

    __slots__ = ("_entries",)

    def __init__(self, specs: Iterable[LanguageSpec]) -> None:
        """Build the table from ``specs``.

        Args:
            specs: Language definitions in display order.

        Raises:
            ValueError: If a tag is registered twice or a launcher is blank.
        """

        entries: dict[str, LanguageSpec] = {}
        for spec in specs:
            if spec.tag in entries:
                raise ValueError(f"Duplicate language tag: {spec.tag}")
            if not spec.launcher_argv():
                raise ValueError(f"Language '{spec.tag}' has an empty launcher")
            entries[spec.tag] = spec
        self._entries: Mapping[str, LanguageSpec] = MappingProxyType(entries)

    def __getitem__(self, tag: str) -> LanguageSpec:
        return self._entries[tag]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LanguageTable({list(self._entries)!r})"

    def launcher(self, tag: str) -> str | None:
        """Return the launcher token for ``tag`` or ``None`` when unknown."""

        spec = self._entries.get(tag)
        return spec.launcher if spec is not None else None

    def extension(self, tag: str) -> str | None:
        """Return the file extension for ``tag`` or ``None`` when unknown."""

        spec = self._entries.get(tag)
        return spec.extension if spec is not None else None


DEFAULT_LANGUAGES: Final[tuple[LanguageSpec, ...]] = (
    LanguageSpec("ts", "ts-node", "ts"),
    LanguageSpec("js", "node", "js"),
    LanguageSpec("py", "python3", "py"),
    LanguageSpec("java", "java", "java"),
    LanguageSpec("go", "go", "go"),
    LanguageSpec("rb", "ruby", "rb"),
    LanguageSpec("php", "php", "php"),
    LanguageSpec("csharp", "dotnet", "cs"),
    LanguageSpec("cpp", "g++", "cpp"),
    LanguageSpec("swift", "swift", "swift"),
    LanguageSpec("kotlin", "kotlin", "kt"),
    LanguageSpec("rust", "cargo run --release", "rs"),
    LanguageSpec("dart", "dart", "dart"),
    # Browser-rendered examples are handed to the platform opener.
    LanguageSpec("html", "open", "html"),
    LanguageSpec("css", "open", "css"),
)


def build_language_table(specs: Iterable[LanguageSpec] | None = None) -> LanguageTable:
    """Return a :class:`LanguageTable` for ``specs`` or the default table."""

    return LanguageTable(DEFAULT_LANGUAGES if specs is None else specs)


__all__ = [
    "DEFAULT_LANGUAGES",
    "LanguageSpec",
    "LanguageTable",
    "build_language_table",
]
