# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read-only catalogue abstraction shared by the scanner implementations."""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class PatternCatalog(Protocol):
    """Protocol describing a read-only view of the pattern catalogue.

    Implementations answer every query from the current state of their
    backing store; nothing is cached between calls.
    """

    @property
    @abstractmethod
    def root(self) -> Path:
        """Return the catalogue root against which invocations are built."""

        raise NotImplementedError

    @abstractmethod
    def list_patterns(self) -> tuple[str, ...]:
        """Return sorted pattern names found directly under the root.

        Returns:
            tuple[str, ...]: Pattern names; empty when the root is unreadable.
        """

        raise NotImplementedError

    @abstractmethod
    def list_languages(self) -> frozenset[str]:
        """Return every known language tag implemented by at least one pattern."""

        raise NotImplementedError

    @abstractmethod
    def list_variants(self, pattern: str, language: str) -> tuple[str, ...]:
        """Return sorted variant names for ``pattern`` in ``language``.

        Args:
            pattern: Pattern directory name.
            language: Language tag directory name.

        Returns:
            tuple[str, ...]: Variant names; empty when the directory is missing
            or unreadable.
        """

        raise NotImplementedError

    @abstractmethod
    def has_language(self, pattern: str, language: str) -> bool:
        """Return whether ``root/pattern/language`` is an existing directory."""

        raise NotImplementedError

    @abstractmethod
    def has_implementation(self, pattern: str, language: str) -> bool:
        """Return whether ``pattern`` ships a runnable ``language`` example.

        A pair counts as implemented when its directory exists and holds either
        the conventional entry file for the language or at least one variant.
        """

        raise NotImplementedError


__all__ = ["PatternCatalog"]
