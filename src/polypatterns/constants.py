# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across polypatterns modules."""

from __future__ import annotations

from typing import Final

PROG_NAME: Final[str] = "polypatterns"
ROOT_ENV: Final[str] = "POLYPATTERNS_ROOT"

HIDDEN_PREFIX: Final[str] = "."
ENTRY_STEM: Final[str] = "index"

# Directories that live next to pattern folders but never hold examples.
ALWAYS_EXCLUDE_DIRS: Final[frozenset[str]] = frozenset(
    {
        "node_modules",
        "__pycache__",
    }
)

NO_VARIANTS_LABEL: Final[str] = "none"
