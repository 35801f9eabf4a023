# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for catalogue discovery and CLI output."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import ALWAYS_EXCLUDE_DIRS, ENTRY_STEM, HIDDEN_PREFIX


class CatalogConfig(BaseModel):
    """Where the catalogue lives and which directory names are ignored."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(default_factory=Path.cwd)
    hidden_prefix: str = HIDDEN_PREFIX
    excluded_dirs: frozenset[str] = ALWAYS_EXCLUDE_DIRS
    entry_stem: str = ENTRY_STEM

    @field_validator("root")
    @classmethod
    def _expand_root(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("hidden_prefix", "entry_stem")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("excluded_dirs")
    @classmethod
    def _plain_names(cls, value: frozenset[str]) -> frozenset[str]:
        for name in value:
            if not name or "/" in name or "\\" in name:
                raise ValueError(f"excluded directory must be a plain name: {name!r}")
        return value

    def is_listable(self, name: str) -> bool:
        """Return whether a directory called ``name`` takes part in discovery."""

        return not name.startswith(self.hidden_prefix) and name not in self.excluded_dirs


class OutputConfig(BaseModel):
    """Presentation switches for CLI output."""

    model_config = ConfigDict(frozen=True)

    color: bool = True
    emoji: bool = True
    debug: bool = False


__all__ = ["CatalogConfig", "OutputConfig"]
