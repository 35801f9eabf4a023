# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalogue discovery: which patterns, languages, and variants exist."""

from __future__ import annotations

from .base import PatternCatalog
from .filesystem import FilesystemCatalog
from .memory import InMemoryCatalog

__all__ = ["FilesystemCatalog", "InMemoryCatalog", "PatternCatalog"]
