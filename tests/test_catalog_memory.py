# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the in-memory catalogue."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from polypatterns.catalog import InMemoryCatalog, PatternCatalog
from polypatterns.config import CatalogConfig
from polypatterns.languages import LanguageTable

ROOT = Path("/catalogue")
SCENARIO = ("builder/ts/index.ts", "builder/ts/functional/", "observer/ts/index.ts")


def _catalog(languages: LanguageTable, *paths: str, unreadable: tuple[str, ...] = ()) -> InMemoryCatalog:
    return InMemoryCatalog.from_paths(CatalogConfig(root=ROOT), languages, paths, unreadable=unreadable)


def test_in_memory_catalog_satisfies_protocol(languages: LanguageTable) -> None:
    assert isinstance(_catalog(languages, *SCENARIO), PatternCatalog)


def test_parent_directories_are_implied(languages: LanguageTable) -> None:
    catalog = _catalog(languages, *SCENARIO, ".git/HEAD", "node_modules/x/", "README.md")

    assert catalog.root == ROOT
    assert catalog.list_patterns() == ("builder", "observer")
    assert catalog.list_languages() == frozenset({"ts"})
    assert catalog.list_variants("builder", "ts") == ("functional",)
    assert catalog.has_language("observer", "ts")
    assert not catalog.has_language("observer", "py")


def test_has_implementation_matches_filesystem_rules(languages: LanguageTable) -> None:
    catalog = _catalog(
        languages,
        *SCENARIO,
        "observer/js/",
        "observer/py/main.py",
        "observer/go/push/",
        "observer/cobol/index.cobol",
    )

    assert catalog.has_implementation("builder", "ts")
    assert catalog.has_implementation("observer", "go")
    assert not catalog.has_implementation("observer", "js")
    assert not catalog.has_implementation("observer", "py")
    assert not catalog.has_implementation("observer", "cobol")
    assert "cobol" not in catalog.list_languages()


def test_unreadable_root_fails_open(languages: LanguageTable, caplog: pytest.LogCaptureFixture) -> None:
    catalog = _catalog(languages, *SCENARIO, unreadable=("",))

    with caplog.at_level(logging.WARNING, logger="polypatterns"):
        assert catalog.list_patterns() == ()
    assert catalog.list_languages() == frozenset()
    assert "Error reading patterns directory" in caplog.text


def test_unreadable_directories_fail_open(languages: LanguageTable) -> None:
    catalog = _catalog(languages, *SCENARIO, "observer/py/index.py", unreadable=("observer", "builder/ts"))

    assert catalog.list_patterns() == ("builder", "observer")
    assert catalog.list_languages() == frozenset({"ts"})
    assert catalog.list_variants("builder", "ts") == ()
    assert not catalog.has_implementation("builder", "ts")
