# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

from polypatterns.catalog import FilesystemCatalog
from polypatterns.catalog import filesystem as filesystem_module
from polypatterns.config import CatalogConfig
from polypatterns.languages import LanguageTable, build_language_table
from polypatterns.process import ProcessResult


def _touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class RecordingRunner:
    """Process runner double that records argument vectors instead of spawning."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.result = ProcessResult(exit_code=0, stdout="", stderr="")

    def __call__(self, argv: Sequence[str]) -> ProcessResult:
        self.calls.append(tuple(argv))
        return self.result


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers the CLI installs so later tests can use ``caplog``."""

    yield
    logger = logging.getLogger("polypatterns")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def languages() -> LanguageTable:
    return build_language_table()


@pytest.fixture
def catalog_root(tmp_path: Path) -> Path:
    """Create the builder/observer catalogue used throughout the tests."""

    root = tmp_path / "src"
    _touch(root / "builder" / "ts" / "index.ts", "console.log('builder');\n")
    (root / "builder" / "ts" / "functional").mkdir()
    _touch(root / "observer" / "ts" / "index.ts", "console.log('observer');\n")
    (root / ".git").mkdir()
    (root / "node_modules").mkdir()
    _touch(root / "cli.ts")
    return root


@pytest.fixture
def catalog_config(catalog_root: Path) -> CatalogConfig:
    return CatalogConfig(root=catalog_root)


@pytest.fixture
def filesystem_catalog(catalog_config: CatalogConfig, languages: LanguageTable) -> FilesystemCatalog:
    return FilesystemCatalog(catalog_config, languages)


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def deny_scandir(monkeypatch: pytest.MonkeyPatch) -> Callable[[Path], None]:
    """Return a helper that makes the scanner fail with EACCES on one directory."""

    real_scandir = os.scandir

    def _deny(denied: Path) -> None:
        def _scandir(path: os.PathLike[str] | str) -> object:
            if Path(path) == denied:
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        monkeypatch.setattr(filesystem_module.os, "scandir", _scandir)

    return _deny
