# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for dispatcher mode selection, validation, and listing."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from polypatterns.catalog import InMemoryCatalog
from polypatterns.config import CatalogConfig
from polypatterns.dispatcher import (
    Dispatcher,
    DispatchMode,
    DispatchRequest,
    LanguageListing,
    PatternListing,
)
from polypatterns.errors import (
    LanguageNotImplementedError,
    UnknownPatternError,
    UnsupportedLanguageError,
    VariantNotFoundError,
)
from polypatterns.languages import LanguageTable
from polypatterns.process import ProcessResult

ROOT = Path("/catalogue")


def _dispatcher(languages: LanguageTable, runner: Any, *paths: str, unreadable: tuple[str, ...] = ()) -> Dispatcher:
    catalog = InMemoryCatalog.from_paths(CatalogConfig(root=ROOT), languages, paths, unreadable=unreadable)
    return Dispatcher(catalog, languages, runner=runner)


@pytest.mark.parametrize(
    ("request_", "expected"),
    [
        (DispatchRequest(), DispatchMode.LIST),
        (DispatchRequest(list_requested=True, pattern="builder", language="ts"), DispatchMode.LIST),
        (DispatchRequest(pattern="builder", language="ts"), DispatchMode.RUN),
        (DispatchRequest(pattern="builder", language="ts", variant="functional"), DispatchMode.RUN),
        (DispatchRequest(pattern="builder"), DispatchMode.USAGE),
        (DispatchRequest(language="ts", variant="functional"), DispatchMode.USAGE),
        (DispatchRequest(pattern="", language="ts"), DispatchMode.USAGE),
    ],
)
def test_request_mode(request_: DispatchRequest, expected: DispatchMode) -> None:
    assert request_.mode is expected


def test_listing_groups_patterns_by_language(languages: LanguageTable, recording_runner: Any) -> None:
    dispatcher = _dispatcher(
        languages,
        recording_runner,
        "builder/ts/index.ts",
        "builder/ts/functional/",
        "builder/ts/traditional/",
        "observer/ts/index.ts",
        "observer/py/index.py",
        "observer/js/",
    )

    assert dispatcher.listing() == (
        LanguageListing(
            tag="ts",
            patterns=(
                PatternListing(name="builder", variants=("functional", "traditional")),
                PatternListing(name="observer", variants=()),
            ),
        ),
        LanguageListing(tag="py", patterns=(PatternListing(name="observer", variants=()),)),
    )


@pytest.mark.parametrize("unreadable", [(), ("",)])
def test_listing_of_empty_or_unreadable_root_is_empty(
    languages: LanguageTable,
    recording_runner: Any,
    unreadable: tuple[str, ...],
) -> None:
    paths = ("builder/ts/index.ts",) if unreadable else ()
    dispatcher = _dispatcher(languages, recording_runner, *paths, unreadable=unreadable)

    assert dispatcher.listing() == ()


def test_prepare_validates_in_order(languages: LanguageTable, recording_runner: Any) -> None:
    dispatcher = _dispatcher(languages, recording_runner, "builder/ts/index.ts", "builder/cobol/")

    with pytest.raises(UnknownPatternError):
        dispatcher.prepare("singleton", "cobol", "missing")
    with pytest.raises(LanguageNotImplementedError, match="Language 'py' not implemented for pattern 'builder'"):
        dispatcher.prepare("builder", "py", "missing")
    with pytest.raises(VariantNotFoundError, match="Available variants: none"):
        dispatcher.prepare("builder", "cobol", "missing")
    with pytest.raises(UnsupportedLanguageError):
        dispatcher.prepare("builder", "cobol")


def test_validation_failures_never_spawn(languages: LanguageTable, recording_runner: Any) -> None:
    dispatcher = _dispatcher(languages, recording_runner, "builder/ts/index.ts")

    for pattern, language, variant in (("singleton", "ts", None), ("builder", "go", None), ("builder", "ts", "x")):
        with pytest.raises((UnknownPatternError, LanguageNotImplementedError, VariantNotFoundError)):
            dispatcher.execute(dispatcher.prepare(pattern, language, variant))

    assert recording_runner.calls == []


def test_execute_runs_resolved_argv(languages: LanguageTable, recording_runner: Any) -> None:
    recording_runner.result = ProcessResult(exit_code=0, stdout="built\n", stderr="")
    dispatcher = _dispatcher(languages, recording_runner, "builder/ts/index.ts", "builder/ts/functional/")

    invocation = dispatcher.prepare("builder", "ts", "functional")
    result = dispatcher.execute(invocation)

    assert result.stdout == "built\n"
    assert recording_runner.calls == [("ts-node", "/catalogue/builder/ts/functional")]
