# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for user-facing logging helpers."""

from __future__ import annotations

import logging

import pytest
from rich.console import Console

from polypatterns import logging as pp_logging
from polypatterns.cli.shared import CLILogger, build_cli_logger
from polypatterns.config import OutputConfig


def test_emoji_is_blank_when_disabled() -> None:
    assert pp_logging.emoji("✅", False) == ""
    assert pp_logging.emoji("✅", True) == "✅"


def test_fail_and_warn_write_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    pp_logging.fail("broken", use_emoji=False)
    pp_logging.warn("careful", use_emoji=True)
    pp_logging.info("Running: ts-node builder", use_emoji=False)

    captured = capsys.readouterr()
    assert captured.err.startswith("broken\n")
    assert captured.err.rstrip().endswith(" careful")
    assert captured.out == "Running: ts-node builder\n"


def test_configure_logging_replaces_previous_handler() -> None:
    first = pp_logging.configure_logging(debug=False)
    second = pp_logging.configure_logging(debug=True)

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG
    assert not second.propagate


def test_cli_logger_debug_is_silent_unless_enabled(capsys: pytest.CaptureFixture[str]) -> None:
    quiet = build_cli_logger(OutputConfig(emoji=False))
    quiet.debug("command=ts-node")
    assert capsys.readouterr().err == ""

    loud = CLILogger(console=Console(stderr=True, no_color=True), use_emoji=False, debug_enabled=True)
    loud.debug("resolved command=ts-node path=/catalogue/builder/ts")
    assert "[debug] resolved command=ts-node path=/catalogue/builder/ts" in capsys.readouterr().err


def test_cli_logger_debug_keeps_message_text_intact() -> None:
    console = Console(stderr=True, record=True, width=200)
    logger = CLILogger(console=console, use_emoji=False, debug_enabled=True)

    logger.debug("root=/catalogue mode=list")

    exported = console.export_text(styles=False)
    assert exported == "[debug] root=/catalogue mode=list\n"


def test_cli_logger_warn_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    build_cli_logger(OutputConfig(emoji=False)).warn("Both pattern and language must be specified.")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Both pattern and language must be specified.\n"
