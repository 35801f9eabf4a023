# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrapper around ``subprocess`` execution of example launchers."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; launchers come from the static
# language table and argument lists are passed without ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import SpawnFailureError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Outcome of a finished child process."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        """Return ``True`` when the child exited with status zero."""

        return self.exit_code == 0


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        raise SpawnFailureError(args, f"executable '{head}' was not found on PATH")
    return [resolved, *rest]


def run_command(args: Sequence[str]) -> ProcessResult:
    """Run *args* to completion and capture its output.

    Args:
        args: Launcher tokens followed by the target path.

    Returns:
        ProcessResult: Exit status plus captured stdout and stderr.

    Raises:
        SpawnFailureError: If the executable is missing or cannot be started.
    """

    normalized = _normalize_args(args)
    LOGGER.debug("spawning command=%s", " ".join(normalized))
    try:
        # Bandit: argument lists come from the language table plus a catalogue path.
        completed = subprocess.run(  # nosec B603
            normalized,
            check=False,
            capture_output=True,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        raise SpawnFailureError(args, exc.strerror or str(exc)) from exc

    LOGGER.debug("command finished returncode=%s", completed.returncode)
    return ProcessResult(
        exit_code=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


__all__ = ["ProcessResult", "run_command"]
