# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Blocking ``git`` invocations needed before ZLint starts."""

from __future__ import annotations

import logging

# Bandit: subprocess usage is intentional; arguments are passed as lists
# without ``shell=True``.
import subprocess  # nosec B404
from typing import Final

from .errors import GitFetchError

GIT: Final[str] = "git"
COMMAND_NOT_FOUND: Final[int] = 127

LOGGER = logging.getLogger(__name__)


def fetch_command(ref: str, *, git: str = GIT) -> list[str]:
    """Return the command that mirrors ``origin/<ref>`` into the local ``<ref>``."""

    return [git, "fetch", "origin", f"{ref}:{ref}"]


def diff_command(ref: str, *, git: str = GIT) -> list[str]:
    """Return the command listing files changed since ``ref`` diverged from ``HEAD``."""

    return [git, "diff", f"{ref}...HEAD", "--name-only"]


def fetch_branch(ref: str, *, git: str = GIT) -> None:
    """Fetch the pull request base branch so it can be diffed against.

    Output goes straight to the job log; nothing is captured.

    Args:
        ref: Branch name on ``origin``.
        git: Git executable to invoke.

    Raises:
        GitFetchError: If git exits non-zero, or with ``127`` when git is missing.
    """

    command = fetch_command(ref, git=git)
    LOGGER.debug("running %s", command)
    try:
        # Bandit: the command is a fixed git invocation built above.
        completed = subprocess.run(command, check=False)  # nosec B603
    except FileNotFoundError as exc:
        raise GitFetchError(ref, COMMAND_NOT_FOUND) from exc
    if completed.returncode != 0:
        raise GitFetchError(ref, completed.returncode)


__all__ = ["COMMAND_NOT_FOUND", "GIT", "diff_command", "fetch_branch", "fetch_command"]
