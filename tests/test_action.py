# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for the action flow."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from zlint_action.action import run_action
from zlint_action.context import EventContext
from zlint_action.inputs import ActionInputs
from zlint_action.locator import BinaryLocator
from zlint_action.platforms import PlatformTarget

posix_only = pytest.mark.skipif(os.name == "nt", reason="uses /bin/sh scripts as stand-in executables")


@posix_only
def test_existing_binary_passing_run(write_script, logger) -> None:  # noqa: ANN001
    linter = write_script("zlint", "exit 0")

    code = run_action(ActionInputs(binary=str(linter)), event=EventContext(event_name="push"), logger=logger)

    assert code == 0
    assert logger.failures == []
    assert ("debug", f"ZLint binary: {linter}") in logger.records


@posix_only
def test_existing_binary_failing_run(write_script, logger) -> None:  # noqa: ANN001
    linter = write_script("zlint", "exit 1")

    code = run_action(ActionInputs(binary=str(linter)), event=EventContext(), logger=logger)

    assert code == 1
    assert logger.failures == ["ZLint exited with code 1 and signal None"]


@posix_only
def test_downloaded_binary_is_run(write_script, tmp_path: Path, logger) -> None:  # noqa: ANN001
    marker = tmp_path / "ran"
    script = write_script("zlint-download", f'touch "{marker}"')
    script.chmod(0o600)
    urls: list[str] = []

    def fake_downloader(url: str) -> Path:
        urls.append(url)
        return script

    locator = BinaryLocator(logger, downloader=fake_downloader, platform=PlatformTarget("linux", "x86_64"))
    code = run_action(ActionInputs(), event=EventContext(), logger=logger, locator=locator)

    assert code == 0
    assert marker.exists()
    assert urls == ["https://github.com/DonIsaac/zlint/releases/latest/download/zlint-linux-x86_64?source=github-actions"]


def test_config_error_fails_without_spawning(tmp_path: Path, logger) -> None:  # noqa: ANN001
    missing = tmp_path / "missing"

    code = run_action(ActionInputs(binary=str(missing)), event=EventContext(), logger=logger)

    assert code == 1
    assert logger.failures == [f"Could not find ZLint binary at '{missing}'."]
    assert ("endgroup", "") in logger.records


def test_invalid_version_fails(logger) -> None:  # noqa: ANN001
    code = run_action(ActionInputs(version="1.2"), event=EventContext(), logger=logger)

    assert code == 1
    assert logger.failures == ["Invalid version: 1.2. Please use 'v.major.minor.patch' or 'latest'."]


def test_filesystem_error_while_locating_fails_the_run(logger) -> None:  # noqa: ANN001
    def failing_downloader(url: str) -> Path:
        raise PermissionError(13, "Permission denied", "/runner/temp")

    locator = BinaryLocator(logger, downloader=failing_downloader, platform=PlatformTarget("linux", "x86_64"))
    code = run_action(ActionInputs(), event=EventContext(), logger=logger, locator=locator)

    assert code == 1
    assert logger.failures == ["[Errno 13] Permission denied: '/runner/temp'"]
    assert ("endgroup", "") in logger.records
