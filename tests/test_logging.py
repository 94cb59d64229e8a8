# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the workflow-command and console loggers."""

from __future__ import annotations

import pytest

from zlint_action.console import styled_console, workflow_console
from zlint_action.logging import (
    ConsoleLogger,
    WorkflowCommandLogger,
    create_logger,
    escape_data,
    running_in_github_actions,
)


def test_escape_data() -> None:
    assert escape_data("50% done\r\nnext") == "50%25 done%0D%0Anext"


def test_workflow_commands(capsys: pytest.CaptureFixture[str]) -> None:
    logger = WorkflowCommandLogger()

    with logger.group("Configuring ZLint"):
        logger.info("Downloading [zlint]")
        logger.debug("ZLint binary: /tmp/zlint")
        logger.warning("careful")
    logger.set_failed("ZLint exited with code 1 and signal None\nsee above")

    assert capsys.readouterr().out.splitlines() == [
        "::group::Configuring ZLint",
        "Downloading [zlint]",
        "::debug::ZLint binary: /tmp/zlint",
        "::warning::careful",
        "::endgroup::",
        "::error::ZLint exited with code 1 and signal None%0Asee above",
    ]


def test_group_closes_on_error(capsys: pytest.CaptureFixture[str]) -> None:
    logger = WorkflowCommandLogger()

    with pytest.raises(RuntimeError):
        with logger.group("Configuring ZLint"):
            raise RuntimeError("boom")

    assert capsys.readouterr().out.splitlines() == ["::group::Configuring ZLint", "::endgroup::"]


def test_console_logger_plain_output(capsys: pytest.CaptureFixture[str]) -> None:
    logger = ConsoleLogger(use_emoji=False, use_color=False)

    logger.start_group("Configuring ZLint")
    logger.info("Binary found")
    logger.debug("hidden unless verbose")
    logger.set_failed(ValueError("bad input"))
    logger.end_group()

    out = capsys.readouterr().out
    assert "--- Configuring ZLint ---" in out
    assert "Binary found" in out
    assert "bad input" in out
    assert "hidden unless verbose" not in out


def test_create_logger_selects_by_environment() -> None:
    assert running_in_github_actions({"GITHUB_ACTIONS": "true"})
    assert not running_in_github_actions({})
    assert isinstance(create_logger(env={"GITHUB_ACTIONS": "true"}), WorkflowCommandLogger)
    assert isinstance(create_logger(env={}, use_color=False), ConsoleLogger)


def test_consoles_are_shared_and_uncoloured_off_terminal(capsys: pytest.CaptureFixture[str]) -> None:
    styled = styled_console(color=True, emoji=True)

    assert styled is styled_console(color=True, emoji=True)
    assert workflow_console() is workflow_console()
    assert styled.no_color

    styled.print("[bold]ready[/bold]")
    assert capsys.readouterr().out == "ready\n"
