# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from zlint_action.logging import ActionLogger


class RecordingLogger(ActionLogger):
    """Logger that keeps every message for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []
        self.failures: list[str] = []

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def start_group(self, title: str) -> None:
        self.records.append(("group", title))

    def end_group(self) -> None:
        self.records.append(("endgroup", ""))

    def set_failed(self, message: str | BaseException) -> None:
        self.failures.append(str(message))
        super().set_failed(message)

    def messages(self, level: str) -> list[str]:
        return [message for kind, message in self.records if kind == level]


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


ScriptWriter = Callable[[str, str], Path]


@pytest.fixture
def write_script(tmp_path: Path) -> ScriptWriter:
    """Return a helper writing executable ``/bin/sh`` scripts under ``tmp_path/bin``."""

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    def _write(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _write
