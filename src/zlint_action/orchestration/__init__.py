# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Child-process orchestration for lint runs."""

from __future__ import annotations

from .outcome import (
    FailedWithCode,
    FailedWithSpawnError,
    OutcomeLatch,
    ProcessOutcome,
    RunState,
    Succeeded,
)
from .process import ChildProcess, ProcessEvent
from .runner import LintOrchestrator, lint_repository

__all__ = [
    "ChildProcess",
    "FailedWithCode",
    "FailedWithSpawnError",
    "LintOrchestrator",
    "OutcomeLatch",
    "ProcessEvent",
    "ProcessOutcome",
    "RunState",
    "Succeeded",
    "lint_repository",
]
