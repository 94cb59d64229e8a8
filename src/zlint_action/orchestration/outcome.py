# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process outcomes and the single-assignment latch that records one per run."""

from __future__ import annotations

import asyncio
import signal as signal_module
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class RunState(StrEnum):
    """Lifecycle of a lint run."""

    NOT_STARTED = "not-started"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    ALREADY_RESOLVED = "already-resolved"


def signal_name(signum: int) -> str:
    """Return the symbolic name of ``signum`` (``"SIGTERM"``) or the number as text."""

    try:
        return signal_module.Signals(signum).name
    except ValueError:
        return str(signum)


@dataclass(frozen=True, slots=True)
class Succeeded:
    """The linter exited with status ``0``."""

    @property
    def succeeded(self) -> bool:
        return True

    def describe(self, program: str = "ZLint") -> str:
        return f"{program} exited successfully"


@dataclass(frozen=True, slots=True)
class FailedWithCode:
    """The linter exited non-zero or was terminated by a signal."""

    code: int | None
    signal: int | None = None

    @property
    def succeeded(self) -> bool:
        return False

    def describe(self, program: str = "ZLint") -> str:
        signal_text = signal_name(self.signal) if self.signal is not None else None
        return f"{program} exited with code {self.code} and signal {signal_text}"


@dataclass(frozen=True, slots=True)
class FailedWithSpawnError:
    """A process could not be started."""

    error: BaseException

    @property
    def succeeded(self) -> bool:
        return False

    def describe(self, program: str = "ZLint") -> str:
        return f"{program} failed to start: {self.error}"


ProcessOutcome: TypeAlias = Succeeded | FailedWithCode | FailedWithSpawnError


def split_returncode(returncode: int) -> tuple[int | None, int | None]:
    """Split an asyncio/subprocess return code into ``(code, signal)``.

    Negative return codes mean the child was killed by that signal on POSIX.
    """

    if returncode < 0:
        return None, -returncode
    return returncode, None


def outcome_for_exit(code: int | None, signal: int | None) -> ProcessOutcome:
    """Return the outcome of a process that exited with ``code`` or ``signal``."""

    if code == 0 and signal is None:
        return Succeeded()
    return FailedWithCode(code=code, signal=signal)


class OutcomeLatch:
    """One-shot channel carrying the authoritative outcome of a run.

    The first call to :meth:`decide` resolves the wrapped future; every later
    call is rejected and reported as :attr:`RunState.ALREADY_RESOLVED`.
    """

    def __init__(self, future: asyncio.Future[ProcessOutcome] | None = None) -> None:
        self._future = future
        self._outcome: ProcessOutcome | None = None

    @property
    def decided(self) -> bool:
        return self._outcome is not None

    @property
    def outcome(self) -> ProcessOutcome | None:
        return self._outcome

    def decide(self, outcome: ProcessOutcome) -> RunState:
        """Record ``outcome`` unless a decision was already made.

        Args:
            outcome: Candidate terminal outcome.

        Returns:
            RunState: The terminal state entered, or ``ALREADY_RESOLVED``.
        """

        if self._outcome is not None:
            return RunState.ALREADY_RESOLVED
        self._outcome = outcome
        if self._future is not None and not self._future.done():
            self._future.set_result(outcome)
        return RunState.SUCCEEDED if outcome.succeeded else RunState.FAILED

    async def wait(self) -> ProcessOutcome:
        """Wait for the decision and return it."""

        if self._future is None:
            self._future = asyncio.get_running_loop().create_future()
            if self._outcome is not None:
                self._future.set_result(self._outcome)
        return await self._future


__all__ = [
    "FailedWithCode",
    "FailedWithSpawnError",
    "OutcomeLatch",
    "ProcessOutcome",
    "RunState",
    "Succeeded",
    "outcome_for_exit",
    "signal_name",
    "split_returncode",
]
