# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run ZLint over the whole tree or over the files changed by a pull request."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Callable, Sequence
from typing import Final

from ..config import Configuration
from ..context import EventContext
from ..errors import BaseRefError
from ..git import GIT, diff_command, fetch_branch, fetch_command
from ..logging import ActionLogger
from .outcome import (
    FailedWithSpawnError,
    OutcomeLatch,
    ProcessOutcome,
    RunState,
    outcome_for_exit,
)
from .process import ChildProcess, ProcessEvent

LINT_FORMAT_ARGS: Final[tuple[str, ...]] = ("--format", "github")
STDIN_FLAG: Final[str] = "--stdin"
LINTER_NAME: Final[str] = "ZLint"

ChildFactory = Callable[[str], ChildProcess]


class LintOrchestrator:
    """Drive the ZLint process (and its ``git diff`` feeder) to one outcome.

    Exactly one terminal decision is made per run. Whichever of the linter's
    ``error``/``exit`` signals, or a feeder spawn failure, arrives first
    decides it; later signals are only logged.
    """

    def __init__(
        self,
        config: Configuration,
        *,
        event: EventContext,
        logger: ActionLogger,
        git: str = GIT,
        child_factory: ChildFactory = ChildProcess,
    ) -> None:
        self._config = config
        self._event = event
        self._logger = logger
        self._git = git
        self._child_factory = child_factory
        self._state = RunState.NOT_STARTED

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def diff_mode(self) -> bool:
        """Return ``True`` when only files changed by the pull request are linted."""

        return self._config.diff_only and self._event.is_pull_request

    def lint_command(self, *, from_stdin: bool = False) -> list[str]:
        command = [str(self._config.binary), *LINT_FORMAT_ARGS]
        if from_stdin:
            command.append(STDIN_FLAG)
        return command

    def diff_command(self, base: str) -> list[str]:
        return diff_command(base, git=self._git)

    def fetch_command(self, base: str) -> list[str]:
        return fetch_command(base, git=self._git)

    async def run(self) -> ProcessOutcome:
        """Lint the repository and return the authoritative outcome.

        Returns:
            ProcessOutcome: Outcome derived from the linter process.

        Raises:
            BaseRefError: If diff mode cannot determine the base branch.
            GitFetchError: If fetching the base branch fails.
        """

        self._state = RunState.RUNNING
        latch = OutcomeLatch(asyncio.get_running_loop().create_future())
        try:
            if self.diff_mode:
                children = await self._start_diff_scan(latch)
            else:
                children = await self._start_full_scan(latch)
        except Exception:
            self._state = RunState.FAILED
            raise
        outcome = await latch.wait()
        await asyncio.gather(*(child.wait_closed() for child in children))
        return outcome

    async def _start_full_scan(self, latch: OutcomeLatch) -> list[ChildProcess]:
        linter = self._child_factory(LINTER_NAME)
        self._supervise_linter(linter, latch)
        await linter.start(self.lint_command())
        return [linter]

    async def _start_diff_scan(self, latch: OutcomeLatch) -> list[ChildProcess]:
        base = self._event.pull_request_base_ref()
        if not base:
            raise BaseRefError(
                "Could not determine the pull request base branch; diff-only mode needs it to select files."
            )
        await self._fetch_base(base)
        return await self._start_pipeline(base, latch)

    async def _fetch_base(self, base: str) -> None:
        self._logger.info(f"Fetching base branch '{base}'")
        await asyncio.to_thread(fetch_branch, base, git=self._git)

    async def _start_pipeline(self, base: str, latch: OutcomeLatch) -> list[ChildProcess]:
        """Start ``git diff`` with its stdout piped into the linter's stdin.

        If ``git diff`` cannot be spawned the linter is terminated and the
        spawn error becomes the run's failure.
        """

        linter = self._child_factory(LINTER_NAME)
        feeder = self._child_factory("git diff")
        self._supervise_linter(linter, latch)

        read_fd, write_fd = os.pipe()
        try:
            try:
                started = await linter.start(self.lint_command(from_stdin=True), stdin=read_fd)
            finally:
                os.close(read_fd)
            if not started:
                return [linter]

            def on_feeder_error(error: BaseException) -> None:
                linter.terminate()
                self._decide(latch, FailedWithSpawnError(error), children=(linter, feeder), program="git diff")

            def on_feeder_exit(code: int | None, signal: int | None) -> None:
                if code != 0:
                    self._logger.warning(outcome_for_exit(code, signal).describe("git diff"))

            feeder.on(ProcessEvent.ERROR, on_feeder_error)
            feeder.on(ProcessEvent.EXIT, on_feeder_exit)
            await feeder.start(self.diff_command(base), stdout=write_fd)
        finally:
            os.close(write_fd)
        return [linter, feeder]

    def _supervise_linter(self, linter: ChildProcess, latch: OutcomeLatch) -> None:
        def on_error(error: BaseException) -> None:
            self._decide(latch, FailedWithSpawnError(error), children=(linter,))

        def on_exit(code: int | None, signal: int | None) -> None:
            self._decide(latch, outcome_for_exit(code, signal), children=(linter,))

        linter.on(ProcessEvent.ERROR, on_error)
        linter.on(ProcessEvent.EXIT, on_exit)

    def _decide(
        self,
        latch: OutcomeLatch,
        outcome: ProcessOutcome,
        *,
        children: Sequence[ChildProcess],
        program: str = LINTER_NAME,
    ) -> None:
        state = latch.decide(outcome)
        if state is RunState.ALREADY_RESOLVED:
            self._log_late(outcome, program)
            return
        self._state = state
        if not outcome.succeeded:
            self._logger.set_failed(outcome.describe(program))
        for child in children:
            child.remove_all_listeners()
            child.on(ProcessEvent.ERROR, lambda error, name=child.name: self._logger.error(f"{name}: {error}"))
            child.on(
                ProcessEvent.EXIT,
                lambda code, signal, name=child.name: self._log_late(outcome_for_exit(code, signal), name),
            )

    def _log_late(self, outcome: ProcessOutcome, program: str) -> None:
        if not outcome.succeeded:
            self._logger.error(outcome.describe(program))


async def lint_repository(config: Configuration, *, event: EventContext, logger: ActionLogger) -> ProcessOutcome:
    """Run ZLint as described by ``config`` and return the outcome."""

    logger.debug(f"ZLint binary: {config.binary}")
    return await LintOrchestrator(config, event=event, logger=logger).run()


__all__ = ["LINT_FORMAT_ARGS", "LintOrchestrator", "STDIN_FLAG", "lint_repository"]
