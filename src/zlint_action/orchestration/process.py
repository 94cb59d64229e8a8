# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Event-emitting handle around an asyncio child process."""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from collections.abc import Callable, Sequence
from enum import StrEnum
from typing import IO, Any, TypeAlias

from .outcome import split_returncode

StreamTarget: TypeAlias = int | IO[Any] | None
Listener: TypeAlias = Callable[..., None]

LOGGER = logging.getLogger(__name__)


def resolve_executable(args: Sequence[str]) -> list[str]:
    """Return ``args`` with a bare program name replaced by its ``PATH`` entry.

    Raises:
        FileNotFoundError: If the program is not on ``PATH``.
    """

    program, *rest = args
    if os.path.isabs(program):
        return [program, *rest]
    located = shutil.which(program)
    if located is None:
        raise FileNotFoundError(f"Executable '{program}' was not found on PATH")
    return [located, *rest]


class ProcessEvent(StrEnum):
    """Signals a child process can deliver.

    ``ERROR`` carries the exception raised while spawning; ``EXIT`` carries
    ``(code, signal)``. Both may fire for the same handle.
    """

    ERROR = "error"
    EXIT = "exit"


class ChildProcess:
    """Spawn one command and deliver its ``error``/``exit`` signals to listeners."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.process: asyncio.subprocess.Process | None = None
        self._listeners: dict[ProcessEvent, list[Listener]] = {event: [] for event in ProcessEvent}
        self._waiter: asyncio.Task[None] | None = None

    def on(self, event: ProcessEvent, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def remove_all_listeners(self) -> None:
        for listeners in self._listeners.values():
            listeners.clear()

    def emit(self, event: ProcessEvent, *args: object) -> bool:
        """Call every listener registered for ``event``.

        Returns:
            bool: ``True`` when at least one listener was called.
        """

        listeners = list(self._listeners[event])
        for listener in listeners:
            listener(*args)
        return bool(listeners)

    @property
    def running(self) -> bool:
        return self.process is not None and self.process.returncode is None

    async def start(
        self,
        args: Sequence[str],
        *,
        stdin: StreamTarget = None,
        stdout: StreamTarget = None,
    ) -> bool:
        """Spawn ``args``; a spawn failure is delivered as an ``error`` event.

        The child inherits the working directory, environment and any
        standard stream not redirected through ``stdin``/``stdout``.

        Returns:
            bool: ``True`` when the process was started.
        """

        try:
            command = resolve_executable(args)
            LOGGER.debug("spawning %s: %s", self.name, command)
            self.process = await asyncio.create_subprocess_exec(
                *command,
                stdin=stdin,
                stdout=stdout,
                cwd=os.getcwd(),
                env=os.environ.copy(),
            )
        except OSError as exc:
            self.emit(ProcessEvent.ERROR, exc)
            return False
        self._waiter = asyncio.create_task(self._watch_exit(self.process))
        return True

    async def _watch_exit(self, process: asyncio.subprocess.Process) -> None:
        returncode = await process.wait()
        code, signal = split_returncode(returncode)
        LOGGER.debug("%s exited: code=%s signal=%s", self.name, code, signal)
        self.emit(ProcessEvent.EXIT, code, signal)

    def terminate(self) -> None:
        """Ask a running child to stop; a no-op once it has exited."""

        if self.process is None or self.process.returncode is not None:
            return
        try:
            self.process.terminate()
        except ProcessLookupError:
            LOGGER.debug("%s already exited", self.name)

    async def wait_closed(self) -> None:
        """Wait until the exit signal has been delivered, if the child started."""

        if self._waiter is not None:
            await self._waiter


__all__ = ["ChildProcess", "Listener", "ProcessEvent", "resolve_executable"]
