# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Logging sinks for the action: GitHub workflow commands or a local console."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Final

from rich.rule import Rule
from rich.text import Text

from .console import stdout_is_terminal, styled_console, workflow_console

GITHUB_ACTIONS_ENV: Final[str] = "GITHUB_ACTIONS"


def escape_data(value: str) -> str:
    """Escape ``value`` for use as the payload of a workflow command.

    Args:
        value: Message text that may contain newlines or percent signs.

    Returns:
        str: Escaped message understood by the GitHub Actions runner.
    """

    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


class ActionLogger(ABC):
    """Sink for user-facing messages emitted while the action runs."""

    @abstractmethod
    def debug(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def info(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def warning(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def error(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def start_group(self, title: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def end_group(self) -> None:
        raise NotImplementedError

    def set_failed(self, message: str | BaseException) -> None:
        """Report ``message`` as the reason the run failed.

        Args:
            message: Failure description or the exception that caused it.
        """

        self.error(str(message))

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        """Wrap the managed block in a collapsible group that is always closed.

        Args:
            title: Group heading shown to the user.

        Yields:
            None: Control returns to the caller inside the open group.
        """

        self.start_group(title)
        try:
            yield
        finally:
            self.end_group()


class WorkflowCommandLogger(ActionLogger):
    """Emit GitHub Actions workflow commands on stdout."""

    def _command(self, name: str, message: str) -> None:
        console = workflow_console()
        console.print(f"::{name}::{escape_data(message)}", markup=False, highlight=False, emoji=False)

    def debug(self, message: str) -> None:
        self._command("debug", message)

    def info(self, message: str) -> None:
        console = workflow_console()
        console.print(message, markup=False, highlight=False, emoji=False)

    def warning(self, message: str) -> None:
        self._command("warning", message)

    def error(self, message: str) -> None:
        self._command("error", message)

    def start_group(self, title: str) -> None:
        self._command("group", title)

    def end_group(self) -> None:
        self._command("endgroup", "")


class ConsoleLogger(ActionLogger):
    """Render messages for an interactive terminal with optional colour and emoji."""

    def __init__(self, *, use_emoji: bool = True, use_color: bool | None = None, verbose: bool = False) -> None:
        self._use_emoji = use_emoji
        self._use_color = stdout_is_terminal() if use_color is None else use_color
        self._verbose = verbose

    def _print_line(self, msg: str, *, style: str | None) -> None:
        console = styled_console(color=self._use_color, emoji=self._use_emoji)
        text = Text(msg)
        if style and self._use_color:
            text.stylize(style)
        console.print(text)

    def debug(self, message: str) -> None:
        if self._verbose:
            self._print_line(message, style="dim")

    def info(self, message: str) -> None:
        self._print_line(f"{emoji('ℹ️ ', self._use_emoji)}{message}", style="cyan")

    def warning(self, message: str) -> None:
        self._print_line(f"{emoji('⚠️ ', self._use_emoji)}{message}", style="yellow")

    def error(self, message: str) -> None:
        self._print_line(f"{emoji('❌ ', self._use_emoji)}{message}", style="red")

    def start_group(self, title: str) -> None:
        console = styled_console(color=self._use_color, emoji=self._use_emoji)
        if self._use_color:
            console.print()
            console.print(Rule(title))
        else:
            console.print(f"\n--- {title} ---", markup=False)

    def end_group(self) -> None:
        if self._use_color:
            console = styled_console(color=self._use_color, emoji=self._use_emoji)
            console.print(Rule())


def running_in_github_actions(env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when the process runs inside a GitHub Actions job."""

    source = os.environ if env is None else env
    return source.get(GITHUB_ACTIONS_ENV, "").lower() == "true"


def create_logger(
    *,
    env: Mapping[str, str] | None = None,
    use_emoji: bool = True,
    use_color: bool | None = None,
    verbose: bool = False,
) -> ActionLogger:
    """Return the logger matching the execution environment.

    Args:
        env: Environment mapping consulted instead of :data:`os.environ`.
        use_emoji: Toggle emoji prefixes for console output.
        use_color: Explicit colour preference; ``None`` follows TTY detection.
        verbose: Show debug messages on the console.

    Returns:
        ActionLogger: Workflow command logger on GitHub runners, console logger elsewhere.
    """

    if running_in_github_actions(env):
        return WorkflowCommandLogger()
    return ConsoleLogger(use_emoji=use_emoji, use_color=use_color, verbose=verbose)


__all__ = [
    "ActionLogger",
    "ConsoleLogger",
    "WorkflowCommandLogger",
    "create_logger",
    "escape_data",
    "running_in_github_actions",
]
