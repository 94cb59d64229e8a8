# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared ``rich`` consoles for the action's loggers."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal, TypeAlias

from rich.console import Console

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def stdout_is_terminal() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


@lru_cache(maxsize=None)
def _build_console(color: bool, emoji: bool, terminal: bool) -> Console:
    styled = color and terminal
    color_system: ColorSystem | None = "auto" if styled else None
    return Console(
        color_system=color_system,
        force_terminal=terminal,
        no_color=not styled,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


def styled_console(*, color: bool, emoji: bool) -> Console:
    """Return the console used for human-readable output.

    Colour is only emitted when requested *and* stdout is a terminal. Consoles
    are shared per combination of settings.

    Args:
        color: Whether ANSI styling was requested.
        emoji: Whether ``:name:`` emoji codes are rendered.

    Returns:
        Console: Shared console for these settings.
    """

    return _build_console(color, emoji, stdout_is_terminal())


def workflow_console() -> Console:
    """Return a console that writes lines verbatim, for the runner to parse."""

    return _build_console(False, False, False)


__all__ = ["stdout_is_terminal", "styled_console", "workflow_console"]
