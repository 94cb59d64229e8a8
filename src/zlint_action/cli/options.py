# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer option declarations shared by the CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer

BINARY_OPTION = Annotated[
    str | None,
    typer.Option(
        "--binary",
        help="Path to an existing ZLint binary. Overrides the 'binary' action input.",
        show_default=False,
    ),
]
VERSION_OPTION = Annotated[
    str | None,
    typer.Option(
        "--version",
        help="ZLint release to download ('latest' or vMAJOR.MINOR.PATCH). Overrides the 'version' input.",
        show_default=False,
    ),
]
DIFF_ONLY_OPTION = Annotated[
    str | None,
    typer.Option(
        "--diff-only",
        help="Lint only files changed by the pull request (yes/y/true/1). Overrides the 'diff-only' input.",
        show_default=False,
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in console output."),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Toggle ANSI colour in console output."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show debug messages on the console."),
]
PLATFORM_OPTION = Annotated[
    str | None,
    typer.Option("--platform", help="Platform identifier to resolve instead of the host's.", show_default=False),
]
ARCH_OPTION = Annotated[
    str | None,
    typer.Option("--arch", help="CPU identifier to resolve instead of the host's.", show_default=False),
]

__all__ = [
    "ARCH_OPTION",
    "BINARY_OPTION",
    "COLOR_OPTION",
    "DIFF_ONLY_OPTION",
    "EMOJI_OPTION",
    "PLATFORM_OPTION",
    "VERBOSE_OPTION",
    "VERSION_OPTION",
]
