# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the action commands."""

from __future__ import annotations

import logging

import typer

from ..action import run_action
from ..context import EventContext
from ..errors import ActionError
from ..inputs import BINARY_INPUT, DIFF_ONLY_INPUT, VERSION_INPUT, ActionInputs, get_input
from ..locator import release_url
from ..logging import create_logger
from ..platforms import resolve_platform
from ..versioning import LATEST, parse_version
from .options import (
    ARCH_OPTION,
    BINARY_OPTION,
    COLOR_OPTION,
    DIFF_ONLY_OPTION,
    EMOJI_OPTION,
    PLATFORM_OPTION,
    VERBOSE_OPTION,
    VERSION_OPTION,
)

app = typer.Typer(help="Run ZLint in a CI job.", add_completion=False, no_args_is_help=True)


@app.command("run")
def lint_command(
    binary: BINARY_OPTION = None,
    version: VERSION_OPTION = None,
    diff_only: DIFF_ONLY_OPTION = None,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Locate or download ZLint and lint the current repository."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    overrides = {BINARY_INPUT: binary, VERSION_INPUT: version, DIFF_ONLY_INPUT: diff_only}

    def lookup(name: str) -> str:
        value = overrides.get(name)
        return value.strip() if value is not None else get_input(name)

    logger = create_logger(use_emoji=emoji, use_color=color, verbose=verbose)
    code = run_action(ActionInputs.from_lookup(lookup), event=EventContext.from_environment(), logger=logger)
    raise typer.Exit(code=code)


@app.command("platform")
def platform_command(
    version: VERSION_OPTION = None,
    host: PLATFORM_OPTION = None,
    arch: ARCH_OPTION = None,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
) -> None:
    """Show the release artifact and download URL selected for this host."""

    logger = create_logger(use_emoji=emoji, use_color=color)
    try:
        target = resolve_platform(host, arch)
        resolved_version = parse_version(version or LATEST)
    except ActionError as exc:
        logger.set_failed(exc)
        raise typer.Exit(code=1) from exc
    logger.info(f"Target: {target.artifact_suffix}")
    logger.info(f"Download URL: {release_url(resolved_version, target)}")


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
